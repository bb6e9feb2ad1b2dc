"""Field rules and composers for each resource.

The event date range constrains ``data_hora``, the attribute the event is
actually stored under.
"""
from mototrack.filters.composer import (
    PredicateComposer,
    between,
    contains,
    exact,
    exact_ignore_case,
    related,
)

MOTO_RULES = (
    exact("id"),
    contains("placa"),
    contains("modelo"),
    contains("marca"),
    exact_ignore_case("status"),
    between("ano_min", "ano_max", path=("ano",)),
    between("data_criacao_inicio", "data_criacao_fim", path=("data_criacao",), whole_days=True),
    related("filial_id", path=("filial", "id")),
)

FILIAL_RULES = (
    exact("id"),
    contains("nome"),
    contains("bairro"),
    contains("cidade"),
    exact_ignore_case("estado"),
    contains("cep"),
)

USUARIO_RULES = (
    exact("id"),
    related("filial_id", path=("filial", "id")),
    contains("nome"),
    contains("email"),
    exact_ignore_case("perfil"),
)

EVENTO_RULES = (
    exact("id"),
    related("moto_id", path=("moto", "id")),
    exact_ignore_case("tipo"),
    contains("motivo"),
    contains("localizacao"),
    between("data_inicio", "data_fim", path=("data_hora",), whole_days=True),
)

AGENDAMENTO_RULES = (
    exact("id"),
    related("moto_id", path=("moto", "id")),
    contains("descricao"),
    between("data_inicio", "data_fim", path=("data_agendada",), whole_days=True),
)

moto_composer = PredicateComposer("moto", MOTO_RULES)
filial_composer = PredicateComposer("filial", FILIAL_RULES)
usuario_composer = PredicateComposer("usuario", USUARIO_RULES)
evento_composer = PredicateComposer("evento", EVENTO_RULES)
agendamento_composer = PredicateComposer("agendamento", AGENDAMENTO_RULES)
