"""Dynamic filter composition for the list-with-filter endpoints."""
from mototrack.filters.composer import FieldKind, FieldRule, PredicateComposer
from mototrack.filters.predicates import Predicate, evaluate, to_clause
from mototrack.filters.specifications import (
    agendamento_composer,
    evento_composer,
    filial_composer,
    moto_composer,
    usuario_composer,
)

__all__ = [
    "FieldKind",
    "FieldRule",
    "PredicateComposer",
    "Predicate",
    "evaluate",
    "to_clause",
    "agendamento_composer",
    "evento_composer",
    "filial_composer",
    "moto_composer",
    "usuario_composer",
]
