from __future__ import annotations

from mototrack.models.agendamento import Agendamento
from mototrack.repositories.base import SqlAlchemyRepository
from mototrack.schemas.pagination import SortOrder


class AgendamentoRepository(SqlAlchemyRepository[Agendamento]):
    model = Agendamento
    sortable = {
        "id": "id",
        "dataAgendada": "data_agendada",
        "descricao": "descricao",
        "dataCriacao": "data_criacao",
    }
    default_sort = [SortOrder(field="dataAgendada", direction="asc")]
