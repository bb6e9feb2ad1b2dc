from __future__ import annotations

from mototrack.models.evento import Evento
from mototrack.repositories.base import SqlAlchemyRepository
from mototrack.schemas.pagination import SortOrder


class EventoRepository(SqlAlchemyRepository[Evento]):
    model = Evento
    sortable = {
        "id": "id",
        "tipo": "tipo",
        "motivo": "motivo",
        "dataHora": "data_hora",
        "localizacao": "localizacao",
    }
    default_sort = [SortOrder(field="dataHora", direction="desc")]
