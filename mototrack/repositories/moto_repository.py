from __future__ import annotations

from mototrack.models.moto import Moto
from mototrack.repositories.base import SqlAlchemyRepository
from mototrack.schemas.pagination import SortOrder


class MotoRepository(SqlAlchemyRepository[Moto]):
    model = Moto
    sortable = {
        "id": "id",
        "placa": "placa",
        "modelo": "modelo",
        "marca": "marca",
        "ano": "ano",
        "status": "status",
        "dataCriacao": "data_criacao",
    }
    default_sort = [SortOrder(field="placa", direction="asc")]
