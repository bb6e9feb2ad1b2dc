from __future__ import annotations

from mototrack.models.filial import Filial
from mototrack.repositories.base import SqlAlchemyRepository
from mototrack.schemas.pagination import SortOrder


class FilialRepository(SqlAlchemyRepository[Filial]):
    model = Filial
    sortable = {
        "id": "id",
        "nome": "nome",
        "bairro": "bairro",
        "cidade": "cidade",
        "estado": "estado",
        "cep": "cep",
    }
    default_sort = [SortOrder(field="nome", direction="asc")]
