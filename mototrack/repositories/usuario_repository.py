from __future__ import annotations

from sqlalchemy import select

from mototrack.models.usuario import Usuario
from mototrack.repositories.base import SqlAlchemyRepository
from mototrack.schemas.pagination import SortOrder


class UsuarioRepository(SqlAlchemyRepository[Usuario]):
    model = Usuario
    sortable = {
        "id": "id",
        "nome": "nome",
        "email": "email",
        "perfil": "perfil",
    }
    default_sort = [SortOrder(field="nome", direction="asc")]

    async def get_by_email(self, email: str) -> Usuario | None:
        result = await self._session.execute(select(Usuario).where(Usuario.email == email))
        return result.scalar_one_or_none()
