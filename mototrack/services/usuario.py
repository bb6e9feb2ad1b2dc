"""Business operations on usuarios."""
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.core.exceptions import ConflictError
from mototrack.core.logging import get_logger
from mototrack.filters.composer import PredicateComposer
from mototrack.filters.specifications import usuario_composer
from mototrack.models.filial import Filial
from mototrack.models.usuario import Usuario
from mototrack.repositories.usuario_repository import UsuarioRepository
from mototrack.schemas.filtering import UsuarioFilter
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.schemas.usuario import USUARIO_REQUEST_RULES, UsuarioRequest, UsuarioResponse
from mototrack.schemas.validation import ensure_valid
from mototrack.security import get_password_hash
from mototrack.services.base import BaseService

logger = get_logger(__name__)


class UsuarioService(BaseService):
    def __init__(self, session: AsyncSession, composer: PredicateComposer = usuario_composer):
        super().__init__(session)
        self._repository = UsuarioRepository(session)
        self._composer = composer

    async def _check_email_free(self, email: str, current_id: int | None = None) -> None:
        existing = await self._repository.get_by_email(email)
        if existing is not None and existing.id != current_id:
            raise ConflictError(
                f"Email já cadastrado: {email}",
                code="CF_EMAIL_EXISTS",
                details={"email": email},
            )

    def _values(self, request: UsuarioRequest) -> dict:
        values = request.model_dump()
        values["senha"] = get_password_hash(request.senha)
        return values

    async def create(self, request: UsuarioRequest) -> UsuarioResponse:
        ensure_valid(request, USUARIO_REQUEST_RULES)
        if request.filial_id is not None:
            await self._get_or_404(Filial, request.filial_id)
        await self._check_email_free(request.email)

        usuario = await self._guard_integrity(
            self._repository.create(Usuario(**self._values(request))),
            f"Email já cadastrado: {request.email}",
        )
        logger.info("usuario_created", usuario_id=usuario.id, perfil=usuario.perfil)
        return UsuarioResponse.model_validate(usuario)

    async def update(self, id: int, request: UsuarioRequest) -> UsuarioResponse:
        await self._get_or_404(Usuario, id)
        ensure_valid(request, USUARIO_REQUEST_RULES)
        if request.filial_id is not None:
            await self._get_or_404(Filial, request.filial_id)
        await self._check_email_free(request.email, current_id=id)

        usuario = await self._guard_integrity(
            self._repository.update(id, self._values(request)),
            f"Email já cadastrado: {request.email}",
        )
        logger.info("usuario_updated", usuario_id=id)
        return UsuarioResponse.model_validate(usuario)

    async def list_all(self) -> list[UsuarioResponse]:
        return [UsuarioResponse.model_validate(u) for u in await self._repository.list_all()]

    async def get(self, id: int) -> UsuarioResponse:
        return UsuarioResponse.model_validate(await self._get_or_404(Usuario, id))

    async def delete(self, id: int) -> None:
        await self._get_or_404(Usuario, id)
        await self._repository.delete(id)
        logger.info("usuario_deleted", usuario_id=id)

    async def search(self, filter: UsuarioFilter, page_request: PageRequest) -> Page[UsuarioResponse]:
        return await self._search(
            self._repository, self._composer, filter, page_request, UsuarioResponse.model_validate
        )
