"""Business operations on filiais."""
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.core.logging import get_logger
from mototrack.filters.composer import PredicateComposer
from mototrack.filters.specifications import filial_composer
from mototrack.models.filial import Filial
from mototrack.repositories.filial_repository import FilialRepository
from mototrack.schemas.filial import FILIAL_REQUEST_RULES, FilialRequest, FilialResponse
from mototrack.schemas.filtering import FilialFilter
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.schemas.validation import ensure_valid
from mototrack.services.base import BaseService

logger = get_logger(__name__)


class FilialService(BaseService):
    def __init__(self, session: AsyncSession, composer: PredicateComposer = filial_composer):
        super().__init__(session)
        self._repository = FilialRepository(session)
        self._composer = composer

    async def create(self, request: FilialRequest) -> FilialResponse:
        ensure_valid(request, FILIAL_REQUEST_RULES)
        filial = await self._repository.create(Filial(**request.model_dump()))
        logger.info("filial_created", filial_id=filial.id, nome=filial.nome)
        return FilialResponse.model_validate(filial)

    async def update(self, id: int, request: FilialRequest) -> FilialResponse:
        await self._get_or_404(Filial, id)
        ensure_valid(request, FILIAL_REQUEST_RULES)
        filial = await self._repository.update(id, request.model_dump())
        logger.info("filial_updated", filial_id=id)
        return FilialResponse.model_validate(filial)

    async def list_all(self) -> list[FilialResponse]:
        return [FilialResponse.model_validate(f) for f in await self._repository.list_all()]

    async def get(self, id: int) -> FilialResponse:
        return FilialResponse.model_validate(await self._get_or_404(Filial, id))

    async def delete(self, id: int) -> None:
        await self._get_or_404(Filial, id)
        await self._guard_integrity(
            self._repository.delete(id),
            "A filial possui motos ou usuários vinculados",
        )
        logger.info("filial_deleted", filial_id=id)

    async def search(self, filter: FilialFilter, page_request: PageRequest) -> Page[FilialResponse]:
        return await self._search(
            self._repository, self._composer, filter, page_request, FilialResponse.model_validate
        )
