"""Business operations on motos."""
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.core.cache import ListCache
from mototrack.core.logging import get_logger
from mototrack.filters.composer import PredicateComposer
from mototrack.filters.specifications import moto_composer
from mototrack.models.filial import Filial
from mototrack.models.moto import Moto
from mototrack.repositories.moto_repository import MotoRepository
from mototrack.schemas.filtering import MotoFilter
from mototrack.schemas.moto import MOTO_REQUEST_RULES, MotoRequest, MotoResponse
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.schemas.validation import ensure_valid
from mototrack.services.base import BaseService

logger = get_logger(__name__)

MOTO_LIST_CACHE_KEY = "motos"


class MotoService(BaseService):
    def __init__(
        self,
        session: AsyncSession,
        composer: PredicateComposer = moto_composer,
        cache: ListCache | None = None,
    ):
        super().__init__(session)
        self._repository = MotoRepository(session)
        self._composer = composer
        self._cache = cache or ListCache(MOTO_LIST_CACHE_KEY)

    async def create(self, request: MotoRequest) -> MotoResponse:
        ensure_valid(request, MOTO_REQUEST_RULES)
        if request.filial_id is not None:
            await self._get_or_404(Filial, request.filial_id)

        moto = Moto(**request.model_dump())
        await self._guard_integrity(
            self._repository.create(moto),
            f"Já existe uma moto com a placa {request.placa}",
        )
        response = MotoResponse.model_validate(moto)
        await self._commit_and_evict()

        logger.info("moto_created", moto_id=response.id, placa=response.placa)
        return response

    async def update(self, id: int, request: MotoRequest) -> MotoResponse:
        await self._get_or_404(Moto, id)
        ensure_valid(request, MOTO_REQUEST_RULES)
        if request.filial_id is not None:
            await self._get_or_404(Filial, request.filial_id)

        moto = await self._guard_integrity(
            self._repository.update(id, request.model_dump()),
            f"Já existe uma moto com a placa {request.placa}",
        )
        response = MotoResponse.model_validate(moto)
        await self._commit_and_evict()

        logger.info("moto_updated", moto_id=id)
        return response

    async def list_all(self) -> list[MotoResponse]:
        cached = await self._cache.get()
        if cached is not None:
            return [MotoResponse.model_validate(item) for item in cached]

        motos = [MotoResponse.model_validate(m) for m in await self._repository.list_all()]
        await self._cache.set([m.model_dump(mode="json") for m in motos])
        return motos

    async def get(self, id: int) -> MotoResponse:
        return MotoResponse.model_validate(await self._get_or_404(Moto, id))

    async def delete(self, id: int) -> None:
        await self._get_or_404(Moto, id)
        await self._guard_integrity(
            self._repository.delete(id),
            "A moto possui eventos ou agendamentos vinculados",
        )
        await self._commit_and_evict()
        logger.info("moto_deleted", moto_id=id)

    async def _commit_and_evict(self) -> None:
        # Eviction must follow the commit, or a listing running in between re-caches the old rows
        await self._session.commit()
        await self._cache.evict()

    async def search(self, filter: MotoFilter, page_request: PageRequest) -> Page[MotoResponse]:
        return await self._search(
            self._repository, self._composer, filter, page_request, MotoResponse.model_validate
        )
