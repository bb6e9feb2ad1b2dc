"""Business operations on eventos."""
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.core.logging import get_logger
from mototrack.filters.composer import PredicateComposer
from mototrack.filters.specifications import evento_composer
from mototrack.models.evento import Evento
from mototrack.models.moto import Moto
from mototrack.repositories.evento_repository import EventoRepository
from mototrack.schemas.evento import EVENTO_REQUEST_RULES, EventoRequest, EventoResponse
from mototrack.schemas.filtering import EventoFilter
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.schemas.validation import ensure_valid
from mototrack.services.base import BaseService

logger = get_logger(__name__)


class EventoService(BaseService):
    def __init__(self, session: AsyncSession, composer: PredicateComposer = evento_composer):
        super().__init__(session)
        self._repository = EventoRepository(session)
        self._composer = composer

    def _values(self, request: EventoRequest) -> dict:
        values = request.model_dump()
        values["data_hora"] = request.data_hora or datetime.now()
        return values

    async def create(self, request: EventoRequest) -> EventoResponse:
        ensure_valid(request, EVENTO_REQUEST_RULES)
        await self._get_or_404(Moto, request.moto_id)

        evento = await self._repository.create(Evento(**self._values(request)))
        logger.info("evento_created", evento_id=evento.id, moto_id=evento.moto_id, tipo=evento.tipo)
        return EventoResponse.model_validate(evento)

    async def update(self, id: int, request: EventoRequest) -> EventoResponse:
        await self._get_or_404(Evento, id)
        ensure_valid(request, EVENTO_REQUEST_RULES)
        await self._get_or_404(Moto, request.moto_id)

        evento = await self._repository.update(id, self._values(request))
        logger.info("evento_updated", evento_id=id)
        return EventoResponse.model_validate(evento)

    async def list_all(self) -> list[EventoResponse]:
        return [EventoResponse.model_validate(e) for e in await self._repository.list_all()]

    async def get(self, id: int) -> EventoResponse:
        return EventoResponse.model_validate(await self._get_or_404(Evento, id))

    async def delete(self, id: int) -> None:
        await self._get_or_404(Evento, id)
        await self._repository.delete(id)
        logger.info("evento_deleted", evento_id=id)

    async def search(self, filter: EventoFilter, page_request: PageRequest) -> Page[EventoResponse]:
        return await self._search(
            self._repository, self._composer, filter, page_request, EventoResponse.model_validate
        )
