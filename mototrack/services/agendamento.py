"""Business operations on agendamentos."""
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.core.logging import get_logger
from mototrack.filters.composer import PredicateComposer
from mototrack.filters.specifications import agendamento_composer
from mototrack.models.agendamento import Agendamento
from mototrack.models.moto import Moto
from mototrack.repositories.agendamento_repository import AgendamentoRepository
from mototrack.schemas.agendamento import (
    AGENDAMENTO_REQUEST_RULES,
    AgendamentoRequest,
    AgendamentoResponse,
)
from mototrack.schemas.filtering import AgendamentoFilter
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.schemas.validation import ensure_valid
from mototrack.services.base import BaseService

logger = get_logger(__name__)


class AgendamentoService(BaseService):
    def __init__(self, session: AsyncSession, composer: PredicateComposer = agendamento_composer):
        super().__init__(session)
        self._repository = AgendamentoRepository(session)
        self._composer = composer

    async def create(self, request: AgendamentoRequest) -> AgendamentoResponse:
        ensure_valid(request, AGENDAMENTO_REQUEST_RULES)
        await self._get_or_404(Moto, request.moto_id)

        agendamento = await self._repository.create(Agendamento(**request.model_dump()))
        logger.info(
            "agendamento_created",
            agendamento_id=agendamento.id,
            moto_id=agendamento.moto_id,
            data_agendada=agendamento.data_agendada.isoformat(),
        )
        return AgendamentoResponse.model_validate(agendamento)

    async def update(self, id: int, request: AgendamentoRequest) -> AgendamentoResponse:
        await self._get_or_404(Agendamento, id)
        ensure_valid(request, AGENDAMENTO_REQUEST_RULES)
        await self._get_or_404(Moto, request.moto_id)

        agendamento = await self._repository.update(id, request.model_dump())
        logger.info("agendamento_updated", agendamento_id=id)
        return AgendamentoResponse.model_validate(agendamento)

    async def list_all(self) -> list[AgendamentoResponse]:
        return [AgendamentoResponse.model_validate(a) for a in await self._repository.list_all()]

    async def get(self, id: int) -> AgendamentoResponse:
        return AgendamentoResponse.model_validate(await self._get_or_404(Agendamento, id))

    async def delete(self, id: int) -> None:
        await self._get_or_404(Agendamento, id)
        await self._repository.delete(id)
        logger.info("agendamento_deleted", agendamento_id=id)

    async def search(
        self, filter: AgendamentoFilter, page_request: PageRequest
    ) -> Page[AgendamentoResponse]:
        return await self._search(
            self._repository, self._composer, filter, page_request, AgendamentoResponse.model_validate
        )
