from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.core.exceptions import ConflictError, NotFoundError
from mototrack.core.logging import get_logger
from mototrack.core.metrics import track_filter_query
from mototrack.filters.composer import PredicateComposer
from mototrack.repositories.base import SqlAlchemyRepository
from mototrack.schemas.filtering import BaseFilter
from mototrack.schemas.pagination import Page, PageRequest

logger = get_logger(__name__)

T = TypeVar("T")
M = TypeVar("M")


class BaseService:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get_or_404(self, model: type[M], id: int) -> M:
        result = await self._session.get(model, id)
        if not result:
            raise NotFoundError.for_id(model.__name__, id)
        return result

    async def _guard_integrity(self, operation: Awaitable[T], conflict_message: str) -> T:
        """Await a write, turning unique/foreign-key violations into ConflictError."""
        try:
            return await operation
        except IntegrityError as e:
            logger.warning("integrity_conflict", message=conflict_message, error=str(e.orig))
            raise ConflictError(conflict_message) from e

    async def _search(
        self,
        repository: SqlAlchemyRepository,
        composer: PredicateComposer,
        filter: BaseFilter,
        page_request: PageRequest,
        transform: Callable[[Any], T],
    ) -> Page[T]:
        predicate = composer.build_predicate(filter)
        applied = filter.applied()

        track_filter_query(composer.entity, predicate.constraint_count)
        logger.info(
            "filtered_search",
            entity=composer.entity,
            filters=applied,
            constraints=predicate.constraint_count,
            page=page_request.page,
            size=page_request.size,
        )

        page = await repository.find_page(predicate, page_request, transform)
        page.filters_applied = applied or None
        return page
