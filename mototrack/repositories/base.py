from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.core.pagination import paginate
from mototrack.filters.predicates import Predicate
from mototrack.schemas.pagination import Page, PageRequest, SortOrder

ModelT = TypeVar("ModelT")
IdT = TypeVar("IdT")
T = TypeVar("T")


class Repository(ABC, Generic[ModelT, IdT]):
    @abstractmethod
    async def get(self, id: IdT) -> ModelT | None: ...

    @abstractmethod
    async def list_all(self) -> list[ModelT]: ...

    @abstractmethod
    async def find_page(
        self,
        predicate: Predicate,
        page_request: PageRequest,
        transform: Callable[[ModelT], T],
    ) -> Page[T]: ...

    @abstractmethod
    async def create(self, entity: ModelT) -> ModelT: ...

    @abstractmethod
    async def update(self, id: IdT, updates: dict) -> ModelT | None: ...

    @abstractmethod
    async def delete(self, id: IdT) -> bool: ...


class SqlAlchemyRepository(Repository[ModelT, int]):
    """Repository over one mapped class with an integer ``id`` primary key.

    Subclasses set ``model``, the public sort fields they accept and the
    default ordering of filtered pages.
    """

    model: type[ModelT]
    sortable: dict[str, str] = {"id": "id"}
    default_sort: list[SortOrder] = [SortOrder(field="id")]

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, id: int) -> ModelT | None:
        return await self._session.get(self.model, id)

    async def list_all(self) -> list[ModelT]:
        result = await self._session.execute(
            select(self.model).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def find_page(
        self,
        predicate: Predicate,
        page_request: PageRequest,
        transform: Callable[[ModelT], T],
    ) -> Page[T]:
        columns: dict[str, Any] = {
            public: getattr(self.model, attr) for public, attr in self.sortable.items()
        }
        return await paginate(
            self._session,
            self.model,
            predicate,
            page_request,
            sortable=columns,
            default_sort=self.default_sort,
            transform=transform,
        )

    async def create(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def update(self, id: int, updates: dict) -> ModelT | None:
        entity = await self.get(id)
        if entity:
            for key, value in updates.items():
                setattr(entity, key, value)
            await self._session.flush()
        return entity

    async def delete(self, id: int) -> bool:
        entity = await self.get(id)
        if entity:
            await self._session.delete(entity)
            await self._session.flush()
            return True
        return False
