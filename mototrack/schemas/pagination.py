from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from mototrack.schemas.base import CamelModel

T = TypeVar('T')


class SortOrder(BaseModel):
    field: str
    direction: Literal["asc", "desc"] = "asc"

    def __str__(self) -> str:
        return f"{self.field},{self.direction}"


class PageRequest(BaseModel):
    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1, le=100)
    sort: list[SortOrder] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(CamelModel, Generic[T]):
    items: list[T]
    total: int
    page: int = 0
    size: int = 20
    total_pages: int = 0
    has_next: bool = False
    has_prev: bool = False
    sort: list[str] = Field(default_factory=list)
    filters_applied: dict | None = None
