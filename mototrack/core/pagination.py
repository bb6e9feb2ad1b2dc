"""Offset pagination over a predicate-restricted query."""
import math
from typing import Any, Callable, Iterable, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.core.exceptions import ValidationError
from mototrack.filters.predicates import Predicate
from mototrack.schemas.pagination import Page, PageRequest, SortOrder

T = TypeVar('T')


def parse_sort(values: Iterable[str] | None, allowed: Iterable[str]) -> list[SortOrder]:
    """Parse ``field`` / ``field,asc`` / ``field,desc`` sort parameters.

    Raises ValidationError for fields outside ``allowed`` or unknown directions.
    """
    allowed = set(allowed)
    orders = []
    for raw in values or []:
        parts = [p.strip() for p in raw.split(",") if p.strip()]
        if not parts:
            continue
        field, direction = parts[0], (parts[1].lower() if len(parts) > 1 else "asc")
        if field not in allowed:
            raise ValidationError(
                "sort",
                f"Campo de ordenação inválido: {field}",
                {"field": "sort", "allowed": sorted(allowed)},
            )
        if direction not in ("asc", "desc") or len(parts) > 2:
            raise ValidationError(
                "sort",
                f"Direção de ordenação inválida: {raw}",
                {"field": "sort"},
            )
        orders.append(SortOrder(field=field, direction=direction))
    return orders


async def paginate(
    session: AsyncSession,
    model: type,
    predicate: Predicate,
    page_request: PageRequest,
    sortable: dict[str, Any],
    default_sort: list[SortOrder],
    transform: Callable[[Any], T],
    options: tuple = (),
) -> Page[T]:
    """
    Run ``predicate`` against ``model`` and return one page of results.

    Args:
        sortable: public sort field name -> mapped column
        default_sort: used when the request carries no sort
        transform: maps each ORM row to its response object
        options: loader options applied to the row query
    """
    clause = predicate.compile(model)
    orders = page_request.sort or default_sort

    total = await session.scalar(select(func.count()).select_from(model).where(clause))
    total = total or 0

    order_by = [
        sortable[o.field].desc() if o.direction == "desc" else sortable[o.field].asc()
        for o in orders
    ]
    # id tie-breaker keeps pages stable across requests
    order_by.append(model.id.asc())

    query = (
        select(model)
        .options(*options)
        .where(clause)
        .order_by(*order_by)
        .offset(page_request.offset)
        .limit(page_request.size)
    )
    result = await session.execute(query)
    rows = result.scalars().all()

    total_pages = math.ceil(total / page_request.size) if total else 0

    return Page(
        items=[transform(row) for row in rows],
        total=total,
        page=page_request.page,
        size=page_request.size,
        total_pages=total_pages,
        has_next=page_request.page + 1 < total_pages,
        has_prev=page_request.page > 0,
        sort=[str(o) for o in orders],
    )
