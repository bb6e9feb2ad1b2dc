"""Predicate tree used to restrict entity queries.

A predicate is a small immutable tree of comparisons over attribute paths. An
attribute path is a tuple of attribute names: ``("placa",)`` for a column of
the entity itself, ``("filial", "id")`` for the identifier of a related entity
one relationship away.

Every node can be interpreted two ways:

- ``matches(entity)`` evaluates it against a plain Python object, which is
  what the tests use when no database is around.
- ``compile(model)`` turns it into a SQLAlchemy boolean clause for ``model``.

A missing (``None``) attribute never satisfies a comparison, mirroring SQL
``NULL`` semantics.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from sqlalchemy import and_, func, true
from sqlalchemy.sql.elements import ColumnElement

AttributePath = tuple[str, ...]


def resolve(entity: Any, path: AttributePath) -> Any:
    """Follow ``path`` on ``entity``; ``None`` anywhere along the way yields ``None``."""
    value = entity
    for name in path:
        if value is None:
            return None
        value = getattr(value, name, None)
    return value


def _compile_on_path(
    model: type,
    path: AttributePath,
    build: Callable[[Any], ColumnElement[bool]],
) -> ColumnElement[bool]:
    if len(path) == 1:
        return build(getattr(model, path[0]))
    if len(path) == 2:
        relationship_attr = getattr(model, path[0])
        target = relationship_attr.property.mapper.class_
        return relationship_attr.has(build(getattr(target, path[1])))
    raise ValueError(f"Attribute paths span at most one relationship, got {'.'.join(path)}")


@dataclass(frozen=True)
class Equals:
    path: AttributePath
    value: Any

    def matches(self, entity: Any) -> bool:
        actual = resolve(entity, self.path)
        return actual is not None and actual == self.value

    def compile(self, model: type) -> ColumnElement[bool]:
        return _compile_on_path(model, self.path, lambda column: column == self.value)

    @property
    def constraint_count(self) -> int:
        return 1


@dataclass(frozen=True)
class EqualsIgnoreCase:
    path: AttributePath
    value: str

    def matches(self, entity: Any) -> bool:
        actual = resolve(entity, self.path)
        return actual is not None and str(actual).lower() == self.value.lower()

    def compile(self, model: type) -> ColumnElement[bool]:
        return _compile_on_path(
            model, self.path, lambda column: func.lower(column) == self.value.lower()
        )

    @property
    def constraint_count(self) -> int:
        return 1


@dataclass(frozen=True)
class ContainsIgnoreCase:
    path: AttributePath
    value: str

    def matches(self, entity: Any) -> bool:
        actual = resolve(entity, self.path)
        return actual is not None and self.value.lower() in str(actual).lower()

    def compile(self, model: type) -> ColumnElement[bool]:
        # autoescape keeps % and _ typed by the user from acting as wildcards
        return _compile_on_path(
            model,
            self.path,
            lambda column: func.lower(column).contains(self.value.lower(), autoescape=True),
        )

    @property
    def constraint_count(self) -> int:
        return 1


@dataclass(frozen=True)
class GreaterOrEqual:
    path: AttributePath
    value: Any

    def matches(self, entity: Any) -> bool:
        actual = resolve(entity, self.path)
        return actual is not None and actual >= self.value

    def compile(self, model: type) -> ColumnElement[bool]:
        return _compile_on_path(model, self.path, lambda column: column >= self.value)

    @property
    def constraint_count(self) -> int:
        return 1


@dataclass(frozen=True)
class LessOrEqual:
    path: AttributePath
    value: Any

    def matches(self, entity: Any) -> bool:
        actual = resolve(entity, self.path)
        return actual is not None and actual <= self.value

    def compile(self, model: type) -> ColumnElement[bool]:
        return _compile_on_path(model, self.path, lambda column: column <= self.value)

    @property
    def constraint_count(self) -> int:
        return 1


@dataclass(frozen=True)
class MatchAll:
    """Always-true predicate: the unconstrained query."""

    def matches(self, entity: Any) -> bool:
        return True

    def compile(self, model: type) -> ColumnElement[bool]:
        return true()

    @property
    def constraint_count(self) -> int:
        return 0


@dataclass(frozen=True)
class And:
    terms: tuple[Predicate, ...]

    def matches(self, entity: Any) -> bool:
        return all(term.matches(entity) for term in self.terms)

    def compile(self, model: type) -> ColumnElement[bool]:
        if not self.terms:
            return true()
        return and_(*(term.compile(model) for term in self.terms))

    @property
    def constraint_count(self) -> int:
        return sum(term.constraint_count for term in self.terms)


Predicate = Union[
    Equals,
    EqualsIgnoreCase,
    ContainsIgnoreCase,
    GreaterOrEqual,
    LessOrEqual,
    MatchAll,
    And,
]


def conjunction(terms: list[Predicate]) -> Predicate:
    """AND-combine ``terms``; no terms means match everything."""
    if not terms:
        return MatchAll()
    if len(terms) == 1:
        return terms[0]
    return And(tuple(terms))


def evaluate(predicate: Predicate, entity: Any) -> bool:
    return predicate.matches(entity)


def to_clause(predicate: Predicate, model: type) -> ColumnElement[bool]:
    return predicate.compile(model)
