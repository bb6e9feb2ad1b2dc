"""Turn optional-field filter objects into predicates.

Each entity declares an ordered list of ``FieldRule``. ``PredicateComposer``
walks the rules, reads the matching attribute of the filter object and emits
zero, one or two atomic constraints per rule. The result is the AND of
everything emitted, or ``MatchAll`` when the filter is empty.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any

from mototrack.filters.predicates import (
    AttributePath,
    ContainsIgnoreCase,
    Equals,
    EqualsIgnoreCase,
    GreaterOrEqual,
    LessOrEqual,
    Predicate,
    conjunction,
)


class FieldKind(str, Enum):
    EXACT = "exact"
    EXACT_IGNORE_CASE = "exact_ignore_case"
    CONTAINS = "contains"
    RANGE = "range"
    RELATED = "related"


@dataclass(frozen=True)
class FieldRule:
    kind: FieldKind
    field: str
    path: AttributePath
    # RANGE only: ``field`` holds the lower bound, ``upper_field`` the upper one
    upper_field: str | None = None
    # RANGE only: date bounds cover whole days of a timestamp attribute
    whole_days: bool = False


def exact(field: str, path: AttributePath | None = None) -> FieldRule:
    return FieldRule(FieldKind.EXACT, field, path or (field,))


def exact_ignore_case(field: str, path: AttributePath | None = None) -> FieldRule:
    return FieldRule(FieldKind.EXACT_IGNORE_CASE, field, path or (field,))


def contains(field: str, path: AttributePath | None = None) -> FieldRule:
    return FieldRule(FieldKind.CONTAINS, field, path or (field,))


def between(lower: str, upper: str, path: AttributePath, whole_days: bool = False) -> FieldRule:
    return FieldRule(FieldKind.RANGE, lower, path, upper_field=upper, whole_days=whole_days)


def related(field: str, path: AttributePath) -> FieldRule:
    if len(path) != 2:
        raise ValueError(f"Related filters reach exactly one relationship away, got {path}")
    return FieldRule(FieldKind.RELATED, field, path)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _day_start(value: Any) -> Any:
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


def _day_end(value: Any) -> Any:
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.max)
    return value


class PredicateComposer:
    """Builds a predicate for one entity type from its filter object."""

    def __init__(self, entity: str, rules: list[FieldRule] | tuple[FieldRule, ...]):
        self.entity = entity
        self.rules = tuple(rules)

    def build_predicate(self, filter: Any) -> Predicate:
        terms: list[Predicate] = []
        for rule in self.rules:
            terms.extend(self._constraints_for(rule, filter))
        return conjunction(terms)

    __call__ = build_predicate

    def _constraints_for(self, rule: FieldRule, filter: Any) -> list[Predicate]:
        value = getattr(filter, rule.field, None)

        if rule.kind in (FieldKind.EXACT, FieldKind.RELATED):
            return [] if value is None else [Equals(rule.path, value)]

        if rule.kind is FieldKind.EXACT_IGNORE_CASE:
            return [] if _is_blank(value) else [EqualsIgnoreCase(rule.path, value)]

        if rule.kind is FieldKind.CONTAINS:
            return [] if _is_blank(value) else [ContainsIgnoreCase(rule.path, value)]

        if rule.kind is FieldKind.RANGE:
            upper = getattr(filter, rule.upper_field, None)
            terms: list[Predicate] = []
            if value is not None:
                terms.append(GreaterOrEqual(rule.path, _day_start(value) if rule.whole_days else value))
            if upper is not None:
                terms.append(LessOrEqual(rule.path, _day_end(upper) if rule.whole_days else upper))
            return terms

        raise ValueError(f"Unknown field kind: {rule.kind}")
