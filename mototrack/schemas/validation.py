"""Field-level validation of request bodies.

Pydantic only decodes request bodies into typed values. Whether those values
are acceptable (required, minimum year, e-mail shape, not in the past) is
checked here, in one pass, so every failing field is reported together.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from email_validator import EmailNotValidError, validate_email
from pydantic.alias_generators import to_camel

from mototrack.core.exceptions import RequestValidationFailed, ValidationError


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


Rule = Callable[[Any], FieldError | None]


def not_blank(attr: str, message: str) -> Rule:
    def check(obj: Any) -> FieldError | None:
        value = getattr(obj, attr, None)
        if value is None or not str(value).strip():
            return FieldError(to_camel(attr), message)
        return None
    return check


def not_null(attr: str, message: str) -> Rule:
    def check(obj: Any) -> FieldError | None:
        if getattr(obj, attr, None) is None:
            return FieldError(to_camel(attr), message)
        return None
    return check


def minimum(attr: str, limit: int, message: str) -> Rule:
    def check(obj: Any) -> FieldError | None:
        value = getattr(obj, attr, None)
        if value is None or value < limit:
            return FieldError(to_camel(attr), message)
        return None
    return check


def email(attr: str, message: str) -> Rule:
    def check(obj: Any) -> FieldError | None:
        value = getattr(obj, attr, None)
        if not value:
            return None
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return FieldError(to_camel(attr), message)
        return None
    return check


def future_or_present(attr: str, message: str, clock: Callable[[], datetime] = datetime.now) -> Rule:
    def check(obj: Any) -> FieldError | None:
        value = getattr(obj, attr, None)
        # Minute precision, the resolution clients work with
        if value is not None and value < clock().replace(second=0, microsecond=0):
            return FieldError(to_camel(attr), message)
        return None
    return check


def collect_errors(obj: Any, rules: tuple[Rule, ...]) -> list[FieldError]:
    errors = []
    seen = set()
    for rule in rules:
        error = rule(obj)
        # first failing rule wins for a field
        if error is not None and error.field not in seen:
            seen.add(error.field)
            errors.append(error)
    return errors


def ensure_valid(obj: Any, rules: tuple[Rule, ...]) -> None:
    errors = collect_errors(obj, rules)
    if errors:
        raise RequestValidationFailed(
            [ValidationError(e.field, e.message) for e in errors]
        )
