from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

REQUEST_FORMAT = "%d/%m/%Y %H:%M:%S"
RESPONSE_FORMAT = "%d/%m/%Y %H:%M"


def parse_datetime(value: Any) -> datetime | None:
    """Parse ``dd/MM/yyyy HH:mm:ss`` or ISO 8601 into a naive local datetime."""
    if value is None or isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            parsed = datetime.strptime(text, REQUEST_FORMAT)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
            except ValueError:
                raise ValueError(
                    f"Data inválida: {value!r} (use dd/MM/yyyy HH:mm:ss)"
                )
    else:
        raise ValueError(f"Expected datetime, got {type(value)}")

    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_datetime(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.strftime(RESPONSE_FORMAT)


RequestDateTime = Annotated[datetime | None, BeforeValidator(parse_datetime)]
ResponseDateTime = Annotated[
    datetime | None,
    PlainSerializer(format_datetime, return_type=str | None, when_used="json"),
]
