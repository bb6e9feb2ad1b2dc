from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mototrack.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    DomainError,
    NotFoundError,
    RequestValidationFailed,
    ValidationError,
)
from mototrack.core.logging import get_logger
from mototrack.middleware.request_id import REQUEST_ID_HEADER
from mototrack.schemas.validation import FieldError

logger = get_logger(__name__)


ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    RequestValidationFailed: status.HTTP_400_BAD_REQUEST,
    BusinessRuleError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ConflictError: status.HTTP_409_CONFLICT,
}

# pydantic loc prefixes that name where a value came from, not the field
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def _error_envelope(request: Request, status_code: int, errors: list[DomainError]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "data": None,
            "meta": {
                "request_id": getattr(request.state, "request_id", None),
                "timestamp": datetime.utcnow().isoformat() + "Z",
            },
            "errors": [
                {
                    "code": e.code,
                    "message": e.message,
                    "details": e.details,
                }
                for e in errors
            ],
        },
    )


def field_errors_from_pydantic(errors: list[dict]) -> list[FieldError]:
    """Flatten pydantic/FastAPI decoding errors into one FieldError per field."""
    result = []
    seen = set()
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if str(part) not in _LOCATION_PREFIXES]
        field = ".".join(loc) or "request"
        if field in seen:
            continue
        seen.add(field)

        ctx_error = (error.get("ctx") or {}).get("error")
        message = str(ctx_error) if ctx_error is not None else error.get("msg", "Valor inválido")
        result.append(FieldError(field=field, message=message))
    return result


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = ERROR_STATUS_MAP.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    errors = exc.errors if isinstance(exc, RequestValidationFailed) else [exc]
    if status_code >= 500:
        logger.error("domain_error", code=exc.code, message=exc.message, path=request.url.path)
    else:
        logger.warning("domain_error", code=exc.code, message=exc.message, path=request.url.path)

    return _error_envelope(request, status_code, errors)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = field_errors_from_pydantic(exc.errors())
    logger.warning(
        "request_validation_failed",
        path=request.url.path,
        fields=[e.field for e in field_errors],
    )
    return _error_envelope(
        request,
        status.HTTP_400_BAD_REQUEST,
        [ValidationError(e.field, e.message) for e in field_errors],
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", path=request.url.path, error=type(exc).__name__, exc_info=exc)
    response = _error_envelope(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        [DomainError("INTERNAL_ERROR", "Erro interno inesperado")],
    )
    # Runs outside RequestIDMiddleware, which never sees this response
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
