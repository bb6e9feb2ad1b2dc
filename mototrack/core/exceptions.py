class DomainError(Exception):
    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    def __init__(self, entity: str, message: str | None = None, details: dict | None = None):
        code = f"NF_{entity.upper()}_001"
        msg = message or f"{entity} not found"
        super().__init__(code, msg, details)

    @classmethod
    def for_id(cls, entity: str, id: object) -> "NotFoundError":
        return cls(entity, f"{entity} não encontrada para o ID: {id}", {"id": id})


class ValidationError(DomainError):
    def __init__(self, field: str, message: str, details: dict | None = None):
        code = f"VAL_{field.upper()}_001"
        super().__init__(code, message, details or {"field": field})
        self.field = field


class RequestValidationFailed(DomainError):
    """Several field errors collected from a single request."""

    def __init__(self, errors: list[ValidationError]):
        self.errors = errors
        super().__init__(
            "VAL_REQUEST_001",
            "Erro de validação",
            {"fields": [e.field for e in errors]},
        )


class BusinessRuleError(DomainError):
    def __init__(self, message: str, code: str = "BR_001", details: dict | None = None):
        super().__init__(code, message, details)


class ConflictError(DomainError):
    def __init__(self, message: str, code: str = "CF_001", details: dict | None = None):
        super().__init__(code, message, details)
