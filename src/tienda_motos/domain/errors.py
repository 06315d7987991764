"""Domain errors.

The HTTP layer maps ``error_code`` to a status and serializes
``to_dict()`` into the error body.
"""

from typing import Any


class DomainError(Exception):
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """
    Rejected input: a quote or budget that breaks a business rule, or
    request fields that could not be parsed.

    ``errors`` holds per-field entries (``field``, ``message``, ``code``).
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        self.errors = errors or None
        default = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default, **context)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.errors:
            data["errors"] = self.errors
        return data


class NotFoundError(DomainError):
    """Unknown vehicle, scenario or financial entity id."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(
            f"{resource} with identifier '{identifier}' not found",
            resource=resource,
            identifier=identifier,
        )
