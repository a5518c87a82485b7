"""Service error taxonomy.

These errors are independent of any transport. Each carries a status_code
hint so a request-handling layer can translate it without a lookup table.
"""

from typing import Any


class WttServiceError(Exception):
    """Base exception for all work-time-tracking service errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(WttServiceError):
    """Caller-supplied data violates a precondition."""

    status_code = 400


class NotFoundError(WttServiceError):
    """Referenced entity does not exist or is disabled."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str | None):
        super().__init__(
            message=f"no {entity} with ID <{entity_id}> found.",
            details={"entity": entity, "id": entity_id},
        )


class DuplicateError(WttServiceError):
    """Caller-supplied id collides with an existing entity."""

    status_code = 409

    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            message=f"{entity} with ID <{entity_id}> exists already.",
            details={"entity": entity, "id": entity_id},
        )


class InternalError(WttServiceError):
    """Gateway transaction failed or required CRM configuration is missing."""

    status_code = 500


def client_id_rejected(entity: str, entity_id: str) -> ValidationError:
    """Build the error for an id generated on the client side."""
    return ValidationError(
        f"{entity} <{entity_id}> contains an ID generated on the client. This is not allowed.",
        details={"entity": entity, "id": entity_id},
    )
