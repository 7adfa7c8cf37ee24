"""
Custom exceptions for the catalog domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.).
"""

from typing import Any, Dict, List, Optional, Sequence, Union


class CatalogException(Exception):
    """Base exception for all catalog errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(CatalogException):
    """Raised when no entity with the given identity exists in a repository."""

    def __init__(self, entity_id: Union[Any, Sequence[Any]], entity_class: type):
        if isinstance(entity_id, (list, tuple)):
            ids = [str(i) for i in entity_id]
        else:
            ids = [str(entity_id)]

        self.ids = ids
        self.entity_class = entity_class
        message = f"{entity_class.__name__} with id(s) {', '.join(ids)} not found"
        super().__init__(
            message=message, details={"ids": ids, "entity": entity_class.__name__}
        )


class InvalidUuidError(CatalogException):
    """Raised when a supplied identifier is not a valid UUID."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            message=f"ID must be a valid UUID: {value}", details={"value": str(value)}
        )


class EntityValidationError(CatalogException):
    """
    Raised when an entity violates one or more field rules.

    Attributes:
        errors: Mapping of field name to the list of violated rule messages
    """

    def __init__(
        self, errors: Dict[str, List[str]], message: str = "Validation Error"
    ):
        self.errors = errors
        super().__init__(message=message, details={"errors": errors})


class PersistenceException(CatalogException):
    """Raised when the backing store fails while executing a repository operation."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Persistence {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )
