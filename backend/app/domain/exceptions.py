"""Domain-specific exceptions — framework-independent."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single violated input constraint."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ValidationError(Exception):
    """Raised when untrusted input fails one or more constraints.

    Carries every violation found, not only the first.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__("Validation Error")


class MalformedRequestError(Exception):
    """Raised when a request body cannot be decoded at all."""

    def __init__(self, message: str = "Invalid JSON format"):
        self.message = message
        super().__init__(message)


class NotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.message = f"{entity_type} not found"
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ConflictError(Exception):
    """Raised when a write would break a uniqueness rule."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateEntityError(Exception):
    """Raised by repositories when the store rejects a duplicate unique key.

    Services translate this into ConflictError; it never reaches the transport.
    """

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")
