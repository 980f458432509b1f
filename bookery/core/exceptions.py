"""Domain and storage exceptions.

Validation errors come from untrusted input and are raised while building
value types or entities. Store errors come from the relational backend and
are raised by repositories, so the API layer can map both families
uniformly.
"""


class BookeryError(Exception):
    """Base class for all bookery errors."""


class ValidationError(BookeryError):
    """A value failed the constraints of its type."""

    def __init__(self, type_name: str, message: str) -> None:
        super().__init__(f"{type_name}: {message}")
        self.type_name = type_name


class TooLongError(ValidationError):
    """The value exceeds the maximum length of its type."""


class WrongSizeError(ValidationError):
    """An exact-length value received the wrong number of characters."""


class InvalidCharsetError(ValidationError):
    """The value contains a character its type does not allow."""


class StoreError(BookeryError):
    """A relational store operation failed."""


class RecordNotFoundError(StoreError):
    """The targeted row does not exist."""

    def __init__(self, table: str, record_id: object) -> None:
        super().__init__(f"No row with id {record_id} in {table}")
        self.table = table
        self.record_id = record_id


class ConstraintViolationError(StoreError):
    """The backend rejected a write because of an integrity constraint."""


class StoreConnectionError(StoreError):
    """The backend could not be reached or failed to execute a statement."""


class CorruptRecordError(StoreError):
    """A persisted row no longer satisfies the validators of its entity."""
