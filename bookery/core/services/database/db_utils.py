"""Helpers shared by the database service and the repositories."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError

from bookery.core.exceptions import (
    ConstraintViolationError,
    StoreConnectionError,
    StoreError,
)


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as :class:`StoreError` subclasses.

    Integrity failures (duplicate keys, missing required columns) become
    :class:`ConstraintViolationError`; every other backend failure becomes
    :class:`StoreConnectionError`. Errors that already belong to the store
    family pass through untouched.
    """
    try:
        yield
    except StoreError:
        raise
    except IntegrityError as e:
        logger.warning("Constraint violation during {}: {}", operation, e.orig)
        raise ConstraintViolationError(f"{operation} rejected by the database: {e.orig}") from e
    except DBAPIError as e:
        logger.error(
            "Database failure during {}",
            operation,
            error_type=type(e.orig).__name__,
            connection_invalidated=e.connection_invalidated,
        )
        raise StoreConnectionError(f"{operation} failed: {e.orig}") from e
    except SQLAlchemyError as e:
        logger.error("Database failure during {}", operation, error_type=type(e).__name__)
        raise StoreConnectionError(f"{operation} failed: {e}") from e
