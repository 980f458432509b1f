"""Record services: one unit of work per operation, per entity."""

from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from loguru import logger
from pydantic import BaseModel

from bookery.core.exceptions import RecordNotFoundError
from bookery.core.services.database import DbSessionService
from bookery.entities import (
    Author,
    AuthorRepository,
    Book,
    BookRepository,
    Costumer,
    CostumerRepository,
    Rental,
    RentalRepository,
    RentalView,
)
from bookery.entities._base import Entity
from bookery.entities._repository import EntityRepository

E = TypeVar("E", bound=Entity)
R = TypeVar("R", bound=EntityRepository[Any, Any])


class RecordService(Generic[E, R]):
    """Create, read, search, update, delete and count one kind of record.

    Every call opens its own session and commits before returning. Update and
    delete first probe for the id; an absent id raises
    :class:`RecordNotFoundError` before the payload is validated or any write
    is attempted.
    """

    entity_type: ClassVar[type[Entity]]
    repository_type: ClassVar[type[EntityRepository[Any, Any]]]

    def __init__(self, database: DbSessionService) -> None:
        self._database = database

    @property
    def name(self) -> str:
        return self.entity_type.__name__.lower()

    def _repository(self, session) -> R:
        return self.repository_type(session)  # type: ignore[return-value]

    def create(self, payload: BaseModel) -> UUID:
        """Validate ``payload``, mint an id and store the new record."""
        entity = self.entity_type.create(payload)  # type: ignore[attr-defined]
        with self._database.session_scope() as session:
            record_id = self._repository(session).create(entity)
        logger.info("Created {} {}", self.name, record_id)
        return record_id

    def get(self, record_id: UUID) -> E | None:
        with self._database.session_scope() as session:
            return self._repository(session).get(record_id)

    def get_id(self, record_id: UUID) -> UUID | None:
        with self._database.session_scope() as session:
            return self._repository(session).get_id(record_id)

    def search(self, term: str) -> list[E]:
        with self._database.session_scope() as session:
            return self._repository(session).search(term)

    def update(self, payload: BaseModel) -> UUID:
        """Replace every mutable field of an existing record."""
        record_id: UUID = payload.id  # type: ignore[attr-defined]
        with self._database.session_scope() as session:
            repository = self._repository(session)
            if repository.get_id(record_id) is None:
                raise RecordNotFoundError(repository.table_name, record_id)
            entity = self.entity_type.parse(payload)  # type: ignore[attr-defined]
            repository.update(entity)
        logger.info("Updated {} {}", self.name, record_id)
        return record_id

    def delete(self, record_id: UUID) -> UUID:
        with self._database.session_scope() as session:
            repository = self._repository(session)
            if repository.get_id(record_id) is None:
                raise RecordNotFoundError(repository.table_name, record_id)
            repository.delete(record_id)
        logger.info("Deleted {} {}", self.name, record_id)
        return record_id

    def count(self) -> int:
        with self._database.session_scope() as session:
            return self._repository(session).count()


class AuthorService(RecordService[Author, AuthorRepository]):
    entity_type = Author
    repository_type = AuthorRepository


class BookService(RecordService[Book, BookRepository]):
    entity_type = Book
    repository_type = BookRepository


class CostumerService(RecordService[Costumer, CostumerRepository]):
    entity_type = Costumer
    repository_type = CostumerRepository


class RentalService(RecordService[Rental, RentalRepository]):
    """Rentals, plus the views joined with customer and book names."""

    entity_type = Rental
    repository_type = RentalRepository

    def get_joined(self, record_id: UUID) -> RentalView | None:
        with self._database.session_scope() as session:
            return self._repository(session).get_joined(record_id)

    def search_joined(self, term: str) -> list[RentalView]:
        with self._database.session_scope() as session:
            return self._repository(session).search_joined(term)
