"""Data-access base shared by the entity repositories."""

from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from loguru import logger
from sqlalchemy import ColumnElement, delete, func, update
from sqlmodel import Session, col, select
from sqlmodel.sql.expression import SelectOfScalar

from bookery.core.exceptions import (
    ConstraintViolationError,
    CorruptRecordError,
    RecordNotFoundError,
    ValidationError,
)
from bookery.core.services.database.db_utils import translate_store_errors
from bookery.entities._base import Entity, EntityTable

E = TypeVar("E", bound=Entity)
T = TypeVar("T", bound=EntityTable)


def like_pattern(term: str) -> str:
    """Substring pattern for ILIKE; the empty term matches every row."""
    return f"%{term}%"


class EntityRepository(Generic[E, T]):
    """CRUD, search and count over one table.

    Subclasses map between the domain entity and its table row and describe
    which columns a search looks at. Rows read back are validated again, so a
    row that was changed behind the application's back raises
    :class:`CorruptRecordError` instead of leaking an invalid entity.

    ``references`` lists the columns pointing at another table. They are
    checked on every write but not enforced by the schema, so deleting a
    referenced row is allowed and leaves the reference dangling.
    """

    table: ClassVar[type[EntityTable]]
    mutable_fields: ClassVar[tuple[str, ...]]
    references: ClassVar[tuple[tuple[str, type[EntityTable]], ...]] = ()

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def table_name(self) -> str:
        return self.table.__tablename__  # type: ignore[return-value]

    def _to_row(self, entity: E) -> T:
        raise NotImplementedError

    def _to_entity(self, row: T) -> E:
        raise NotImplementedError

    def _search_clause(self, term: str) -> ColumnElement[bool]:
        raise NotImplementedError

    def _search_statement(self, term: str) -> SelectOfScalar[T]:
        return select(self.table).where(self._search_clause(term))  # type: ignore[return-value]

    def _row_values(self, entity: E) -> dict[str, Any]:
        row = self._to_row(entity)
        self._check_references(row)
        return {name: getattr(row, name) for name in self.mutable_fields}

    def _hydrate(self, row: T) -> E:
        try:
            return self._to_entity(row)
        except (ValidationError, ValueError, TypeError) as e:
            logger.error("Corrupt row {} in {}: {}", row.id, self.table_name, e)
            raise CorruptRecordError(
                f"Row {row.id} in {self.table_name} fails validation: {e}"
            ) from e

    def _check_references(self, row: T) -> None:
        for field_name, target in self.references:
            target_id = getattr(row, field_name)
            statement = select(target.id).where(col(target.id) == target_id)
            with translate_store_errors(f"check {field_name} of {self.table_name}"):
                found = self._session.exec(statement).first()
            if found is None:
                raise ConstraintViolationError(
                    f"{self.table_name}.{field_name} references missing "
                    f"{target.__tablename__} row {target_id}"
                )

    def create(self, entity: E) -> UUID:
        """Insert a validated entity and return its id."""
        row = self._to_row(entity)
        self._check_references(row)
        with translate_store_errors(f"insert into {self.table_name}"):
            self._session.add(row)
            self._session.flush()
        logger.debug("Inserted {} into {}", entity.id, self.table_name)
        return entity.id

    def get(self, record_id: UUID) -> E | None:
        """Exact lookup by id; None when absent."""
        with translate_store_errors(f"get from {self.table_name}"):
            row = self._session.get(self.table, str(record_id))
        if row is None:
            return None
        return self._hydrate(row)

    def get_id(self, record_id: UUID) -> UUID | None:
        """Existence probe that does not load the row."""
        statement = select(self.table.id).where(col(self.table.id) == str(record_id))
        with translate_store_errors(f"probe {self.table_name}"):
            found = self._session.exec(statement).first()
        if found is None:
            return None
        return UUID(found)

    def search(self, term: str) -> list[E]:
        """Case-insensitive substring search over the searchable columns."""
        statement = self._search_statement(term)
        with translate_store_errors(f"search {self.table_name}"):
            rows = self._session.exec(statement).all()
        logger.debug("Search {!r} on {} matched {} rows", term, self.table_name, len(rows))
        return [self._hydrate(row) for row in rows]

    def update(self, entity: E) -> UUID:
        """Overwrite every mutable column of an existing row.

        A single conditional statement; zero affected rows raises
        :class:`RecordNotFoundError`.
        """
        statement = (
            update(self.table)
            .where(col(self.table.id) == str(entity.id))
            .values(**self._row_values(entity))
        )
        with translate_store_errors(f"update {self.table_name}"):
            result = self._session.exec(statement)  # type: ignore[call-overload]
        if result.rowcount == 0:
            raise RecordNotFoundError(self.table_name, entity.id)
        logger.debug("Updated {} in {}", entity.id, self.table_name)
        return entity.id

    def delete(self, record_id: UUID) -> UUID:
        """Remove a row and return its id; :class:`RecordNotFoundError` if absent."""
        statement = delete(self.table).where(col(self.table.id) == str(record_id))
        with translate_store_errors(f"delete from {self.table_name}"):
            result = self._session.exec(statement)  # type: ignore[call-overload]
        if result.rowcount == 0:
            raise RecordNotFoundError(self.table_name, record_id)
        logger.debug("Deleted {} from {}", record_id, self.table_name)
        return record_id

    def count(self) -> int:
        """Total number of rows."""
        statement = select(func.count()).select_from(self.table)
        with translate_store_errors(f"count {self.table_name}"):
            return self._session.exec(statement).one()
