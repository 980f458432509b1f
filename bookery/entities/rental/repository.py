"""Rental data access, including the joined name view."""

from uuid import UUID

from loguru import logger
from sqlalchemy import ColumnElement, or_
from sqlmodel import col, select
from sqlmodel.sql.expression import SelectOfScalar

from bookery.core.exceptions import CorruptRecordError, ValidationError
from bookery.core.services.database.db_utils import translate_store_errors
from bookery.entities._repository import EntityRepository, like_pattern
from bookery.entities.book.table import BookTable
from bookery.entities.costumer.table import CostumerTable

from .entity import Rental, RentalView
from .table import RentalTable


class RentalRepository(EntityRepository[Rental, RentalTable]):
    """Data-access layer for rentals.

    Raw reads return the stored rental whatever happened to its customer or
    book. The joined reads (:meth:`get_joined`, :meth:`search_joined`) inner
    join both tables, so a rental whose customer or book is gone drops out of
    them.
    """

    table = RentalTable
    mutable_fields = ("costumer_uuid", "book_uuid", "borrowed_at", "due_date", "returned_at")
    references = (("costumer_uuid", CostumerTable), ("book_uuid", BookTable))

    def _to_row(self, entity: Rental) -> RentalTable:
        return RentalTable(
            id=str(entity.id),
            costumer_uuid=str(entity.costumer_uuid),
            book_uuid=str(entity.book_uuid),
            borrowed_at=entity.borrowed_at,
            due_date=entity.due_date,
            returned_at=entity.returned_at,
        )

    def _to_entity(self, row: RentalTable) -> Rental:
        return Rental(
            id=UUID(row.id),
            costumer_uuid=UUID(row.costumer_uuid),
            book_uuid=UUID(row.book_uuid),
            borrowed_at=row.borrowed_at,
            due_date=row.due_date,
            returned_at=row.returned_at,
        )

    def _search_clause(self, term: str) -> ColumnElement[bool]:
        pattern = like_pattern(term)
        return or_(
            col(CostumerTable.name).ilike(pattern),
            col(BookTable.name).ilike(pattern),
            col(RentalTable.costumer_uuid).ilike(pattern),
            col(RentalTable.book_uuid).ilike(pattern),
        )

    def _search_statement(self, term: str) -> SelectOfScalar[RentalTable]:
        # Outer joins keep rentals whose customer or book was deleted
        return (
            select(RentalTable)
            .outerjoin(CostumerTable, col(RentalTable.costumer_uuid) == col(CostumerTable.id))
            .outerjoin(BookTable, col(RentalTable.book_uuid) == col(BookTable.id))
            .where(self._search_clause(term))
        )

    def _joined_statement(self):
        return (
            select(RentalTable, col(CostumerTable.name), col(BookTable.name))
            .join(CostumerTable, col(RentalTable.costumer_uuid) == col(CostumerTable.id))
            .join(BookTable, col(RentalTable.book_uuid) == col(BookTable.id))
        )

    def _to_view(self, row: RentalTable, costumer_name: str, book_name: str) -> RentalView:
        try:
            return RentalView(
                id=UUID(row.id),
                costumer_name=costumer_name,
                book_name=book_name,
                borrowed_at=row.borrowed_at,
                due_date=row.due_date,
                returned_at=row.returned_at,
            )
        except (ValidationError, ValueError, TypeError) as e:
            logger.error("Corrupt joined row {} in {}: {}", row.id, self.table_name, e)
            raise CorruptRecordError(
                f"Joined row {row.id} in {self.table_name} fails validation: {e}"
            ) from e

    def get_joined(self, record_id: UUID) -> RentalView | None:
        """The rental with customer and book names; None if any side is missing."""
        statement = self._joined_statement().where(col(RentalTable.id) == str(record_id))
        with translate_store_errors(f"joined get from {self.table_name}"):
            found = self._session.exec(statement).first()
        if found is None:
            return None
        return self._to_view(*found)

    def search_joined(self, term: str) -> list[RentalView]:
        """Joined views whose customer name or book name contains ``term``."""
        pattern = like_pattern(term)
        statement = self._joined_statement().where(
            or_(col(CostumerTable.name).ilike(pattern), col(BookTable.name).ilike(pattern))
        )
        with translate_store_errors(f"joined search {self.table_name}"):
            rows = self._session.exec(statement).all()
        logger.debug("Joined search {!r} on {} matched {} rows", term, self.table_name, len(rows))
        return [self._to_view(*row) for row in rows]
