"""Rental database table model."""

from datetime import date

from sqlmodel import Field

from bookery.entities._base import EntityTable


class RentalTable(EntityTable, table=True):
    """Database persistence model for rentals."""

    __tablename__ = "rentals"

    costumer_uuid: str = Field(max_length=36, index=True)
    book_uuid: str = Field(max_length=36, index=True)
    borrowed_at: date
    due_date: date
    returned_at: date | None = Field(default=None, nullable=True)
