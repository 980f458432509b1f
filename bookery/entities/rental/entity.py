"""Entity: Rental, and its read-only joined view."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bookery.core.types import BookName, IsoDate, PersonName
from bookery.entities._base import Entity


class RentalPayload(BaseModel):
    """Untrusted fields for a new rental. A new rental is never returned."""

    costumer_uuid: UUID
    book_uuid: UUID
    borrowed_at: IsoDate
    due_date: IsoDate


class RentalUpdatePayload(RentalPayload):
    """Untrusted fields replacing an existing rental."""

    id: UUID
    returned_at: IsoDate | None = None


class Rental(Entity):
    """A book lent to a customer."""

    costumer_uuid: UUID = Field(description="Id of the borrowing customer")
    book_uuid: UUID = Field(description="Id of the lent book")
    borrowed_at: IsoDate
    due_date: IsoDate
    returned_at: IsoDate | None = None

    @classmethod
    def create(cls, payload: RentalPayload) -> "Rental":
        return cls(
            costumer_uuid=payload.costumer_uuid,
            book_uuid=payload.book_uuid,
            borrowed_at=payload.borrowed_at,
            due_date=payload.due_date,
            returned_at=None,
        )

    @classmethod
    def parse(cls, payload: RentalUpdatePayload) -> "Rental":
        return cls(
            id=payload.id,
            costumer_uuid=payload.costumer_uuid,
            book_uuid=payload.book_uuid,
            borrowed_at=payload.borrowed_at,
            due_date=payload.due_date,
            returned_at=payload.returned_at,
        )


class RentalView(BaseModel):
    """A rental with its foreign keys replaced by the customer and book names.

    Built from a join, never persisted.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    costumer_name: PersonName
    book_name: BookName
    borrowed_at: IsoDate
    due_date: IsoDate
    returned_at: IsoDate | None = None
