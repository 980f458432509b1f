"""Entity: Costumer, a library customer."""

from uuid import UUID

from pydantic import BaseModel, Field

from bookery.core.types import IsoDate, PersonDocument, PersonName
from bookery.entities._base import Entity


class CostumerPayload(BaseModel):
    name: str
    document: str
    born: IsoDate


class CostumerUpdatePayload(CostumerPayload):
    id: UUID


class Costumer(Entity):
    """A registered library customer."""

    name: PersonName = Field(description="Customer's full name")
    document: PersonDocument = Field(description="11-digit identity document")
    born: IsoDate = Field(description="Date of birth")

    @classmethod
    def create(cls, payload: CostumerPayload) -> "Costumer":
        return cls(name=payload.name, document=payload.document, born=payload.born)

    @classmethod
    def parse(cls, payload: CostumerUpdatePayload) -> "Costumer":
        return cls(
            id=payload.id,
            name=payload.name,
            document=payload.document,
            born=payload.born,
        )
