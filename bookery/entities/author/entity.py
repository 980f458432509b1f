"""Entity: Author."""

from uuid import UUID

from pydantic import BaseModel, Field

from bookery.core.types import IsoDate, PersonName
from bookery.entities._base import Entity


class AuthorPayload(BaseModel):
    """Untrusted fields for a new author."""

    name: str
    born: IsoDate


class AuthorUpdatePayload(AuthorPayload):
    """Untrusted fields replacing an existing author."""

    id: UUID


class Author(Entity):
    """A book author."""

    name: PersonName = Field(description="Author's full name")
    born: IsoDate = Field(description="Date of birth")

    @classmethod
    def create(cls, payload: AuthorPayload) -> "Author":
        """Validate a creation payload and mint a fresh id."""
        return cls(name=payload.name, born=payload.born)

    @classmethod
    def parse(cls, payload: AuthorUpdatePayload) -> "Author":
        """Validate an update payload, keeping the caller's id."""
        return cls(id=payload.id, name=payload.name, born=payload.born)
