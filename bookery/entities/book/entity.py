"""Entity: Book."""

from uuid import UUID

from pydantic import BaseModel, Field

from bookery.core.types import BookName, EditorName, IsoDate
from bookery.entities._base import Entity


class BookPayload(BaseModel):
    """Untrusted fields for a new book."""

    name: str
    author_uuid: UUID
    editor: str
    release: IsoDate


class BookUpdatePayload(BookPayload):
    """Untrusted fields replacing an existing book."""

    id: UUID


class Book(Entity):
    """A book written by a known author."""

    name: BookName = Field(description="Title, any characters")
    author_uuid: UUID = Field(description="Id of the author")
    editor: EditorName = Field(description="Publisher name, ASCII only")
    release: IsoDate = Field(description="Release date")

    @classmethod
    def create(cls, payload: BookPayload) -> "Book":
        return cls(
            name=payload.name,
            author_uuid=payload.author_uuid,
            editor=payload.editor,
            release=payload.release,
        )

    @classmethod
    def parse(cls, payload: BookUpdatePayload) -> "Book":
        return cls(
            id=payload.id,
            name=payload.name,
            author_uuid=payload.author_uuid,
            editor=payload.editor,
            release=payload.release,
        )
