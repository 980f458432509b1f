"""Book database table model."""

from datetime import date

from sqlmodel import Field

from bookery.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books."""

    __tablename__ = "books"

    name: str = Field(max_length=64, index=True)
    author_uuid: str = Field(max_length=36, index=True)
    editor: str = Field(max_length=64)
    release: date
