"""Author database table model."""

from datetime import date

from sqlmodel import Field

from bookery.entities._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    __tablename__ = "authors"

    name: str = Field(max_length=128, index=True)
    born: date
