"""Author data access."""

from uuid import UUID

from sqlalchemy import ColumnElement
from sqlmodel import col

from bookery.entities._repository import EntityRepository, like_pattern

from .entity import Author
from .table import AuthorTable


class AuthorRepository(EntityRepository[Author, AuthorTable]):
    """Data-access layer for authors. Search matches the name."""

    table = AuthorTable
    mutable_fields = ("name", "born")

    def _to_row(self, entity: Author) -> AuthorTable:
        return AuthorTable(id=str(entity.id), name=entity.name.as_str(), born=entity.born)

    def _to_entity(self, row: AuthorTable) -> Author:
        return Author(id=UUID(row.id), name=row.name, born=row.born)

    def _search_clause(self, term: str) -> ColumnElement[bool]:
        return col(AuthorTable.name).ilike(like_pattern(term))
