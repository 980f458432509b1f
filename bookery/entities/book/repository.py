"""Book data access."""

from uuid import UUID

from sqlalchemy import ColumnElement, or_
from sqlmodel import col

from bookery.entities._repository import EntityRepository, like_pattern
from bookery.entities.author.table import AuthorTable

from .entity import Book
from .table import BookTable


class BookRepository(EntityRepository[Book, BookTable]):
    """Data-access layer for books. Search matches the title or the editor."""

    table = BookTable
    mutable_fields = ("name", "author_uuid", "editor", "release")
    references = (("author_uuid", AuthorTable),)

    def _to_row(self, entity: Book) -> BookTable:
        return BookTable(
            id=str(entity.id),
            name=entity.name.as_str(),
            author_uuid=str(entity.author_uuid),
            editor=entity.editor.as_str(),
            release=entity.release,
        )

    def _to_entity(self, row: BookTable) -> Book:
        return Book(
            id=UUID(row.id),
            name=row.name,
            author_uuid=UUID(row.author_uuid),
            editor=row.editor,
            release=row.release,
        )

    def _search_clause(self, term: str) -> ColumnElement[bool]:
        pattern = like_pattern(term)
        return or_(col(BookTable.name).ilike(pattern), col(BookTable.editor).ilike(pattern))
