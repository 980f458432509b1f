"""Entity package: Book."""

from .entity import Book, BookPayload, BookUpdatePayload
from .repository import BookRepository
from .table import BookTable

__all__ = ["Book", "BookPayload", "BookUpdatePayload", "BookRepository", "BookTable"]
