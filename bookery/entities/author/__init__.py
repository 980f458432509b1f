"""Entity package: Author."""

from .entity import Author, AuthorPayload, AuthorUpdatePayload
from .repository import AuthorRepository
from .table import AuthorTable

__all__ = ["Author", "AuthorPayload", "AuthorUpdatePayload", "AuthorRepository", "AuthorTable"]
