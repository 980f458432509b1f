"""Book endpoints."""

from bookery.api.http.deps import get_book_service
from bookery.api.http.routers.records import build_record_router
from bookery.entities import Book, BookPayload, BookUpdatePayload

router = build_record_router("/book", Book, BookPayload, BookUpdatePayload, get_book_service)
