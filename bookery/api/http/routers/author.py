"""Author endpoints."""

from bookery.api.http.deps import get_author_service
from bookery.api.http.routers.records import build_record_router
from bookery.entities import Author, AuthorPayload, AuthorUpdatePayload

router = build_record_router(
    "/author", Author, AuthorPayload, AuthorUpdatePayload, get_author_service
)
