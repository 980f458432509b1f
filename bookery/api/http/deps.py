"""FastAPI dependency implementations."""

from fastapi import Request

from bookery.api.http.app_data import ApplicationDependencies
from bookery.core.services import DbSessionService
from bookery.core.services.records import (
    AuthorService,
    BookService,
    CostumerService,
    RentalService,
)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return get_app_dependencies(request).database_service


def get_author_service(request: Request) -> AuthorService:
    """Get the author service instance."""
    return get_app_dependencies(request).author_service


def get_book_service(request: Request) -> BookService:
    """Get the book service instance."""
    return get_app_dependencies(request).book_service


def get_costumer_service(request: Request) -> CostumerService:
    """Get the costumer service instance."""
    return get_app_dependencies(request).costumer_service


def get_rental_service(request: Request) -> RentalService:
    """Get the rental service instance."""
    return get_app_dependencies(request).rental_service
