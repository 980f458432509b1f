"""Domain entities, their tables and repositories."""

from bookery.entities._base import DeletePayload, Entity, EntityTable
from bookery.entities.author import (
    Author,
    AuthorPayload,
    AuthorRepository,
    AuthorTable,
    AuthorUpdatePayload,
)
from bookery.entities.book import Book, BookPayload, BookRepository, BookTable, BookUpdatePayload
from bookery.entities.costumer import (
    Costumer,
    CostumerPayload,
    CostumerRepository,
    CostumerTable,
    CostumerUpdatePayload,
)
from bookery.entities.rental import (
    Rental,
    RentalPayload,
    RentalRepository,
    RentalTable,
    RentalUpdatePayload,
    RentalView,
)

__all__ = [
    "DeletePayload",
    "Entity",
    "EntityTable",
    "Author",
    "AuthorPayload",
    "AuthorRepository",
    "AuthorTable",
    "AuthorUpdatePayload",
    "Book",
    "BookPayload",
    "BookRepository",
    "BookTable",
    "BookUpdatePayload",
    "Costumer",
    "CostumerPayload",
    "CostumerRepository",
    "CostumerTable",
    "CostumerUpdatePayload",
    "Rental",
    "RentalPayload",
    "RentalRepository",
    "RentalTable",
    "RentalUpdatePayload",
    "RentalView",
]
