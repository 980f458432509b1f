from dataclasses import dataclass

from bookery.core.services import DbSessionService
from bookery.core.services.records import (
    AuthorService,
    BookService,
    CostumerService,
    RentalService,
)
from bookery.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    author_service: AuthorService
    book_service: BookService
    costumer_service: CostumerService
    rental_service: RentalService

    @classmethod
    def from_database(cls, database_service: DbSessionService) -> "ApplicationDependencies":
        """Wire every record service to one shared database service."""
        return cls(
            database_service=database_service,
            author_service=AuthorService(database_service),
            book_service=BookService(database_service),
            costumer_service=CostumerService(database_service),
            rental_service=RentalService(database_service),
        )

    @classmethod
    def from_config(cls, config: ConfigData) -> "ApplicationDependencies":
        return cls.from_database(DbSessionService(config.database, config.app.environment))
