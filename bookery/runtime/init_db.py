"""Database initialization script."""

from bookery.core.services import DbSessionService
from bookery.runtime.config.config_data import ConfigData
from bookery.runtime.context import get_config


def init_db(config: ConfigData | None = None) -> None:
    """Create all database tables."""
    main_config = config or get_config()
    database = DbSessionService(main_config.database, main_config.app.environment)
    try:
        database.create_all()
    finally:
        database.dispose()


if __name__ == "__main__":
    init_db()
