"""Unit tests for the database service and store error translation."""

from unittest.mock import patch

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlmodel import Session

from bookery.core.exceptions import (
    ConstraintViolationError,
    RecordNotFoundError,
    StoreConnectionError,
    StoreError,
)
from bookery.core.services import DbSessionService
from bookery.core.services.database import translate_store_errors
from bookery.core.services.records import AuthorService
from bookery.entities import AuthorPayload
from bookery.runtime.config.config_data import DatabaseConfig


class TestDbSessionService:
    def test_health_check(self, database: DbSessionService):
        assert database.health_check() is True

    def test_tables_created(self, database: DbSessionService):
        with database.session_scope() as session:
            names = {
                row[0]
                for row in session.connection().execute(
                    text("SELECT name FROM sqlite_master WHERE type='table'")
                )
            }
        assert {"authors", "books", "costumers", "rentals"} <= names

    def test_session_scope_rolls_back_on_error(self, database: DbSessionService):
        with pytest.raises(RuntimeError):
            with database.session_scope() as session:
                session.connection().execute(
                    text(
                        "INSERT INTO authors (id, name, born, created_at, updated_at) "
                        "VALUES ('x', 'Someone', '2000-01-01', '2000-01-01', '2000-01-01')"
                    )
                )
                raise RuntimeError("boom")

        with database.session_scope() as session:
            count = session.connection().execute(text("SELECT COUNT(*) FROM authors")).scalar_one()
        assert count == 0

    def test_file_database_uses_bounded_pool(self, tmp_path):
        service = DbSessionService(DatabaseConfig(url=f"sqlite:///{tmp_path / 'pool.db'}"))
        try:
            status = service.get_pool_status()
            assert status["size"] == 30
            assert status["overflow"] <= 0
        finally:
            service.dispose()


class TestTranslateStoreErrors:
    def test_integrity_error(self):
        with pytest.raises(ConstraintViolationError):
            with translate_store_errors("insert"):
                raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    def test_operational_error(self):
        with pytest.raises(StoreConnectionError):
            with translate_store_errors("select"):
                raise OperationalError("SELECT", {}, Exception("database is locked"))

    def test_store_errors_pass_through(self):
        with pytest.raises(RecordNotFoundError):
            with translate_store_errors("update"):
                raise RecordNotFoundError("authors", "x")

    def test_other_errors_untouched(self):
        with pytest.raises(KeyError):
            with translate_store_errors("select"):
                raise KeyError("x")


def _locked() -> OperationalError:
    return OperationalError("COMMIT", {}, Exception("database is locked"))


class TestCommitFailures:
    """Failures raised while committing reach callers as store errors."""

    def test_locked_database_on_commit(self, database: DbSessionService):
        with patch.object(Session, "commit", side_effect=_locked()):
            with pytest.raises(StoreConnectionError):
                with database.session_scope():
                    pass

    def test_service_create_sees_store_error(self, database: DbSessionService):
        service = AuthorService(database)
        with patch.object(Session, "commit", side_effect=_locked()):
            with pytest.raises(StoreError):
                service.create(AuthorPayload(name="Jane", born="2000-01-01"))

        assert service.count() == 0

    def test_integrity_error_on_commit(self, database: DbSessionService):
        with patch.object(
            Session, "commit", side_effect=IntegrityError("COMMIT", {}, Exception("deferred FK"))
        ):
            with pytest.raises(ConstraintViolationError):
                with database.session_scope():
                    pass
