"""
Pytest configuration for faucet-tracker.

Provides fixtures for:
- Config pointing at a temporary SQLite file
- An opened Database with the schema created
- The FastAPI application and a TestClient running its lifespan
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.app import create_app
from app.core.config import Config
from app.core.database import Database
from app.core.exceptions import StorageError
from app.core.settings import AppConfig, DatabaseConfig, LoggingConfig
from app.models import Faucet
from app.repositories import FaucetRepository


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """SQLite file inside a directory that does not exist yet."""
    return tmp_path / "data" / "faucets.db"


@pytest.fixture
def test_config(db_path: Path) -> Config:
    return Config(
        app_config=AppConfig(
            database=DatabaseConfig(url=f"sqlite:///{db_path}"),
            logging=LoggingConfig(level="DEBUG", file=None),
        )
    )


@pytest.fixture
def database(test_config: Config) -> Generator[Database, None, None]:
    db = Database(test_config.get_database_url())
    db.open()
    db.ensure_schema()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def repository(database: Database) -> FaucetRepository:
    return FaucetRepository(database)


@pytest.fixture
def app(test_config: Config) -> FastAPI:
    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_repository(client: TestClient) -> FaucetRepository:
    """Repository bound to the database opened by the running app."""
    return FaucetRepository(client.app.state.database)


@pytest.fixture
def count_rows() -> Callable[[Database], int]:
    def _count(database: Database) -> int:
        with database.session_scope() as session:
            return session.query(Faucet).count()

    return _count


class FailingRepository:
    """Repository stub whose every call fails at the storage layer."""

    def insert(self, submission):
        raise StorageError("disk I/O error")

    def query(self, filters):
        raise StorageError("database disk image is malformed")


@pytest.fixture
def failing_repository() -> FailingRepository:
    return FailingRepository()
