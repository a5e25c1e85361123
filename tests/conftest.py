"""Shared pytest fixtures for all tests."""

import random
import sqlite3
import pytest
from pathlib import Path

from config import Config, get_migrations_dir
from services.base import Services
from services.records import RecordStore
from tests.helpers import TODAY, run_migrations


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary database.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "vaultix",
        db_data_dir=tmp_path / "vaultix" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "vaultix" / "logs",
        simulation_enabled=False,
        simulation_interval=10.0,
        simulation_volatility=0.02,
    )


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a database manager with schema already set up.

    The manager hands out the shared in-memory connection instead of
    opening a new file connection per call.

    Args:
        test_db: In-memory database connection fixture.

    Returns:
        Database manager with schema ready.
    """
    run_migrations(test_db, get_migrations_dir())

    class TestDatabaseManager:
        """Test database manager that uses in-memory connection."""

        def __init__(self, conn):
            self.conn = conn

        def connect(self):
            return _TestConnectionContext(self.conn)

        def get_db_path(self):
            return Path(":memory:")

        def get_migrations_dir(self):
            return get_migrations_dir()

    class _TestConnectionContext:
        """Context manager for test database connections."""

        def __init__(self, conn):
            self.conn = conn

        def __enter__(self):
            return self.conn

        def __exit__(self, exc_type, exc_val, exc_tb):
            # Don't close the connection - let the fixture handle it
            pass

    return TestDatabaseManager(test_db)


@pytest.fixture
def store(db_manager_with_schema):
    """RecordStore backed by the in-memory test database."""
    return RecordStore(db_manager_with_schema)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database.

    "Today" is fixed to TODAY and the price simulation uses a seeded random
    source.

    Yields:
        Services: Services container for testing.
    """
    container = Services(
        test_config,
        db_manager=db_manager_with_schema,
        clock=lambda: TODAY,
        rng=random.Random(42),
    )
    yield container
    container.close()
