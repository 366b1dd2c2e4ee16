"""Shared pytest fixtures for finspector tests."""

import logging
import tempfile
import os
import pytest

from finspector.database.factories import create_sqlite_database, create_memory_database
from finspector.domain.category import CategoryService
from finspector.logger import get_logger


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_db():
    """Create an in-memory database for testing."""
    db = create_memory_database()
    db.connect()
    yield db
    db.disconnect()


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def travel_tree(category_service):
    """Create Travel with Flights and Hotels below it.

    Returns a dict of name -> saved Category.
    """
    travel = category_service.create_category(name="Travel", sort_order=1, actor="admin")
    flights = category_service.create_category(
        name="Flights", sort_order=1, parent_id=travel.id, actor="admin"
    )
    hotels = category_service.create_category(
        name="Hotels", sort_order=2, parent_id=travel.id, actor="admin"
    )
    return {"Travel": travel, "Flights": flights, "Hotels": hotels}


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by CLI runs so later tests don't write to closed streams."""
    yield
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
