"""
Pytest configuration and fixtures.

Provides shared fixtures for:
- A temporary SQLite database with the current schema
- The SQLite data-access object and the customer service on top of it
- A mocked data-access object for service unit tests
- FastAPI test client
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from customer_manager_api.app.core.config import settings
from customer_manager_api.app.core.db import init_db
from customer_manager_api.app.main import app
from customer_manager_api.app.repositories.customer_dao import (
    CustomerDAO,
    CustomerSQLiteDataAccessService,
)
from customer_manager_api.app.schemas.customer import CustomerRead
from customer_manager_api.app.services.customer_service import CustomerService


@pytest.fixture
def db_path(tmp_path, monkeypatch) -> str:
    """Point settings at an empty per-test database and create the schema."""
    path = str(tmp_path / "customers.db")
    monkeypatch.setattr(settings, "database_url", path)
    monkeypatch.setattr(settings, "seed_on_startup", False)
    init_db(path)
    return path


@pytest.fixture
def customer_dao(db_path: str) -> CustomerSQLiteDataAccessService:
    return CustomerSQLiteDataAccessService(db_path)


@pytest.fixture
def customer_service(customer_dao: CustomerSQLiteDataAccessService) -> CustomerService:
    return CustomerService(customer_dao)


@pytest.fixture
def mock_customer_dao() -> MagicMock:
    """Data-access mock restricted to the CustomerDAO contract."""
    return MagicMock(spec=CustomerDAO)


@pytest.fixture
def alex() -> CustomerRead:
    return CustomerRead(id=10, name="Alex", email="alex@gmail.com", age=19)


@pytest.fixture
def app_client(db_path: str):
    """Test client running the app lifespan against the temporary database."""
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
