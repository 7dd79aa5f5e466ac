"""
Customer Service — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Tests run against the real FastAPI app without MongoDB or a shared
       uploads directory.
How:   An in-memory CustomerRepository and a tmp_path PhotoStorage are bound
       through app.dependency_overrides; HTTPX talks to the app in-process.

Fixture Hierarchy (all function-scoped):
    ├── repository:     InMemoryCustomerRepository
    ├── uploads_dir:    Temporary uploads directory
    ├── photo_storage:  PhotoStorage rooted at uploads_dir
    ├── app:            Fresh app with the two dependencies overridden
    └── test_client:    HTTPX AsyncClient for endpoint testing
"""

import os
import tempfile
from typing import AsyncIterator, Dict, Optional

# Override settings for testing BEFORE any app imports
os.environ["MONGO_URL"] = "mongodb://localhost:27017"
os.environ["MONGO_DATABASE"] = "customers_test"
os.environ["UPLOADS_PATH"] = tempfile.mkdtemp(prefix="customer_service_test_")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from customer_service.main import create_app
from customer_service.models.customer import Customer
from customer_service.repositories.base import CustomerRepository
from customer_service.repositories.mongo import get_customer_repository
from customer_service.services.photo_storage import PhotoStorage, get_photo_storage


class InMemoryCustomerRepository(CustomerRepository):
    """
    Dict-backed repository with the same semantics as the Mongo one.

    Returns copies so that mutating a loaded record does not change the store
    until save() is called, as with a real database.
    """

    def __init__(self):
        self.records: Dict[str, Customer] = {}

    async def find_all(self) -> AsyncIterator[Customer]:
        for customer in list(self.records.values()):
            yield customer.model_copy()

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        customer = self.records.get(customer_id)
        return customer.model_copy() if customer else None

    async def save(self, customer: Customer) -> Customer:
        if customer.id is None:
            customer = customer.model_copy(update={"id": str(ObjectId())})
        self.records[customer.id] = customer.model_copy()
        return customer

    async def delete(self, customer: Customer) -> None:
        self.records.pop(customer.id, None)


@pytest.fixture
def repository():
    return InMemoryCustomerRepository()


@pytest.fixture
def uploads_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def photo_storage(uploads_dir):
    return PhotoStorage(str(uploads_dir))


@pytest.fixture
def app(repository, photo_storage):
    """
    Fresh application with in-memory persistence and temp photo storage.

    Lifespan does not run under ASGITransport, so no Mongo client is created.
    """
    application = create_app()
    application.dependency_overrides[get_customer_repository] = lambda: repository
    application.dependency_overrides[get_photo_storage] = lambda: photo_storage
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/customers")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_payload():
    return {"firstName": "Ana", "lastName": "Silva", "age": 30, "salary": 5000.0}


@pytest.fixture
def sample_photo_bytes():
    """Minimal JPEG: SOI marker + JFIF header + EOI marker."""
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )
