"""Pytest configuration and shared fixtures for query catalog tests"""

import os
import uuid
from typing import Any, AsyncGenerator, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv

from query_catalog.core import DatabaseConnection
from query_catalog.models.config import CatalogConfig

# Load environment variables
load_dotenv()

SAMPLE_BOOKS: list[dict[str, Any]] = [
    {"title": "1984", "author": "George Orwell", "genre": "Dystopian", "published_year": 1949, "price": 10.99, "in_stock": True},
    {"title": "Animal Farm", "author": "George Orwell", "genre": "Political Satire", "published_year": 1945, "price": 8.5, "in_stock": False},
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "genre": "Fantasy", "published_year": 1937, "price": 14.99, "in_stock": True},
    {"title": "To Kill a Mockingbird", "author": "Harper Lee", "genre": "Fiction", "published_year": 1960, "price": 12.99, "in_stock": True},
    {"title": "The Catcher in the Rye", "author": "J.D. Salinger", "genre": "Fiction", "published_year": 1951, "price": 9.99, "in_stock": True},
    {"title": "Moby Dick", "author": "Herman Melville", "genre": "Adventure", "published_year": 1851, "price": 11.5, "in_stock": False},
    {"title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "genre": "Fiction", "published_year": 1925, "price": 7.99, "in_stock": True},
    {"title": "Brave New World", "author": "Aldous Huxley", "genre": "Dystopian", "published_year": 1932, "price": 11.0, "in_stock": True},
    {"title": "The Alchemist", "author": "Paulo Coelho", "genre": "Fiction", "published_year": 1988, "price": 10.5, "in_stock": True},
    {"title": "Pride and Prejudice", "author": "Jane Austen", "genre": "Romance", "published_year": 1813, "price": 7.5, "in_stock": True},
    {"title": "The Midnight Library", "author": "Matt Haig", "genre": "Fiction", "published_year": 2020, "price": 13.99, "in_stock": True},
    {"title": "Project Hail Mary", "author": "Andy Weir", "genre": "Science Fiction", "published_year": 2021, "price": 15.99, "in_stock": False},
]


# ==================== Mock Fixtures ====================


def make_cursor(documents: list[dict[str, Any]]) -> MagicMock:
    """Cursor mock whose to_list() returns the given documents"""
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


def make_client(collection: MagicMock) -> MagicMock:
    """AsyncMongoClient mock whose databases all return the given collection"""
    database = MagicMock()
    database.__getitem__.return_value = collection
    database.command = AsyncMock(return_value={})

    client = MagicMock()
    client.__getitem__.return_value = database
    client.admin.command = AsyncMock(return_value={"ok": 1.0})
    client.close = AsyncMock()
    return client


@pytest.fixture
def catalog_config() -> CatalogConfig:
    """Default configuration pointing at a local server"""
    return CatalogConfig()


@pytest.fixture
def mock_collection() -> MagicMock:
    """Collection mock with successful, empty responses for every call"""
    collection = MagicMock()
    collection.find.return_value = make_cursor([])
    collection.aggregate = AsyncMock(return_value=make_cursor([]))
    collection.update_one = AsyncMock(
        return_value=MagicMock(matched_count=0, modified_count=0)
    )
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))
    collection.create_index = AsyncMock(return_value="title_1")
    return collection


@pytest.fixture
def mock_client(mock_collection: MagicMock) -> MagicMock:
    """Client mock wired to mock_collection"""
    return make_client(mock_collection)


@pytest.fixture
async def mock_connection(
    catalog_config: CatalogConfig, mock_client: MagicMock
) -> AsyncGenerator[DatabaseConnection, None]:
    """Initialized connection backed by mock_client"""
    connection = DatabaseConnection(
        catalog_config, client_factory=lambda url, **kwargs: mock_client
    )
    await connection.initialize()
    try:
        yield connection
    finally:
        await connection.dispose()


# ==================== MongoDB Fixtures ====================


@pytest.fixture
def sample_books() -> list[dict[str, Any]]:
    """Copies of the documents seeded into the live test collection"""
    return [dict(book) for book in SAMPLE_BOOKS]


@pytest.fixture(scope="session")
def mongo_test_url() -> Optional[str]:
    """MongoDB test server URL from environment"""
    return os.getenv("MONGO_TEST_URL")


@pytest.fixture
def mongo_config(mongo_test_url: Optional[str]) -> CatalogConfig:
    """Configuration for a throwaway collection on the test server"""
    if not mongo_test_url:
        pytest.skip("MONGO_TEST_URL not set in environment")
    return CatalogConfig(
        url=mongo_test_url,
        database="query_catalog_test",
        collection=f"books_{uuid.uuid4().hex[:12]}",
        server_selection_timeout_ms=3000,
    )


@pytest.fixture
async def mongo_connection(
    mongo_config: CatalogConfig,
) -> AsyncGenerator[DatabaseConnection, None]:
    """Live connection to a collection seeded with SAMPLE_BOOKS, dropped afterwards"""
    connection = DatabaseConnection(mongo_config)
    await connection.initialize()
    try:
        await connection.collection.insert_many([dict(book) for book in SAMPLE_BOOKS])
        yield connection
    finally:
        if connection.is_initialized:
            await connection.collection.drop()
        await connection.dispose()


# ==================== Pytest Configuration ====================


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "mongodb: Tests requiring a MongoDB server")
    config.addinivalue_line(
        "markers", "integration: Integration tests requiring database"
    )
