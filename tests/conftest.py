"""
Pytest configuration and shared fixtures for WENET_DUMMY tests.

This module provides:
- Mock MongoDB client, database and collection fixtures
- An in-memory collection that keeps the stored documents
- Repository and configuration fixtures
- A MongoDB container (testcontainers) for the integration tests
"""

import copy
import uuid
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import bson
import pytest
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from wenet_dummy.config import DummyConfig
from wenet_dummy.observability import clear_correlation_id, get_metrics_collector
from wenet_dummy.repositories import DummiesRepository

TEST_SCHEMA_VERSION = "1.0.0"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    config.addinivalue_line("markers", "integration: tests that need a real MongoDB (Docker)")


@pytest.fixture(autouse=True)
def reset_observability():
    """Start every test with empty metrics and without correlation ID."""
    get_metrics_collector().reset()
    clear_correlation_id()
    yield
    clear_correlation_id()


# ============================================================================
# MOCK MONGODB FIXTURES
# ============================================================================


def make_cursor(documents: Optional[List[Dict[str, Any]]] = None) -> MagicMock:
    """Create a mock cursor whose to_list returns the documents."""
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=documents or [])
    return cursor


@pytest.fixture
def mock_mongo_client() -> MagicMock:
    """Create a mock MongoDB client."""
    client = MagicMock(spec=AsyncIOMotorClient)
    client.admin = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    client.close = MagicMock()
    client.__getitem__.return_value = MagicMock(spec=AsyncIOMotorDatabase)
    return client


@pytest.fixture
def mock_mongo_collection() -> MagicMock:
    """Create a mock MongoDB collection."""
    collection = MagicMock(spec=AsyncIOMotorCollection)
    collection.name = "test_collection"
    collection.find = MagicMock(return_value=make_cursor())
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id="test_id"))
    collection.update_one = AsyncMock(
        return_value=MagicMock(modified_count=1, matched_count=1, upserted_id=None)
    )
    collection.update_many = AsyncMock(return_value=MagicMock(modified_count=2))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=2))
    collection.count_documents = AsyncMock(return_value=0)
    collection.aggregate = MagicMock(return_value=make_cursor())
    return collection


@pytest.fixture
def mock_mongo_database(mock_mongo_collection: MagicMock) -> MagicMock:
    """Create a mock MongoDB database whose collections are mock_mongo_collection."""
    db = MagicMock(spec=AsyncIOMotorDatabase)
    db.name = "test_db"
    db.command = AsyncMock(return_value={"ok": 1})
    db.__getitem__.return_value = mock_mongo_collection
    return db


class InMemoryCollection:
    """
    Collection that keeps the documents on a dictionary.

    Only the queries by equality and the exclusion projections are supported,
    which is what the dummies need.
    """

    def __init__(self) -> None:
        self.documents: Dict[Any, Dict[str, Any]] = {}
        self.insert_calls = 0

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in query.items())

    @staticmethod
    def _project(document: Dict[str, Any], projection: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        projected = copy.deepcopy(document)
        for key, value in (projection or {}).items():
            if not value:
                projected.pop(key, None)
        return projected

    async def insert_one(self, document: Dict[str, Any]) -> MagicMock:
        self.insert_calls += 1
        # Encoded on the client before sending, as pymongo does.
        bson.encode(document)
        if document["_id"] in self.documents:
            raise MongoDuplicateKeyError(f"E11000 duplicate key error _id: {document['_id']}")
        self.documents[document["_id"]] = copy.deepcopy(document)
        return MagicMock(inserted_id=document["_id"])

    async def find_one(self, query: Dict[str, Any], projection=None) -> Optional[Dict[str, Any]]:
        bson.encode(query)
        for document in self.documents.values():
            if self._matches(document, query):
                return self._project(document, projection)
        return None

    def find(self, query: Dict[str, Any], projection=None, skip=0, limit=0, sort=None) -> MagicMock:
        found = [
            self._project(document, projection)
            for document in self.documents.values()
            if self._matches(document, query)
        ]
        for key, order in reversed(sort or []):
            found.sort(key=lambda document: document.get(key), reverse=order < 0)
        found = found[skip:]
        if limit:
            found = found[:limit]
        return make_cursor(found)

    async def count_documents(self, query: Dict[str, Any]) -> int:
        return sum(1 for document in self.documents.values() if self._matches(document, query))


@pytest.fixture
def in_memory_collection() -> InMemoryCollection:
    return InMemoryCollection()


@pytest.fixture
def in_memory_database(in_memory_collection: InMemoryCollection) -> MagicMock:
    """Create a mock database whose collections keep the documents in memory."""
    db = MagicMock(spec=AsyncIOMotorDatabase)
    db.__getitem__.return_value = in_memory_collection
    return db


# ============================================================================
# COMPONENT FIXTURES
# ============================================================================


@pytest.fixture
def dummy_config() -> DummyConfig:
    """Provide a configuration that does not depend on the environment."""
    return DummyConfig(
        mongo_uri="mongodb://localhost:27017",
        db_name="test_db",
        max_pool_size=10,
        min_pool_size=1,
        schema_version=TEST_SCHEMA_VERSION,
        component_apikey="test_apikey",
    )


@pytest.fixture
def dummies_repository(mock_mongo_database: MagicMock) -> DummiesRepository:
    return DummiesRepository(mock_mongo_database, TEST_SCHEMA_VERSION)


@pytest.fixture
def in_memory_dummies_repository(in_memory_database: MagicMock) -> DummiesRepository:
    return DummiesRepository(in_memory_database, TEST_SCHEMA_VERSION)


# ============================================================================
# TESTCONTAINERS FIXTURES (Real MongoDB for Integration Tests)
# ============================================================================


def start_mongodb_container(image: str = "mongo:7.0"):
    """Start a MongoDB container, or skip the test when Docker is not available."""
    try:
        from docker.errors import DockerException
        from testcontainers.mongodb import MongoDbContainer
    except ImportError:
        pytest.skip("testcontainers not installed. Install with: pip install -e '.[test]'")

    try:
        container = MongoDbContainer(image=image)
        container.start()
    except DockerException as e:
        pytest.skip(f"Docker is not available: {e}")

    return container


@pytest.fixture(scope="session")
def mongodb_container():
    """
    Start a MongoDB container for integration tests.

    Session-scoped: container starts once and is reused for all integration tests.
    """
    container = start_mongodb_container()
    yield container
    container.stop()


@pytest.fixture
def mongodb_connection_string(mongodb_container) -> str:
    """Connection string of the MongoDB container, reachable from the host."""
    return mongodb_container.get_connection_url()


@pytest.fixture
def integration_config(mongodb_connection_string: str) -> DummyConfig:
    """Configuration with a database of its own for each test."""
    return DummyConfig(
        mongo_uri=mongodb_connection_string,
        db_name=f"test_db_{uuid.uuid4().hex}",
        max_pool_size=5,
        min_pool_size=1,
        schema_version=TEST_SCHEMA_VERSION,
    )
