"""MongoDB connection management with pymongo's async client."""

import logging
from typing import Any, Callable, Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from query_catalog.errors import DatabaseConnectionError
from query_catalog.models.config import CatalogConfig

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Any]


class DatabaseConnection:
    """Owns the single client session used for a catalog run."""

    def __init__(
        self,
        config: CatalogConfig,
        client_factory: ClientFactory = AsyncMongoClient,
    ):
        """
        Initialize database connection.

        Args:
            config: Catalog configuration with connection URI and names
            client_factory: Callable that builds the client from a URI
        """
        self.config = config
        self.client: Optional[AsyncMongoClient] = None
        self._client_factory = client_factory
        self._release_count = 0

    async def initialize(self) -> None:
        """
        Create the client and verify the server is reachable.

        Raises:
            DatabaseConnectionError: If the URI is rejected or no server answers the ping
        """
        if self.client is not None:
            return  # Already initialized

        try:
            # The constructor parses the URI and rejects bad hosts or ports
            client = self._client_factory(
                self.config.url,
                serverSelectionTimeoutMS=self.config.server_selection_timeout_ms,
            )
            # Owned before the ping so dispose() still closes it on failure
            self.client = client
            await client.admin.command("ping")
        except (PyMongoError, ValueError) as e:
            raise DatabaseConnectionError(
                f"Cannot connect to MongoDB at {self.config.url}: {e}"
            ) from e

        logger.info(
            f"Connected to {self.config.database}.{self.config.collection}"
        )

    async def dispose(self) -> None:
        """Close the client. Safe to call more than once."""
        if self.client is None:
            return

        client, self.client = self.client, None
        self._release_count += 1
        await client.close()
        logger.info("MongoDB client closed")

    @property
    def database(self) -> AsyncDatabase:
        """
        Get the configured database handle.

        Raises:
            RuntimeError: If connection not initialized
        """
        if self.client is None:
            raise RuntimeError(
                "DatabaseConnection not initialized. Call initialize() first."
            )
        return self.client[self.config.database]

    @property
    def collection(self) -> AsyncCollection:
        """
        Get the configured collection handle.

        Raises:
            RuntimeError: If connection not initialized
        """
        return self.database[self.config.collection]

    @property
    def is_initialized(self) -> bool:
        """Check if client is open."""
        return self.client is not None

    @property
    def release_count(self) -> int:
        """Number of times an open client has been closed."""
        return self._release_count

    async def __aenter__(self) -> "DatabaseConnection":
        """Async context manager entry."""
        try:
            await self.initialize()
        except BaseException:
            await self.dispose()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.dispose()
