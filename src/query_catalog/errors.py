"""Exception hierarchy for the query catalog runner."""

from typing import Optional


class CatalogError(Exception):
    """Base class for query catalog errors."""


class DatabaseConnectionError(CatalogError):
    """Raised when a session with the database cannot be established."""


class OperationError(CatalogError):
    """Raised when a single catalog entry fails against the database."""

    def __init__(self, description: str, cause: Optional[BaseException] = None):
        """
        Initialize operation error.

        Args:
            description: Description of the catalog entry that failed
            cause: Underlying database error, if any
        """
        self.description = description
        self.cause = cause
        message = f"Operation '{description}' failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
