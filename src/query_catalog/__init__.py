"""
query_catalog - Demonstration query catalog for a MongoDB books collection

Runs a fixed, ordered set of finds, updates, deletes, aggregations, index
creations and explain plans on one connection and prints each result.
"""

__version__ = "1.0.0"

from query_catalog.catalog import CatalogSection, build_catalog, entries
from query_catalog.core import DatabaseConnection, OperationExecutor, ResultFormatter
from query_catalog.errors import CatalogError, DatabaseConnectionError, OperationError
from query_catalog.models import (
    Book,
    CatalogConfig,
    Operation,
    OperationKind,
    OperationResult,
)
from query_catalog.runner import CatalogRunner

__all__ = [
    "CatalogConfig",
    "CatalogSection",
    "CatalogRunner",
    "Book",
    "Operation",
    "OperationKind",
    "OperationResult",
    "DatabaseConnection",
    "OperationExecutor",
    "ResultFormatter",
    "CatalogError",
    "DatabaseConnectionError",
    "OperationError",
    "build_catalog",
    "entries",
]
