"""Core components: connection, execution and formatting."""

from query_catalog.core.connection import DatabaseConnection
from query_catalog.core.executor import OperationExecutor
from query_catalog.core.formatter import ResultFormatter

__all__ = ["DatabaseConnection", "OperationExecutor", "ResultFormatter"]
