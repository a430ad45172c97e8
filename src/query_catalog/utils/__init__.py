"""Utility modules for the query catalog runner."""

from query_catalog.utils.serialization import dumps

__all__ = ["dumps"]
