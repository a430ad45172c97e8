"""Pydantic models for catalog configuration, operations and results."""

from query_catalog.models.config import CatalogConfig
from query_catalog.models.operation import (
    AggregateParams,
    CreateIndexParams,
    DeleteParams,
    ExplainParams,
    FindParams,
    Operation,
    OperationKind,
    UpdateParams,
)
from query_catalog.models.record import Book
from query_catalog.models.result import (
    ExplainResult,
    IndexResult,
    MutationResult,
    OperationResult,
    RecordsResult,
)

__all__ = [
    "CatalogConfig",
    "Book",
    "Operation",
    "OperationKind",
    "FindParams",
    "UpdateParams",
    "DeleteParams",
    "AggregateParams",
    "CreateIndexParams",
    "ExplainParams",
    "OperationResult",
    "RecordsResult",
    "MutationResult",
    "IndexResult",
    "ExplainResult",
]
