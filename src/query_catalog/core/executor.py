"""Dispatch of catalog operations against the database."""

import logging
import time
from typing import Any, Awaitable, Callable, Optional

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from query_catalog.core.connection import DatabaseConnection
from query_catalog.errors import OperationError
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

logger = logging.getLogger(__name__)

Handler = Callable[[Operation], Awaitable[OperationResult]]


class OperationExecutor:
    """Runs one catalog operation at a time on a shared connection."""

    def __init__(self, connection: DatabaseConnection):
        """
        Initialize operation executor.

        Args:
            connection: Initialized database connection
        """
        self.connection = connection
        self._handlers: dict[OperationKind, Handler] = {
            OperationKind.FIND: self._find,
            OperationKind.UPDATE: self._update,
            OperationKind.DELETE: self._delete,
            OperationKind.AGGREGATE: self._aggregate,
            OperationKind.CREATE_INDEX: self._create_index,
            OperationKind.EXPLAIN: self._explain,
        }

    async def run(self, operation: Operation) -> OperationResult:
        """
        Execute a catalog operation and materialize its result.

        Args:
            operation: Catalog entry to execute

        Returns:
            Result matching the operation kind

        Raises:
            OperationError: If the database call fails or returns malformed data
        """
        handler = self._handlers[operation.kind]
        logger.debug(f"Running {operation.kind.value}: {operation.description}")

        try:
            return await handler(operation)
        except (PyMongoError, ValidationError) as e:
            raise OperationError(operation.description, e) from e

    async def _find(self, operation: Operation) -> RecordsResult:
        params = operation.params
        assert isinstance(params, FindParams)

        start_time = time.time()
        cursor = self.connection.collection.find(
            params.filter,
            params.projection,
            sort=params.sort,
            skip=params.skip,
            limit=params.limit,
        )
        documents = await cursor.to_list()
        execution_time = (time.time() - start_time) * 1000  # Convert to ms

        rows = [Book.from_document(document).to_row() for document in documents]
        return RecordsResult(
            kind="find",
            rows=rows,
            row_count=len(rows),
            execution_time_ms=execution_time,
        )

    async def _aggregate(self, operation: Operation) -> RecordsResult:
        params = operation.params
        assert isinstance(params, AggregateParams)

        start_time = time.time()
        cursor = await self.connection.collection.aggregate(params.pipeline)
        rows = await cursor.to_list()
        execution_time = (time.time() - start_time) * 1000

        return RecordsResult(
            kind="aggregate",
            rows=rows,
            row_count=len(rows),
            execution_time_ms=execution_time,
        )

    async def _update(self, operation: Operation) -> MutationResult:
        params = operation.params
        assert isinstance(params, UpdateParams)

        result = await self.connection.collection.update_one(
            params.filter, params.update
        )
        return MutationResult(
            kind="update",
            matched_count=result.matched_count,
            affected_count=result.modified_count,
        )

    async def _delete(self, operation: Operation) -> MutationResult:
        params = operation.params
        assert isinstance(params, DeleteParams)

        result = await self.connection.collection.delete_one(params.filter)
        return MutationResult(kind="delete", affected_count=result.deleted_count)

    async def _create_index(self, operation: Operation) -> IndexResult:
        params = operation.params
        assert isinstance(params, CreateIndexParams)

        # The server returns the existing name when an identical index exists
        name = await self.connection.collection.create_index(list(params.keys))
        return IndexResult(index_name=name)

    async def _explain(self, operation: Operation) -> ExplainResult:
        params = operation.params
        assert isinstance(params, ExplainParams)

        explain_command = {
            "explain": {
                "find": self.connection.config.collection,
                "filter": params.filter,
            },
            "verbosity": "executionStats",
        }
        plan = await self.connection.database.command(explain_command)

        stats = plan.get("executionStats", {})
        result = ExplainResult(
            docs_examined=stats.get("totalDocsExamined", 0),
            execution_time_ms=stats.get("executionTimeMillis", 0),
            winning_stage=_winning_stage(plan),
        )
        logger.debug(
            f"Explain '{operation.description}': stage={result.winning_stage} "
            f"used_index={result.used_index}"
        )
        return result


def _winning_stage(plan: dict[str, Any]) -> Optional[str]:
    """Extract the top-level stage of the winning plan."""
    winning_plan = plan.get("queryPlanner", {}).get("winningPlan", {})
    # Slot-based engine plans nest the classic tree under "queryPlan"
    winning_plan = winning_plan.get("queryPlan", winning_plan)
    return winning_plan.get("stage")
