"""Rendering of operation results as console lines."""

import logging
from typing import Any, Optional

from query_catalog.models.operation import Operation
from query_catalog.models.result import (
    ExplainResult,
    IndexResult,
    MutationResult,
    OperationResult,
    RecordsResult,
)
from query_catalog.utils import dumps

logger = logging.getLogger(__name__)

EMPTY_RESULT_LINE = "(no documents)"
NO_MATCH = "no match"


class _RowView(dict):
    """Row mapping that renders absent fields as None."""

    def __missing__(self, key: str) -> Any:
        return None


class ResultFormatter:
    """Formats operation results into display lines."""

    MUTATION_LABELS = {
        "update": ("Update result", "updated"),
        "delete": ("Delete result", "deleted"),
    }

    def heading(self, number: int, operation: Operation) -> str:
        """Format the numbered heading printed before an entry's result."""
        return f"{number}. {operation.description}:"

    def format(self, operation: Operation, result: OperationResult) -> list[str]:
        """
        Render a result according to its kind.

        Args:
            operation: Catalog entry that produced the result
            result: Result returned by the executor

        Returns:
            Lines to display, in order

        Raises:
            TypeError: If the result type is not a known OperationResult
        """
        if isinstance(result, RecordsResult):
            return self._format_rows(operation, result)
        if isinstance(result, MutationResult):
            return [self._format_mutation(result)]
        if isinstance(result, IndexResult):
            return [f"Created index: {result.index_name}"]
        if isinstance(result, ExplainResult):
            return [
                f"Documents examined: {result.docs_examined}",
                f"Execution time (ms): {result.execution_time_ms}",
            ]
        raise TypeError(f"Unsupported result type: {type(result).__name__}")

    def _format_rows(self, operation: Operation, result: RecordsResult) -> list[str]:
        if result.is_empty:
            return [EMPTY_RESULT_LINE]
        return [self.format_row(operation.template, row) for row in result.rows]

    def format_row(self, template: Optional[str], row: dict[str, Any]) -> str:
        """Render a single row with a template, or as JSON without one."""
        if template is None:
            return dumps(row)
        try:
            return template.format_map(_RowView(row))
        except (TypeError, ValueError) as e:
            # A missing numeric field cannot take a format spec like :.2f
            logger.warning(f"Row does not fit template {template!r}: {e}")
            return dumps(row)

    def _format_mutation(self, result: MutationResult) -> str:
        label, done = self.MUTATION_LABELS[result.kind]
        outcome = done if result.applied else NO_MATCH
        return f"{label}: {outcome}"
