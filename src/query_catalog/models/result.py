"""Operation result models."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class RecordsResult(BaseModel):
    """Materialized rows returned by a find or aggregate operation."""

    kind: Literal["find", "aggregate"] = Field(..., description="Operation kind")
    rows: list[dict[str, Any]] = Field(..., description="Result rows as dictionaries")
    row_count: int = Field(..., description="Number of rows returned")
    execution_time_ms: Optional[float] = Field(
        None, description="Round-trip time in milliseconds"
    )

    @property
    def is_empty(self) -> bool:
        """Check if result set is empty."""
        return self.row_count == 0


class MutationResult(BaseModel):
    """Outcome of a single-document update or delete."""

    kind: Literal["update", "delete"] = Field(..., description="Operation kind")
    matched_count: Optional[int] = Field(
        None, description="Documents matched by the filter (updates only)"
    )
    affected_count: int = Field(
        ..., ge=0, description="Documents modified or deleted"
    )

    @property
    def applied(self) -> bool:
        """Check if any document was changed."""
        return self.affected_count > 0


class IndexResult(BaseModel):
    """Name of an index created or already present."""

    kind: Literal["create_index"] = "create_index"
    index_name: str = Field(..., description="Index name reported by the server")


class ExplainResult(BaseModel):
    """Execution statistics from an explain plan."""

    kind: Literal["explain"] = "explain"
    docs_examined: int = Field(..., description="totalDocsExamined")
    execution_time_ms: int = Field(..., description="executionTimeMillis")
    winning_stage: Optional[str] = Field(
        None, description="Top-level stage of the winning plan (e.g., COLLSCAN)"
    )

    @property
    def used_index(self) -> bool:
        """Check if the winning plan read from an index."""
        return self.winning_stage is not None and self.winning_stage != "COLLSCAN"

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "kind": "explain",
                    "docs_examined": 1,
                    "execution_time_ms": 0,
                    "winning_stage": "FETCH",
                }
            ]
        }
    }


OperationResult = Union[RecordsResult, MutationResult, IndexResult, ExplainResult]
