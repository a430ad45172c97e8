"""Catalog operation models."""

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OperationKind(str, Enum):
    """Kinds of database calls a catalog entry can make."""

    FIND = "find"
    UPDATE = "update"
    DELETE = "delete"
    AGGREGATE = "aggregate"
    CREATE_INDEX = "create_index"
    EXPLAIN = "explain"


class _Params(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class FindParams(_Params):
    """Parameters for a filtered find."""

    filter: dict[str, Any] = Field(default_factory=dict, description="Query filter")
    projection: Optional[dict[str, Any]] = Field(
        None, description="Fields to include or exclude"
    )
    sort: Optional[list[tuple[str, Literal[1, -1]]]] = Field(
        None, description="Sort keys as (field, direction) pairs"
    )
    skip: int = Field(default=0, ge=0, description="Documents to skip")
    limit: int = Field(default=0, ge=0, description="Maximum documents (0 for all)")


class UpdateParams(_Params):
    """Parameters for a single-document update."""

    filter: dict[str, Any] = Field(..., description="Query filter")
    update: dict[str, Any] = Field(..., description="Update operators")

    @model_validator(mode="after")
    def check_operators(self) -> "UpdateParams":
        """Reject replacement-style updates."""
        if not self.update or not all(key.startswith("$") for key in self.update):
            raise ValueError("update must only contain update operators like $set")
        return self


class DeleteParams(_Params):
    """Parameters for a single-document delete."""

    filter: dict[str, Any] = Field(..., description="Query filter")


class AggregateParams(_Params):
    """Parameters for an aggregation pipeline."""

    pipeline: list[dict[str, Any]] = Field(
        ..., min_length=1, description="Aggregation stages"
    )


class CreateIndexParams(_Params):
    """Parameters for index creation."""

    keys: list[tuple[str, Literal[1, -1]]] = Field(
        ..., min_length=1, description="Index keys as (field, direction) pairs"
    )


class ExplainParams(_Params):
    """Parameters for an explain of a find filter."""

    filter: dict[str, Any] = Field(..., description="Query filter to explain")


OperationParams = Union[
    FindParams,
    UpdateParams,
    DeleteParams,
    AggregateParams,
    CreateIndexParams,
    ExplainParams,
]

PARAMS_BY_KIND: dict[OperationKind, type[BaseModel]] = {
    OperationKind.FIND: FindParams,
    OperationKind.UPDATE: UpdateParams,
    OperationKind.DELETE: DeleteParams,
    OperationKind.AGGREGATE: AggregateParams,
    OperationKind.CREATE_INDEX: CreateIndexParams,
    OperationKind.EXPLAIN: ExplainParams,
}


class Operation(BaseModel):
    """A named database call with fixed parameters."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., min_length=1, description="Display description")
    kind: OperationKind = Field(..., description="Kind of database call")
    params: OperationParams = Field(..., description="Kind-specific parameters")
    template: Optional[str] = Field(
        None,
        description="str.format template for each result row (None prints JSON)",
    )

    @model_validator(mode="after")
    def check_params_kind(self) -> "Operation":
        """Ensure params match the operation kind."""
        expected = PARAMS_BY_KIND[self.kind]
        if type(self.params) is not expected:
            raise ValueError(
                f"{self.kind.value} operation requires {expected.__name__}, "
                f"got {type(self.params).__name__}"
            )
        return self


def find(description: str, template: Optional[str] = None, **params: Any) -> Operation:
    """Build a find operation."""
    return Operation(
        description=description,
        kind=OperationKind.FIND,
        params=FindParams(**params),
        template=template,
    )


def update_one(
    description: str, filter: dict[str, Any], update: dict[str, Any]
) -> Operation:
    """Build a single-document update operation."""
    return Operation(
        description=description,
        kind=OperationKind.UPDATE,
        params=UpdateParams(filter=filter, update=update),
    )


def delete_one(description: str, filter: dict[str, Any]) -> Operation:
    """Build a single-document delete operation."""
    return Operation(
        description=description,
        kind=OperationKind.DELETE,
        params=DeleteParams(filter=filter),
    )


def aggregate(
    description: str, pipeline: list[dict[str, Any]], template: Optional[str] = None
) -> Operation:
    """Build an aggregation operation."""
    return Operation(
        description=description,
        kind=OperationKind.AGGREGATE,
        params=AggregateParams(pipeline=pipeline),
        template=template,
    )


def create_index(description: str, keys: list[tuple[str, int]]) -> Operation:
    """Build an index creation operation."""
    return Operation(
        description=description,
        kind=OperationKind.CREATE_INDEX,
        params=CreateIndexParams(keys=keys),
    )


def explain(description: str, filter: dict[str, Any]) -> Operation:
    """Build an explain operation."""
    return Operation(
        description=description,
        kind=OperationKind.EXPLAIN,
        params=ExplainParams(filter=filter),
    )
