"""Remote data gateway protocol and result types."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DataGateway", "QueryResult", "CreateResult"]


class QueryResult(BaseModel):
    """Rows returned by a query."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    total_size: int = Field(default=0, alias="totalSize")
    records: list[dict[str, Any]] = Field(default_factory=list)


class CreateResult(BaseModel):
    """Outcome of a record create the remote store answered.

    ``success`` is False when the store rejected the record (duplicate
    name, constraint violation); ``errors`` then holds its messages.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    success: bool = True
    errors: list[str] = Field(default_factory=list)

    @property
    def error_message(self) -> str:
        return "\n".join(self.errors)


@runtime_checkable
class DataGateway(Protocol):
    """Query/create access to a remote org, scoped to an acting identity.

    Implementations raise :class:`~commerce_ext.errors.GatewayError` when a
    call cannot be completed at all.
    """

    def query(self, statement: str, identity: str) -> QueryResult: ...

    def create(self, object_type: str, fields: dict[str, str], identity: str) -> CreateResult: ...
