"""Application execution – QueryExecutor port."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from basesql.kernel.types import Dialect

Row = Mapping[str, Any]


@runtime_checkable
class QueryExecutor(Protocol):
    """Runs assembled read statements against a live database.

    Statements arrive with ``:name`` placeholders; adapters convert them to
    whatever their driver binds.  Retries and timeouts are the adapter's
    business.
    """

    async def query(self, statement: str, parameters: Mapping[str, Any]) -> list[Row]: ...
    async def query_one(self, statement: str, parameters: Mapping[str, Any]) -> Row | None: ...
    def database_dialect(self) -> Dialect: ...


__all__ = ["QueryExecutor", "Row"]
