"""Infrastructure errors — failures surfaced by executor adapters."""

from __future__ import annotations

from typing import Any

from basesql.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not caused by the assembled request."""

    default_code = "infrastructure_error"


class QueryExecutionError(InfrastructureError):
    """The database rejected a statement or the connection failed."""

    default_code = "query_execution_error"

    def __init__(
        self,
        statement: str,
        message: str | None = None,
        *,
        attempts: int = 1,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or "Query execution failed", statement=statement, **kwargs)
        self.attempts = attempts


__all__ = ["InfrastructureError", "QueryExecutionError"]
