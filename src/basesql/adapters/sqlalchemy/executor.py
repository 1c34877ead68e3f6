"""SQLAlchemy adapter – SqlAlchemyQueryExecutor."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential

from basesql.application.execution import Row
from basesql.application.params import ParameterStyle, expand_sequence_parameters
from basesql.kernel.errors import QueryExecutionError, UnsupportedDialectError
from basesql.kernel.types import Dialect
from basesql.observability.logging import get_logger

logger = get_logger(__name__)

_DIALECT_NAMES: dict[str, Dialect] = {
    "mysql": Dialect.MYSQL,
    "mariadb": Dialect.MYSQL,
    "postgresql": Dialect.POSTGRESQL,
    "mssql": Dialect.MSSQL,
}


def dialect_from_engine(engine: Any) -> Dialect:
    """Map ``engine.dialect.name`` onto :class:`Dialect`."""
    name = engine.dialect.name
    try:
        return _DIALECT_NAMES[name]
    except KeyError as exc:
        raise UnsupportedDialectError(name) from exc


def is_transient(exc: BaseException) -> bool:
    """Connection-level failures worth another attempt."""
    if isinstance(exc, OperationalError):
        return True
    return isinstance(exc, DBAPIError) and bool(exc.connection_invalidated)


class SqlAlchemyQueryExecutor:
    """Runs named-placeholder statements on an async SQLAlchemy engine.

    Parameters
    ----------
    engine:
        :class:`~sqlalchemy.ext.asyncio.AsyncEngine` to borrow connections from.
    dialect:
        Overrides detection from ``engine.dialect.name``.
    max_attempts:
        Total attempts for transient failures (first call included).
    wait:
        A ``tenacity`` wait strategy between attempts.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        *,
        dialect: Dialect | str | None = None,
        max_attempts: int = 3,
        wait: Any = None,
    ) -> None:
        self._engine = engine
        self._dialect = Dialect.parse(dialect) if dialect is not None else dialect_from_engine(engine)
        self._max_attempts = max_attempts
        self._wait = wait or wait_exponential(multiplier=0.1, max=2)

    def database_dialect(self) -> Dialect:
        return self._dialect

    def parameter_style(self) -> ParameterStyle:
        return ParameterStyle.NAMED

    async def query(self, statement: str, parameters: Mapping[str, Any]) -> list[Row]:
        sql, bindings = expand_sequence_parameters(statement, parameters)
        attempts = 0
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=self._wait,
                retry=retry_if_exception(is_transient),
                reraise=True,
            ):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    rows = await self._execute(sql, bindings)
        except SQLAlchemyError as exc:
            logger.warning("query_failed", error=type(exc).__name__, attempts=attempts)
            raise QueryExecutionError(
                statement,
                f"Query failed after {attempts} attempt(s): {type(exc).__name__}",
                attempts=attempts,
                cause=exc,
            ) from exc

        logger.debug("query_executed", rows=len(rows), attempts=attempts)
        return rows

    async def query_one(self, statement: str, parameters: Mapping[str, Any]) -> Row | None:
        rows = await self.query(statement, parameters)
        return rows[0] if rows else None

    async def _execute(self, sql: str, bindings: dict[str, Any]) -> list[Row]:
        async with self._engine.connect() as conn:
            result = await conn.execute(text(sql), bindings)
            return [dict(row._mapping) for row in result]


__all__ = ["SqlAlchemyQueryExecutor", "dialect_from_engine", "is_transient"]
