"""DB-API adapter – DbApiQueryExecutor for any PEP 249 connection."""
from __future__ import annotations

import asyncio
import threading
from collections.abc import Mapping
from typing import Any

from basesql.application.execution import Row
from basesql.application.params import (
    ParameterStyle,
    convert_parameter_style,
    default_parameter_style,
    expand_sequence_parameters,
)
from basesql.kernel.errors import QueryExecutionError
from basesql.kernel.types import Dialect
from basesql.observability.logging import get_logger

logger = get_logger(__name__)


class DbApiQueryExecutor:
    """Runs statements on a blocking DB-API connection from a worker thread.

    Placeholders are rewritten to *parameter_style* (defaults to the style
    usual for *dialect*).  Calls are serialised on one lock because PEP 249
    does not promise that a connection can be shared between threads.
    """

    def __init__(
        self,
        connection: Any,
        dialect: Dialect | str,
        parameter_style: ParameterStyle | None = None,
    ) -> None:
        self._connection = connection
        self._dialect = Dialect.parse(dialect)
        self._style = parameter_style or default_parameter_style(self._dialect)
        self._lock = threading.Lock()

    def database_dialect(self) -> Dialect:
        return self._dialect

    def parameter_style(self) -> ParameterStyle:
        return self._style

    async def query(self, statement: str, parameters: Mapping[str, Any]) -> list[Row]:
        sql, bindings = expand_sequence_parameters(statement, parameters)
        converted = convert_parameter_style(sql, bindings, self._style)
        arguments: Any = converted.parameters
        if self._style is ParameterStyle.QUESTION:
            arguments = tuple(arguments)
        elif self._style is ParameterStyle.NAMED:
            arguments = dict(arguments)
        return await asyncio.to_thread(self._execute, converted.statement, arguments)

    async def query_one(self, statement: str, parameters: Mapping[str, Any]) -> Row | None:
        rows = await self.query(statement, parameters)
        return rows[0] if rows else None

    def _execute(self, statement: str, arguments: Any) -> list[Row]:
        with self._lock:
            cursor = self._connection.cursor()
            try:
                cursor.execute(statement, arguments)
                columns = [column[0] for column in cursor.description or ()]
                rows = [dict(zip(columns, values)) for values in cursor.fetchall()]
            except Exception as exc:
                logger.warning("query_failed", error=type(exc).__name__)
                raise QueryExecutionError(statement, f"Query failed: {exc}", cause=exc) from exc
            finally:
                cursor.close()
        logger.debug("query_executed", rows=len(rows))
        return rows


__all__ = ["DbApiQueryExecutor"]
