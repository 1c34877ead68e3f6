"""Application execution – SqlQueryService."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

from basesql.application.assembly import ClauseAssembler, QueryDefinition, QueryRequest
from basesql.application.execution.ports import QueryExecutor, Row
from basesql.application.pagination import RecordPage, calc_metadata
from basesql.kernel.errors import ArgumentError, DialectMismatchError
from basesql.kernel.types import Dialect
from basesql.observability.logging import get_logger

logger = get_logger(__name__)

TOTAL_ROWS_COLUMN = "TOTALROWS"


def total_rows(row: Row | None) -> int:
    """Read the count column; drivers may fold its case."""
    if not row:
        return 0
    for key, value in row.items():
        if key.upper() == TOTAL_ROWS_COLUMN:
            return int(value or 0)
    raise ArgumentError(
        "Count row has no TOTALROWS column",
        detail={"columns": list(row)},
    )


class SqlQueryService:
    """Assemble a request and run it through a :class:`QueryExecutor`.

    The assembler defaults to one built for the executor's dialect; a
    supplied assembler must target the same dialect.
    """

    def __init__(self, executor: QueryExecutor, assembler: ClauseAssembler | None = None) -> None:
        dialect = Dialect.parse(executor.database_dialect())
        self._executor = executor
        self._assembler = assembler or ClauseAssembler(dialect)
        if dialect is not self._assembler.dialect:
            raise DialectMismatchError(self._assembler.dialect, dialect)

    @property
    def assembler(self) -> ClauseAssembler:
        return self._assembler

    async def run(
        self,
        request: QueryRequest | None = None,
        definition: QueryDefinition | None = None,
    ) -> RecordPage[Row]:
        """Fetch one page of records together with its pagination metadata.

        The data and count statements are independent and run concurrently.
        """
        resolved = self._assembler.resolve(request, definition)
        assembled = self._assembler.compose(resolved)

        records, count = await asyncio.gather(
            self._executor.query(assembled.statement, assembled.parameters),
            self._executor.query_one(assembled.count_statement, assembled.parameters),
        )
        meta = calc_metadata(resolved.page, resolved.per_page, total_rows(count))
        logger.debug(
            "records_fetched",
            records=len(records),
            total_rows=meta.total_rows,
            page=meta.page,
        )
        return RecordPage(meta=meta, records=list(records))

    async def fetch_one(
        self,
        identifier: Any,
        definition: QueryDefinition,
        request: QueryRequest | None = None,
    ) -> Row | None:
        """First row whose primary key equals *identifier*."""
        request = dataclasses.replace(request or QueryRequest(), id=identifier)
        assembled = self._assembler.assemble(request, definition)
        return await self._executor.query_one(assembled.statement, assembled.parameters)


__all__ = ["SqlQueryService", "TOTAL_ROWS_COLUMN", "total_rows"]
