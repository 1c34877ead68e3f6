"""Application execution – executor port and the run() orchestration."""
from basesql.application.execution.ports import QueryExecutor, Row
from basesql.application.execution.service import TOTAL_ROWS_COLUMN, SqlQueryService, total_rows

__all__ = ["QueryExecutor", "Row", "SqlQueryService", "TOTAL_ROWS_COLUMN", "total_rows"]
