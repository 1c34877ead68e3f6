"""Application search – per-dialect SearchColumnResolver implementations."""
from __future__ import annotations

from basesql.application.search.resolver import SearchColumnResolver
from basesql.kernel.types import Dialect


class MySqlSearchColumnResolver(SearchColumnResolver):
    dialect = Dialect.MYSQL

    def i_like(self, column: str, placeholder: str) -> str:
        return f"LOWER({column}) LIKE LOWER({placeholder})"


class PostgresSearchColumnResolver(SearchColumnResolver):
    dialect = Dialect.POSTGRESQL

    def i_like(self, column: str, placeholder: str) -> str:
        return f"{column} ILIKE {placeholder}"


class MsSqlSearchColumnResolver(SearchColumnResolver):
    """SQL Server: case-insensitive match through an explicit CI collation."""

    dialect = Dialect.MSSQL
    case_insensitive_collation = "SQL_Latin1_General_CP1_CI_AS"

    def i_like(self, column: str, placeholder: str) -> str:
        return f"{column} COLLATE {self.case_insensitive_collation} LIKE {placeholder}"


__all__ = [
    "MsSqlSearchColumnResolver",
    "MySqlSearchColumnResolver",
    "PostgresSearchColumnResolver",
]
