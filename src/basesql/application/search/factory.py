"""Application search – SearchColumnFactory."""
from __future__ import annotations

from typing import Any

from basesql.application.search.dialects import (
    MsSqlSearchColumnResolver,
    MySqlSearchColumnResolver,
    PostgresSearchColumnResolver,
)
from basesql.application.search.resolver import ResolvedPredicate, SearchColumnResolver
from basesql.kernel.errors import UnsupportedDialectError
from basesql.kernel.types import Dialect, SearchColumnType, SearchOperator

_RESOLVERS: dict[Dialect, type[SearchColumnResolver]] = {
    Dialect.MYSQL: MySqlSearchColumnResolver,
    Dialect.POSTGRESQL: PostgresSearchColumnResolver,
    Dialect.MSSQL: MsSqlSearchColumnResolver,
}


class SearchColumnFactory:
    """Bind the resolver for one dialect; unsupported tags fail here, not on first use."""

    def __init__(self, dialect: Dialect | str) -> None:
        self.dialect = Dialect.parse(dialect)
        try:
            self.resolver: SearchColumnResolver = _RESOLVERS[self.dialect]()
        except KeyError as exc:
            raise UnsupportedDialectError(dialect) from exc

    def resolve(
        self,
        column: str,
        column_type: SearchColumnType | str | None,
        operator: SearchOperator | str,
        value: Any,
    ) -> ResolvedPredicate:
        return self.resolver.resolve(column, column_type, operator, value)


__all__ = ["SearchColumnFactory"]
