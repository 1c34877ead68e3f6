"""Application pagination – dialect paginators and PaginatorFactory."""
from __future__ import annotations

import abc
from typing import Any

from basesql.kernel.errors import UnsupportedDialectError
from basesql.kernel.types import Dialect


class Paginator(abc.ABC):
    """Render the LIMIT/OFFSET equivalent of one dialect.

    ``page`` is 1-based; callers never pass 0 (see :class:`PaginatorFactory`).
    """

    @abc.abstractmethod
    def clause(self, page: int, per_page: int) -> str: ...

    @staticmethod
    def offset(page: int, per_page: int) -> int:
        return (page - 1) * per_page


class LimitOffsetPaginator(Paginator):
    """``LIMIT n OFFSET m`` for MySQL and PostgreSQL."""

    def clause(self, page: int, per_page: int) -> str:
        return f"LIMIT {per_page} OFFSET {self.offset(page, per_page)}"


class OffsetFetchPaginator(Paginator):
    """``OFFSET m ROWS FETCH NEXT n ROWS ONLY`` for SQL Server."""

    def clause(self, page: int, per_page: int) -> str:
        return f"OFFSET {self.offset(page, per_page)} ROWS FETCH NEXT {per_page} ROWS ONLY"


_PAGINATORS: dict[Dialect, type[Paginator]] = {
    Dialect.MYSQL: LimitOffsetPaginator,
    Dialect.POSTGRESQL: LimitOffsetPaginator,
    Dialect.MSSQL: OffsetFetchPaginator,
}


class PaginatorFactory:
    """Select the paginator for *dialect* once; reuse it for every call."""

    def __init__(self, dialect: Dialect | str) -> None:
        self.dialect = Dialect.parse(dialect)
        try:
            self.resolver: Paginator = _PAGINATORS[self.dialect]()
        except KeyError as exc:
            raise UnsupportedDialectError(dialect) from exc

    def clause(self, page: Any, per_page: Any) -> str:
        """Return ``""`` when pagination is off (page or per_page is 0)."""
        page, per_page = int(page or 0), int(per_page or 0)
        if page == 0 or per_page == 0:
            return ""
        return self.resolver.clause(page, per_page)


__all__ = [
    "LimitOffsetPaginator",
    "OffsetFetchPaginator",
    "Paginator",
    "PaginatorFactory",
]
