"""Application assembly – QueryRequest, ResolvedQuery, AssembledQuery and merge_request."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from basesql.application.assembly.definition import QueryDefinition, strip_control_characters
from basesql.application.search.query import (
    FilterCondition,
    SearchColumnSpec,
    as_filter_conditions,
    as_search_columns,
)
from basesql.kernel.errors import ArgumentError
from basesql.kernel.types import SortDirection

DEFAULT_PER_PAGE = 50


@dataclasses.dataclass(frozen=True)
class QueryRequest:
    """Caller overrides for one call.

    ``None`` means "use the entity default".  ``page``/``per_page`` of 0
    turn pagination off; an empty ``search_term`` turns free-text search
    off.  ``id`` is the identifier shorthand: a scalar for a single-field
    primary key or a ``{field: value}`` mapping.
    """

    query: str | None = None
    search_columns: Mapping[str, SearchColumnSpec | Mapping[str, Any]] | None = None
    primary_key: str | Sequence[str] | None = None
    page: int | None = None
    per_page: int | None = None
    search_term: str | None = None
    filter: Mapping[str, Any] | None = None
    order: Mapping[str, SortDirection | str] | None = None
    group_by: Sequence[str] | None = None
    params: Mapping[str, Any] | None = None
    id: Any = None


@dataclasses.dataclass(frozen=True)
class ResolvedQuery:
    """Effective request after defaults and overrides were merged."""

    query: str
    search_columns: Mapping[str, SearchColumnSpec]
    primary_key: tuple[str, ...]
    page: int
    per_page: int
    search_term: str
    filter: Mapping[str, tuple[FilterCondition, ...]]
    order: Mapping[str, SortDirection]
    group_by: tuple[str, ...]
    params: Mapping[str, Any]

    @property
    def paginated(self) -> bool:
        return self.page != 0 and self.per_page != 0


@dataclasses.dataclass(frozen=True)
class AssembledQuery:
    """Data statement, count statement and the bindings both share."""

    statement: str
    count_statement: str
    parameters: dict[str, Any]


def _pick(override: Any, default: Any) -> Any:
    return default if override is None else override


def _as_columns(value: str | Sequence[str] | None) -> tuple[str, ...]:
    """A bare string names one column; it is never split into characters."""
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def merge_request(
    definition: QueryDefinition | None,
    request: QueryRequest,
    *,
    default_per_page: int = DEFAULT_PER_PAGE,
) -> ResolvedQuery:
    """Layer *request* on top of *definition*.

    Precedence, highest first: caller overrides, entity defaults, built-in
    defaults (``page=1``, ``per_page=default_per_page``, empty search and
    filter).  The identifier shorthand is not applied here.
    """
    if definition is not None:
        defaults: dict[str, Any] = {
            "query": definition.raw_sql(),
            "search_columns": definition.search_columns(),
            "primary_key": definition.primary_key(),
            "per_page": definition.per_page(),
            "order": definition.order_by(),
            "group_by": definition.group_by(),
            "params": definition.sql_params(),
        }
    else:
        defaults = {"primary_key": "id", "per_page": default_per_page}

    query = _pick(request.query, defaults.get("query"))
    if not query:
        raise ArgumentError("A base statement is required to assemble a query")

    filters = _pick(request.filter, {})
    order = _pick(request.order, defaults.get("order") or {})
    return ResolvedQuery(
        query=strip_control_characters(query),
        search_columns=MappingProxyType(
            as_search_columns(_pick(request.search_columns, defaults.get("search_columns") or {}))
        ),
        primary_key=_as_columns(_pick(request.primary_key, defaults.get("primary_key"))),
        page=int(_pick(request.page, 1)),
        per_page=int(_pick(request.per_page, defaults.get("per_page"))),
        search_term=_pick(request.search_term, "") or "",
        filter=MappingProxyType({field: as_filter_conditions(raw) for field, raw in filters.items()}),
        order=MappingProxyType({column: SortDirection.parse(d) for column, d in order.items()}),
        group_by=_as_columns(_pick(request.group_by, defaults.get("group_by"))),
        params=MappingProxyType(dict(_pick(request.params, defaults.get("params") or {}))),
    )


__all__ = [
    "AssembledQuery",
    "DEFAULT_PER_PAGE",
    "QueryRequest",
    "ResolvedQuery",
    "merge_request",
]
