"""Application assembly – ClauseAssembler.

Composes a base statement with WHERE / GROUP BY / ORDER BY / pagination and
builds the parallel ``COUNT(*)`` statement over the same predicates.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Iterable

from basesql.application.assembly.definition import QueryDefinition
from basesql.application.assembly.identifier import apply_identifier
from basesql.application.assembly.request import (
    DEFAULT_PER_PAGE,
    AssembledQuery,
    QueryRequest,
    ResolvedQuery,
    merge_request,
)
from basesql.application.pagination import PaginatorFactory
from basesql.application.search import ResolvedPredicate, SearchColumnFactory
from basesql.kernel.errors import ParameterCollisionError
from basesql.kernel.types import Dialect
from basesql.observability.logging import get_logger

if TYPE_CHECKING:
    from basesql.config.settings import EngineSettings

logger = get_logger(__name__)

_WHERE_KEYWORD = re.compile(r"\bWHERE\b", re.IGNORECASE)


class ClauseAssembler:
    """Stateless per-dialect query assembler; safe to share between callers."""

    def __init__(
        self,
        dialect: Dialect | str,
        *,
        default_per_page: int = DEFAULT_PER_PAGE,
        reject_parameter_collisions: bool = False,
    ) -> None:
        self.dialect = Dialect.parse(dialect)
        self.columns = SearchColumnFactory(self.dialect)
        self.paginator = PaginatorFactory(self.dialect)
        self.default_per_page = default_per_page
        self.reject_parameter_collisions = reject_parameter_collisions

    @classmethod
    def from_settings(cls, settings: "EngineSettings") -> "ClauseAssembler":
        return cls(
            settings.database_dialect,
            default_per_page=settings.default_per_page,
            reject_parameter_collisions=settings.reject_parameter_collisions,
        )

    def resolve(
        self,
        request: QueryRequest | None = None,
        definition: QueryDefinition | None = None,
    ) -> ResolvedQuery:
        """Merge overrides onto defaults and apply the identifier shorthand."""
        request = request or QueryRequest()
        resolved = merge_request(definition, request, default_per_page=self.default_per_page)
        return apply_identifier(resolved, request.id)

    def assemble(
        self,
        request: QueryRequest | None = None,
        definition: QueryDefinition | None = None,
    ) -> AssembledQuery:
        return self.compose(self.resolve(request, definition))

    def compose(self, resolved: ResolvedQuery) -> AssembledQuery:
        """Build both statements and the bindings for an already resolved request."""
        filter_predicates = self.filter_predicates(resolved)
        search_predicates = self.search_predicates(resolved)
        where = self.where_clause(resolved.query, filter_predicates, search_predicates)
        group_by = self.group_by_clause(resolved)
        order_by = self.order_by_clause(resolved)
        pagination = self.paginator.clause(resolved.page, resolved.per_page)

        if pagination and not order_by and self.dialect is Dialect.MSSQL:
            logger.warning("mssql_pagination_without_order", query=resolved.query)

        parameters = self.merge_parameters(filter_predicates, search_predicates, resolved.params)
        assembled = AssembledQuery(
            statement=_join(resolved.query, where, group_by, order_by, pagination),
            count_statement=self.count_statement(_join(resolved.query, where, group_by)),
            parameters=parameters,
        )
        logger.debug(
            "query_assembled",
            dialect=self.dialect.value,
            paginated=bool(pagination),
            parameter_names=sorted(parameters),
        )
        return assembled

    # -- predicates ---------------------------------------------------------

    def filter_predicates(self, resolved: ResolvedQuery) -> list[ResolvedPredicate]:
        return [
            self.columns.resolve(field, condition.type, condition.op, condition.value)
            for field, conditions in resolved.filter.items()
            for condition in conditions
        ]

    def search_predicates(self, resolved: ResolvedQuery) -> list[ResolvedPredicate]:
        if resolved.search_term == "":
            return []
        return [
            self.columns.resolve(column, spec.type, spec.op, resolved.search_term)
            for column, spec in resolved.search_columns.items()
        ]

    # -- clauses ------------------------------------------------------------

    def where_clause(
        self,
        query: str,
        filter_predicates: list[ResolvedPredicate],
        search_predicates: list[ResolvedPredicate],
    ) -> str:
        groups = [
            " AND ".join(p.fragment for p in filter_predicates),
            f"({' OR '.join(p.fragment for p in search_predicates)})" if search_predicates else "",
        ]
        condition = " AND ".join(g for g in groups if g)
        if not condition:
            return ""
        keyword = "AND" if _WHERE_KEYWORD.search(query) else "WHERE"
        return f"{keyword} {condition}"

    def group_by_clause(self, resolved: ResolvedQuery) -> str:
        if not resolved.group_by:
            return ""
        return f"GROUP BY {', '.join(resolved.group_by)}"

    def order_by_clause(self, resolved: ResolvedQuery) -> str:
        if not resolved.order:
            return ""
        terms = ", ".join(f"{column} {direction.value}" for column, direction in resolved.order.items())
        return f"ORDER BY {terms}"

    @staticmethod
    def count_statement(inner: str) -> str:
        return f"SELECT COUNT(*) TOTALROWS FROM ({inner}) TABCOUNT"

    # -- parameters ---------------------------------------------------------

    def merge_parameters(
        self,
        filter_predicates: Iterable[ResolvedPredicate],
        search_predicates: Iterable[ResolvedPredicate],
        static: Any,
    ) -> dict[str, Any]:
        """Filter bindings, then search bindings, then static parameters on top."""
        parameters: dict[str, Any] = {}
        for source, bindings in (
            ("filter", ((p.parameter, p.value) for p in filter_predicates if p.binds_value)),
            ("search", ((p.parameter, p.value) for p in search_predicates if p.binds_value)),
            ("static", static.items()),
        ):
            for name, value in bindings:
                self._bind(parameters, name, value, source)
        return parameters

    def _bind(self, parameters: dict[str, Any], name: str, value: Any, source: str) -> None:
        if name in parameters:
            if self.reject_parameter_collisions:
                raise ParameterCollisionError(name, detail={"source": source})
            logger.warning("parameter_collision", parameter=name, source=source)
        parameters[name] = value


def _join(*clauses: str) -> str:
    return " ".join(c for c in clauses if c)


__all__ = ["ClauseAssembler"]
