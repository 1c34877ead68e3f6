"""Application search – filter/search-column value objects and dialect resolvers."""
from basesql.application.search.dialects import (
    MsSqlSearchColumnResolver,
    MySqlSearchColumnResolver,
    PostgresSearchColumnResolver,
)
from basesql.application.search.factory import SearchColumnFactory
from basesql.application.search.query import (
    FilterCondition,
    SearchColumnSpec,
    as_filter_conditions,
    as_search_columns,
)
from basesql.application.search.resolver import (
    ResolvedPredicate,
    SearchColumnResolver,
    parameter_name,
)

__all__ = [
    "FilterCondition",
    "MsSqlSearchColumnResolver",
    "MySqlSearchColumnResolver",
    "PostgresSearchColumnResolver",
    "ResolvedPredicate",
    "SearchColumnFactory",
    "SearchColumnResolver",
    "SearchColumnSpec",
    "as_filter_conditions",
    "as_search_columns",
    "parameter_name",
]
