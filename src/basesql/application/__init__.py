"""Application – assembly engine, pagination, parameter styles and execution."""

from basesql.application.assembly import (
    AssembledQuery,
    ClauseAssembler,
    QueryDefinition,
    QueryRequest,
    ResolvedQuery,
)
from basesql.application.execution import QueryExecutor, SqlQueryService
from basesql.application.pagination import PaginationMetadata, PaginatorFactory, RecordPage, calc_metadata
from basesql.application.params import ParameterStyle, convert_parameter_style
from basesql.application.search import FilterCondition, SearchColumnFactory, SearchColumnSpec

__all__ = [
    "AssembledQuery",
    "ClauseAssembler",
    "FilterCondition",
    "PaginationMetadata",
    "PaginatorFactory",
    "ParameterStyle",
    "QueryDefinition",
    "QueryExecutor",
    "QueryRequest",
    "RecordPage",
    "ResolvedQuery",
    "SearchColumnFactory",
    "SearchColumnSpec",
    "SqlQueryService",
    "calc_metadata",
    "convert_parameter_style",
]
