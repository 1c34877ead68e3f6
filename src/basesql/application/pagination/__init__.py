"""Application pagination – dialect clauses and page metadata."""
from basesql.application.pagination.metadata import PaginationMetadata, RecordPage, calc_metadata
from basesql.application.pagination.paginator import (
    LimitOffsetPaginator,
    OffsetFetchPaginator,
    Paginator,
    PaginatorFactory,
)

__all__ = [
    "LimitOffsetPaginator",
    "OffsetFetchPaginator",
    "PaginationMetadata",
    "Paginator",
    "PaginatorFactory",
    "RecordPage",
    "calc_metadata",
]
