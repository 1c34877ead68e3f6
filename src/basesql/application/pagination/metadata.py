"""Application pagination – PaginationMetadata, RecordPage, calc_metadata."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class PaginationMetadata:
    """Page navigation data derived from a total row count."""

    page: int
    per_page: int
    total_pages: int
    total_rows: int

    @property
    def is_paginated(self) -> bool:
        return self.page != 0 and self.per_page != 0

    @property
    def has_next(self) -> bool:
        return self.is_paginated and self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.is_paginated and self.page > 1

    def to_dict(self) -> dict[str, int]:
        return {
            "page": self.page,
            "perPage": self.per_page,
            "totalPages": self.total_pages,
            "totalRows": self.total_rows,
        }


def calc_metadata(page: Any, per_page: Any, total_rows: Any) -> PaginationMetadata:
    """Derive :class:`PaginationMetadata`.

    Pagination off (``page`` or ``per_page`` equal to 0) yields the
    degenerate ``page=0, per_page=0, total_pages=1`` regardless of
    ``total_rows``.
    """
    page, per_page, total_rows = int(page or 0), int(per_page or 0), int(total_rows or 0)
    if page == 0 or per_page == 0:
        return PaginationMetadata(page=0, per_page=0, total_pages=1, total_rows=total_rows)

    full_pages, remainder = divmod(total_rows, per_page)
    return PaginationMetadata(
        page=page,
        per_page=per_page,
        total_pages=full_pages + (1 if remainder else 0),
        total_rows=total_rows,
    )


@dataclasses.dataclass
class RecordPage(Generic[T]):
    """Rows of one page together with their :class:`PaginationMetadata`."""

    meta: PaginationMetadata
    records: list[T]

    def map(self, fn: Callable[[T], Any]) -> "RecordPage[Any]":
        """Return a new :class:`RecordPage` with each record transformed by *fn*."""
        return RecordPage(meta=self.meta, records=[fn(r) for r in self.records])


__all__ = ["PaginationMetadata", "RecordPage", "calc_metadata"]
