"""Application search – FilterCondition and SearchColumnSpec value objects."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from basesql.kernel.errors import ArgumentError
from basesql.kernel.types import SearchColumnType, SearchOperator

__all__ = [
    "FilterCondition",
    "SearchColumnSpec",
    "as_filter_conditions",
    "as_search_columns",
]


@dataclass(frozen=True)
class FilterCondition:
    """One explicit predicate attached to a filter field."""
    op: SearchOperator
    value: Any = None
    type: SearchColumnType = SearchColumnType.STRING

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", SearchOperator.parse(self.op))
        object.__setattr__(self, "type", SearchColumnType.parse(self.type))

    @classmethod
    def of(cls, raw: "FilterCondition | Mapping[str, Any]") -> "FilterCondition":
        """Accept an instance or a ``{"op", "value", "type"}`` mapping."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, Mapping):
            if "op" not in raw:
                raise ArgumentError("Filter condition is missing 'op'", detail={"condition": dict(raw)})
            return cls(op=raw["op"], value=raw.get("value"), type=raw.get("type"))
        raise ArgumentError(f"Unsupported filter condition {raw!r}")


@dataclass(frozen=True)
class SearchColumnSpec:
    """Operator and type used when matching the free-text term against a column."""
    op: SearchOperator
    type: SearchColumnType = SearchColumnType.STRING

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", SearchOperator.parse(self.op))
        object.__setattr__(self, "type", SearchColumnType.parse(self.type))

    @classmethod
    def of(cls, raw: "SearchColumnSpec | Mapping[str, Any]") -> "SearchColumnSpec":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, Mapping):
            if "op" not in raw:
                raise ArgumentError("Search column is missing 'op'", detail={"column": dict(raw)})
            return cls(op=raw["op"], type=raw.get("type"))
        raise ArgumentError(f"Unsupported search column {raw!r}")


def as_filter_conditions(raw: Any) -> tuple[FilterCondition, ...]:
    """Normalise a field's filter value to an ordered tuple of conditions."""
    if isinstance(raw, (FilterCondition, Mapping)):
        return (FilterCondition.of(raw),)
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        return tuple(FilterCondition.of(item) for item in raw)
    raise ArgumentError(f"Unsupported filter value {raw!r}")


def as_search_columns(raw: Mapping[str, Any]) -> dict[str, SearchColumnSpec]:
    return {column: SearchColumnSpec.of(spec) for column, spec in raw.items()}
