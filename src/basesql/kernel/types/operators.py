"""Kernel types – SearchOperator and SearchColumnType catalogs."""
from __future__ import annotations

from enum import Enum
from typing import Any

from basesql.kernel.errors import ResolutionError


class SearchOperator(str, Enum):
    """Closed catalog of comparison semantics a predicate can carry."""

    EQ = "eq"
    NOT_EQ = "not_eq"
    LT = "lt"
    LTEQ = "lteq"
    GT = "gt"
    GTEQ = "gteq"
    LIKE = "like"
    I_LIKE = "i_like"
    MATCHES = "matches"
    CONT = "cont"
    I_CONT = "i_cont"
    START = "start"
    END = "end"
    NOT_CONT = "not_cont"
    NOT_I_CONT = "not_i_cont"
    NOT_START = "not_start"
    NOT_END = "not_end"
    IN = "in"
    NOT_IN = "not_in"
    NULL = "null"
    NOT_NULL = "not_null"
    BLANK = "blank"
    EMPTY = "empty"
    NOT_EMPTY = "not_empty"
    PRESENT = "present"
    TRUE = "true"
    FALSE = "false"

    @property
    def binds_value(self) -> bool:
        """``False`` for operators whose fragment has no placeholder."""
        return self not in _NO_BOUND_VALUE

    @classmethod
    def parse(cls, value: Any) -> "SearchOperator":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ResolutionError(
            f"Unknown search operator {value!r}",
            detail={"operator": str(value)},
        )


_NO_BOUND_VALUE = frozenset(
    {
        SearchOperator.NULL,
        SearchOperator.NOT_NULL,
        SearchOperator.BLANK,
        SearchOperator.EMPTY,
        SearchOperator.NOT_EMPTY,
        SearchOperator.PRESENT,
    }
)


class SearchColumnType(str, Enum):
    """Declared column type, drives generic value coercion."""

    DATE = "date"
    FLOAT = "float"
    STRING = "string"
    NUMBER = "number"

    @classmethod
    def parse(cls, value: Any) -> "SearchColumnType":
        if value is None:
            return cls.STRING
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ResolutionError(
            f"Unknown search column type {value!r}",
            detail={"type": str(value)},
        )


__all__ = ["SearchColumnType", "SearchOperator"]
