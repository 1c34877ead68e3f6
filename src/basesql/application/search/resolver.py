"""Application search – SearchColumnResolver base and operator dispatch table.

A resolver turns one ``(column, type, operator, value)`` tuple into a SQL
predicate fragment that references a named placeholder, plus the value to
bind under that placeholder.  Dialects only differ in the primitives they
override (case-insensitive matching); the operator table below is shared and
covers every :class:`SearchOperator` member.
"""
from __future__ import annotations

import abc
import dataclasses
import math
import re
from typing import Any, Callable, ClassVar

from basesql.kernel.errors import ResolutionError
from basesql.kernel.types import Dialect, SearchColumnType, SearchOperator

_NAME_UNSAFE = re.compile(r"[.()]")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclasses.dataclass(frozen=True, slots=True)
class ResolvedPredicate:
    """A predicate fragment and the binding it needs.

    ``binds_value`` is false when ``fragment`` has no placeholder: the
    null/blank family, and membership tests against an empty sequence.
    """

    column: str
    operator: SearchOperator
    fragment: str
    parameter: str
    value: Any = None
    binds_value: bool = True


def parameter_name(column: str, operator: SearchOperator) -> str:
    """``customer.name`` + ``cont`` -> ``customer_name_cont``."""
    return f"{_NAME_UNSAFE.sub('_', column)}_{operator.value}"


class SearchColumnResolver(abc.ABC):
    """Dialect-specific predicate primitives.

    Every primitive receives the column expression and the ``:name``
    placeholder and returns a SQL fragment.
    """

    dialect: ClassVar[Dialect]

    def resolve(
        self,
        column: str,
        column_type: SearchColumnType | str | None,
        operator: SearchOperator | str,
        value: Any,
    ) -> ResolvedPredicate:
        op = SearchOperator.parse(operator)
        kind = SearchColumnType.parse(column_type)
        name = parameter_name(column, op)
        if not op.binds_value:
            fragment = _FRAGMENTS[op](self, column, f":{name}")
            return ResolvedPredicate(column, op, fragment, name, binds_value=False)

        formatted = self.format_value(kind, op, value)
        if op in _EMPTY_MEMBERSHIP and not formatted:
            return ResolvedPredicate(column, op, _EMPTY_MEMBERSHIP[op], name, binds_value=False)
        return ResolvedPredicate(column, op, _FRAGMENTS[op](self, column, f":{name}"), name, formatted)

    # -- value formatting ---------------------------------------------------

    def format_value(self, column_type: SearchColumnType, operator: SearchOperator, value: Any) -> Any:
        pattern = _WILDCARDS.get(operator)
        if pattern is not None:
            return pattern.format(value)
        if operator is SearchOperator.TRUE:
            return True
        if operator is SearchOperator.FALSE:
            return False
        if operator in _EMPTY_MEMBERSHIP:
            return self.format_sequence(value)
        return self.coerce(column_type, value)

    def format_sequence(self, value: Any) -> list[Any]:
        if value is None or value == "":
            return []
        if isinstance(value, str):
            return value.split(",")
        if isinstance(value, (list, tuple, set, frozenset)):
            return list(value)
        return [value]

    def coerce(self, column_type: SearchColumnType, value: Any) -> Any:
        """Lenient numeric coercion.

        Strings are read by their longest numeric prefix (``"12abc"`` is 12);
        anything unreadable or non-finite becomes ``0`` / ``0.0``.
        """
        if column_type is SearchColumnType.NUMBER:
            return _leading_int(value)
        if column_type is SearchColumnType.FLOAT:
            return _leading_float(value)
        return value

    # -- fragment primitives ------------------------------------------------

    def compare(self, column: str, sql_operator: str, placeholder: str) -> str:
        return f"{column} {sql_operator} {placeholder}"

    def like(self, column: str, placeholder: str) -> str:
        return f"{column} LIKE {placeholder}"

    @abc.abstractmethod
    def i_like(self, column: str, placeholder: str) -> str: ...

    def in_(self, column: str, placeholder: str) -> str:
        return f"{column} IN ({placeholder})"

    def null(self, column: str) -> str:
        return f"{column} IS NULL"

    def not_null(self, column: str) -> str:
        return f"{column} IS NOT NULL"

    def empty(self, column: str) -> str:
        return f"({self.null(column)} OR {column} = ' ')"

    def not_empty(self, column: str) -> str:
        return f"({self.not_null(column)} OR {column} <> ' ')"


def _leading_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _INT_PREFIX.match(str(value))
    return int(match.group()) if match else 0


def _leading_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        number = float(match.group()) if match else 0.0
    return number if math.isfinite(number) else 0.0


def _negate(fragment: str) -> str:
    return f"NOT ({fragment})"


FragmentHandler = Callable[[SearchColumnResolver, str, str], str]

_FRAGMENTS: dict[SearchOperator, FragmentHandler] = {
    SearchOperator.EQ: lambda r, c, p: r.compare(c, "=", p),
    SearchOperator.NOT_EQ: lambda r, c, p: r.compare(c, "<>", p),
    SearchOperator.TRUE: lambda r, c, p: r.compare(c, "=", p),
    SearchOperator.FALSE: lambda r, c, p: r.compare(c, "=", p),
    SearchOperator.LT: lambda r, c, p: r.compare(c, "<", p),
    SearchOperator.LTEQ: lambda r, c, p: r.compare(c, "<=", p),
    SearchOperator.GT: lambda r, c, p: r.compare(c, ">", p),
    SearchOperator.GTEQ: lambda r, c, p: r.compare(c, ">=", p),
    SearchOperator.LIKE: lambda r, c, p: r.like(c, p),
    SearchOperator.MATCHES: lambda r, c, p: r.like(c, p),
    SearchOperator.CONT: lambda r, c, p: r.like(c, p),
    SearchOperator.START: lambda r, c, p: r.like(c, p),
    SearchOperator.END: lambda r, c, p: r.like(c, p),
    SearchOperator.I_LIKE: lambda r, c, p: r.i_like(c, p),
    SearchOperator.I_CONT: lambda r, c, p: r.i_like(c, p),
    SearchOperator.NOT_CONT: lambda r, c, p: _negate(r.like(c, p)),
    SearchOperator.NOT_START: lambda r, c, p: _negate(r.like(c, p)),
    SearchOperator.NOT_END: lambda r, c, p: _negate(r.like(c, p)),
    SearchOperator.NOT_I_CONT: lambda r, c, p: _negate(r.i_like(c, p)),
    SearchOperator.IN: lambda r, c, p: r.in_(c, p),
    SearchOperator.NOT_IN: lambda r, c, p: _negate(r.in_(c, p)),
    SearchOperator.NULL: lambda r, c, p: r.null(c),
    SearchOperator.NOT_NULL: lambda r, c, p: r.not_null(c),
    SearchOperator.BLANK: lambda r, c, p: r.empty(c),
    SearchOperator.EMPTY: lambda r, c, p: r.empty(c),
    SearchOperator.NOT_EMPTY: lambda r, c, p: r.not_empty(c),
    SearchOperator.PRESENT: lambda r, c, p: r.not_empty(c),
}

# Membership in an empty set: nothing is in it, everything is outside it.
_EMPTY_MEMBERSHIP: dict[SearchOperator, str] = {
    SearchOperator.IN: "1 = 0",
    SearchOperator.NOT_IN: "1 = 1",
}

_WILDCARDS: dict[SearchOperator, str] = {
    SearchOperator.CONT: "%{}%",
    SearchOperator.I_CONT: "%{}%",
    SearchOperator.NOT_CONT: "%{}%",
    SearchOperator.NOT_I_CONT: "%{}%",
    SearchOperator.START: "{}%",
    SearchOperator.NOT_START: "{}%",
    SearchOperator.END: "%{}",
    SearchOperator.NOT_END: "%{}",
}

_unhandled = set(SearchOperator).difference(_FRAGMENTS)
if _unhandled:
    raise ResolutionError(
        "Search operators without a fragment handler",
        detail={"operators": sorted(op.value for op in _unhandled)},
    )


__all__ = ["FragmentHandler", "ResolvedPredicate", "SearchColumnResolver", "parameter_name"]
