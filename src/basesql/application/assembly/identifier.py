"""Application assembly – identifier shorthand.

An identifier turns a request into an exact primary-key lookup: the filter
is replaced by equality conditions on the key fields, free-text search is
cleared and pagination is switched off.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from basesql.application.assembly.request import ResolvedQuery
from basesql.application.search.query import FilterCondition
from basesql.kernel.errors import PrimaryKeyMismatchError
from basesql.kernel.types import SearchColumnType, SearchOperator


def _equality(value: Any) -> FilterCondition:
    numeric = isinstance(value, (int, float)) and not isinstance(value, bool)
    return FilterCondition(
        op=SearchOperator.EQ,
        value=value,
        type=SearchColumnType.NUMBER if numeric else SearchColumnType.STRING,
    )


def has_identifier(identifier: Any) -> bool:
    return identifier is not None and identifier != ""


def identifier_filter(
    identifier: Any,
    primary_key: tuple[str, ...],
) -> dict[str, tuple[FilterCondition, ...]]:
    """Equality filter for *identifier* against *primary_key*.

    A mapping, or any identifier for a multi-field key, must name exactly the
    declared key fields (extra keys are ignored); anything else raises
    :class:`PrimaryKeyMismatchError`.
    """
    if isinstance(identifier, Mapping) or len(primary_key) > 1:
        supplied: Mapping[str, Any] = identifier if isinstance(identifier, Mapping) else {}
        matched = {field: supplied[field] for field in primary_key if field in supplied}
        if len(matched) != len(primary_key):
            raise PrimaryKeyMismatchError(primary_key, list(supplied))
        return {field: (_equality(value),) for field, value in matched.items()}

    return {primary_key[0]: (_equality(identifier),)}


def apply_identifier(resolved: ResolvedQuery, identifier: Any) -> ResolvedQuery:
    """Return *resolved* narrowed to the row(s) named by *identifier*."""
    if not has_identifier(identifier) or not resolved.primary_key:
        return resolved
    return dataclasses.replace(
        resolved,
        filter=MappingProxyType(identifier_filter(identifier, resolved.primary_key)),
        search_term="",
        search_columns=MappingProxyType({}),
        page=0,
        per_page=0,
    )


__all__ = ["apply_identifier", "has_identifier", "identifier_filter"]
