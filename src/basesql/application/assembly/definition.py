"""Application assembly – QueryDefinition, the per-entity source of defaults."""
from __future__ import annotations

import abc
import re
from collections.abc import Mapping, Sequence
from typing import Any

from basesql.application.search.query import SearchColumnSpec
from basesql.kernel.types import SortDirection

_CONTROL_CHARACTERS = re.compile(r"[\r\n\t]")


def strip_control_characters(statement: str) -> str:
    """Remove newlines, carriage returns and tabs (they are not replaced by spaces)."""
    return _CONTROL_CHARACTERS.sub("", statement)


class QueryDefinition(abc.ABC):
    """Base statement and defaults for one entity.

    Subclass per entity and override what differs::

        class CustomerQuery(QueryDefinition):
            def raw_sql(self) -> str:
                return "SELECT id, name, status FROM customers"

            def search_columns(self):
                return {"name": SearchColumnSpec(SearchOperator.CONT)}

            def order_by(self):
                return {"name": SortDirection.ASC}
    """

    @abc.abstractmethod
    def raw_sql(self) -> str: ...

    def primary_key(self) -> str | Sequence[str]:
        return "id"

    def search_columns(self) -> Mapping[str, SearchColumnSpec | Mapping[str, Any]]:
        return {}

    def group_by(self) -> str | Sequence[str]:
        return ()

    def order_by(self) -> Mapping[str, SortDirection | str]:
        return {}

    def per_page(self) -> int:
        return 50

    def sql_params(self) -> Mapping[str, Any]:
        return {}

    @classmethod
    def sql(cls) -> str:
        """The base statement with control characters stripped."""
        return strip_control_characters(cls().raw_sql())


__all__ = ["QueryDefinition", "strip_control_characters"]
