"""Kernel types – SortDirection."""
from __future__ import annotations

from enum import Enum
from typing import Any

from basesql.kernel.errors import ResolutionError


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: Any) -> "SortDirection":
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().upper() in cls.__members__:
            return cls[value.strip().upper()]
        raise ResolutionError(f"Unknown sort direction {value!r}")


__all__ = ["SortDirection"]
