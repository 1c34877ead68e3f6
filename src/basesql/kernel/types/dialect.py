"""Kernel types – Dialect."""
from __future__ import annotations

from enum import Enum
from typing import Any

from basesql.kernel.errors import UnsupportedDialectError


class Dialect(str, Enum):
    """Target SQL engine family."""

    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    MSSQL = "mssql"

    @classmethod
    def parse(cls, value: Any) -> "Dialect":
        """Coerce an enum member or its (case-insensitive) name/value.

        Raises :class:`UnsupportedDialectError` for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise UnsupportedDialectError(value)


__all__ = ["Dialect"]
