"""Configuration errors — raised while an engine is being constructed."""

from __future__ import annotations

from typing import Any

from basesql.kernel.errors.base import BaseError


class ConfigurationError(BaseError):
    """The engine or one of its collaborators is wired incorrectly."""

    default_code = "configuration_error"


class UnsupportedDialectError(ConfigurationError):
    """A dialect tag outside the supported catalog was supplied."""

    default_code = "unsupported_dialect"

    def __init__(self, dialect: Any, **kwargs: Any) -> None:
        super().__init__(f"Not supported database {dialect!r}", **kwargs)
        self.dialect = dialect


class DialectMismatchError(ConfigurationError):
    """Executor and assembler were built for different dialects."""

    default_code = "dialect_mismatch"

    def __init__(self, expected: Any, actual: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Executor dialect {actual!r} does not match assembler dialect {expected!r}",
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


__all__ = ["ConfigurationError", "DialectMismatchError", "UnsupportedDialectError"]
