"""Argument errors — a single assembly call received unusable input."""

from __future__ import annotations

from typing import Any, Sequence

from basesql.kernel.errors.base import BaseError


class ArgumentError(BaseError):
    """The request passed to the engine cannot be assembled."""

    default_code = "argument_error"


class PrimaryKeyMismatchError(ArgumentError):
    """A composite identifier does not cover every primary-key field."""

    default_code = "primary_key_mismatch"

    def __init__(
        self,
        primary_key: Sequence[str],
        supplied: Sequence[str],
        **kwargs: Any,
    ) -> None:
        super().__init__(
            "The filter for a primary key should have an equal number of fields "
            "as the key itself.",
            detail={"primary_key": list(primary_key), "supplied": list(supplied)},
            **kwargs,
        )
        self.primary_key = tuple(primary_key)
        self.supplied = tuple(supplied)


class ParameterCollisionError(ArgumentError):
    """Two bindings derived the same parameter name."""

    default_code = "parameter_collision"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Parameter '{name}' is bound more than once", parameter=name, **kwargs)
        self.name = name


class ResolutionError(BaseError):
    """An operator or column type has no resolution in the catalog."""

    default_code = "resolution_error"


__all__ = [
    "ArgumentError",
    "ParameterCollisionError",
    "PrimaryKeyMismatchError",
    "ResolutionError",
]
