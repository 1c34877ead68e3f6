"""Kernel errors – BaseError, root of the basesql error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Errors raised while assembling or running a statement can carry the
    statement text and the offending parameter *name*; bound values are never
    attached, so ``to_dict()`` is always safe to log.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra JSON-serialisable context.
        cause: Driver or library exception that triggered this error.
        statement: SQL text being assembled or executed, if any.
        parameter: Placeholder name involved, if any.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
        statement: str | None = None,
        parameter: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.statement = statement
        self.parameter = parameter
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        if self.parameter is None:
            return f"{type(self).__name__}(code={self.code!r})"
        return f"{type(self).__name__}(code={self.code!r}, parameter={self.parameter!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        for key in ("statement", "parameter"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["BaseError"]
