"""Observability – RedactingProcessor and get_logger helper."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

# Bound values never reach the log stream; only placeholder names do.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"parameters", "params", "bindings", "arguments", "values", "password", "secret", "token"}
)

REDACTED = "[REDACTED]"


class RedactingProcessor:
    """structlog processor masking bound SQL values and credentials.

    Keys are matched case-insensitively at any nesting depth, so a
    ``parameters`` mapping handed to a log call is replaced wholesale while
    ``parameter_names`` (a list of placeholder names) passes through.
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self.sensitive_fields = frozenset(
            f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS)
        )

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self.redact(event_dict)

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            key: REDACTED
            if key.lower() in self.sensitive_fields
            else self.redact(value) if isinstance(value, Mapping) else value
            for key, value in data.items()
        }


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally pre-bound with *initial_values*."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "REDACTED", "RedactingProcessor", "get_logger"]
