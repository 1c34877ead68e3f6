"""Observability – structured logging helpers."""
from basesql.observability.logging.factory import JsonLoggerFactory
from basesql.observability.logging.processors import (
    DEFAULT_SENSITIVE_FIELDS,
    REDACTED,
    RedactingProcessor,
    get_logger,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "REDACTED",
    "RedactingProcessor",
    "get_logger",
]
