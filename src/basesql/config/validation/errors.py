"""Config validation – errors raised while loading engine settings."""
from __future__ import annotations

from typing import Any

from basesql.kernel.errors import ConfigurationError


class ConfigError(ConfigurationError):
    """Settings could not be loaded or failed validation."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, env_key: str, **kwargs: Any) -> None:
        super().__init__(
            f"Environment variable {env_key} is required",
            detail={"env_key": env_key},
            **kwargs,
        )
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A variable is present but holds an unusable value (dialect, level, page size)."""

    default_code = "invalid_setting_value"

    def __init__(self, env_key: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"{env_key}={value!r} rejected: {reason}",
            detail={"env_key": env_key, "value": str(value), "reason": reason},
            **kwargs,
        )
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
