"""Config settings – EngineSettings."""
from __future__ import annotations

import dataclasses
import logging

from basesql.config.settings.base import Settings
from basesql.config.validation import InvalidSettingValueError
from basesql.kernel.types import Dialect
from basesql.observability.logging import JsonLoggerFactory


@dataclasses.dataclass
class EngineSettings(Settings):
    """Engine-wide settings, read from ``BASESQL_*`` variables.

    ``dialect`` must agree with the executor the engine will hand its
    statements to.
    """

    dialect: str = "postgresql"
    default_per_page: int = 50
    reject_parameter_collisions: bool = False
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.parse_dialect("dialect", self.dialect)
        if self.default_per_page < 0:
            raise InvalidSettingValueError(
                self.env_key("default_per_page"), self.default_per_page, "must be >= 0"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(self.env_key("log_level"), self.log_level, "unknown log level")

    @property
    def database_dialect(self) -> Dialect:
        return Dialect.parse(self.dialect)

    def configure_logging(self) -> None:
        """Install JSON structlog output at ``log_level`` on the root logger."""
        JsonLoggerFactory.configure(self.log_level)


__all__ = ["EngineSettings"]
