"""Config settings – Settings, the environment-mapped dataclass base."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from basesql.config.validation import InvalidSettingValueError
from basesql.kernel.errors import UnsupportedDialectError
from basesql.kernel.types import Dialect


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields map onto ``BASESQL_<FIELD>`` variables.

    Subclasses override ``_validate`` for cross-field checks; it runs after
    every construction, whichever loader built the instance.
    """

    _prefix: ClassVar[str] = "BASESQL"

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None: ...

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``default_per_page`` -> ``BASESQL_DEFAULT_PER_PAGE``."""
        return "_".join(part for part in (cls._prefix, field_name) if part).upper()

    @classmethod
    def parse_dialect(cls, field_name: str, value: Any) -> Dialect:
        try:
            return Dialect.parse(value)
        except UnsupportedDialectError as exc:
            raise InvalidSettingValueError(
                cls.env_key(field_name), value, "unsupported dialect"
            ) from exc


__all__ = ["Settings"]
