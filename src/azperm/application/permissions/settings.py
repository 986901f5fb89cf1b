"""Permissions – EvaluatorSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import IO, Any, ClassVar, Mapping

from azperm.application.permissions.privileged import DEFAULT_PRIVILEGED_ROLE_MARKERS
from azperm.config.settings import EnvSettingsLoader, Settings, SettingsFactory
from azperm.config.validation import InvalidSettingValueError
from azperm.observability.logging import DEFAULT_SENSITIVE_FIELDS, JsonLoggerFactory

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class EvaluatorSettings(Settings):
    """Tunables for :class:`EffectivePermissionEvaluator`.

    Environment variables: ``AZPERM_PRIVILEGED_ROLE_MARKERS`` (comma
    separated), ``AZPERM_DEFAULT_TIMEOUT_SECONDS``, ``AZPERM_LOG_LEVEL``.
    """

    _prefix: ClassVar[str] = "AZPERM"

    privileged_role_markers: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_PRIVILEGED_ROLE_MARKERS)
    )
    default_timeout_seconds: float = 0.0
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.privileged_role_markers:
            raise InvalidSettingValueError(
                "privileged_role_markers", self.privileged_role_markers, "must not be empty"
            )
        if self.default_timeout_seconds < 0:
            raise InvalidSettingValueError(
                "default_timeout_seconds", self.default_timeout_seconds, "must be >= 0"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, f"expected one of {_LOG_LEVELS}")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def configure_logging(self, stream: IO[str] | None = None) -> None:
        """Route structlog output through a JSON handler at :attr:`log_level`."""
        JsonLoggerFactory.configure(self.log_level_number, DEFAULT_SENSITIVE_FIELDS, stream=stream)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> "EvaluatorSettings":
        return SettingsFactory.create(cls, loaders=[EnvSettingsLoader(environ)], overrides=overrides or None)


__all__ = ["EvaluatorSettings"]
