"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Base for settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` (``"AZPERM"`` for the evaluator) and may
    override :meth:`_validate` for cross-field checks.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_var(cls, field_name: str) -> str:
        """Environment variable that feeds *field_name*, e.g. ``AZPERM_LOG_LEVEL``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
