"""Resilience – Deadline."""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta

from azperm.kernel.errors import TimeoutError as AppTimeoutError


@dataclasses.dataclass(frozen=True)
class Deadline:
    """An absolute deadline derived from a timeout."""
    expires_at: datetime

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(expires_at=datetime.now(UTC) + timedelta(seconds=seconds))

    @classmethod
    def from_timeout(cls, seconds: float | None) -> "Deadline | None":
        """``None`` or a non-positive timeout means no deadline."""
        if seconds is None or seconds <= 0:
            return None
        return cls.after(seconds)

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, (self.expires_at - datetime.now(UTC)).total_seconds())

    @property
    def is_expired(self) -> bool:
        return datetime.now(UTC) >= self.expires_at

    def raise_if_expired(self, step: str | None = None) -> None:
        if self.is_expired:
            message = f"Deadline exceeded before {step}" if step else "Deadline exceeded"
            raise AppTimeoutError(message, detail={"step": step} if step else None)


__all__ = ["Deadline"]
