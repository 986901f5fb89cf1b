"""Unit tests for Deadline."""

from __future__ import annotations

import pytest

from azperm.kernel.errors import TimeoutError as AppTimeoutError
from azperm.resilience.timeouts import Deadline


class TestDeadline:
    def test_not_expired_immediately_after_creation(self) -> None:
        assert not Deadline.after(seconds=60.0).is_expired

    def test_remaining_seconds_positive(self) -> None:
        assert Deadline.after(seconds=60.0).remaining_seconds > 0.0

    def test_remaining_seconds_caps_at_zero_when_expired(self) -> None:
        assert Deadline.after(seconds=-1.0).remaining_seconds == 0.0

    def test_raise_if_expired_names_step(self) -> None:
        with pytest.raises(AppTimeoutError) as exc_info:
            Deadline.after(seconds=-1.0).raise_if_expired("fetch_role_assignments")
        assert "fetch_role_assignments" in exc_info.value.message
        assert exc_info.value.detail == {"step": "fetch_role_assignments"}

    def test_raise_if_expired_without_step(self) -> None:
        with pytest.raises(AppTimeoutError, match="Deadline exceeded"):
            Deadline.after(seconds=-1.0).raise_if_expired()

    def test_raise_if_expired_does_not_raise_when_fresh(self) -> None:
        Deadline.after(seconds=60.0).raise_if_expired()

    @pytest.mark.parametrize("seconds", [None, 0, -5])
    def test_from_timeout_disabled(self, seconds: float | None) -> None:
        assert Deadline.from_timeout(seconds) is None

    def test_from_timeout_positive(self) -> None:
        deadline = Deadline.from_timeout(30)
        assert deadline is not None and not deadline.is_expired

    def test_frozen(self) -> None:
        d = Deadline.after(seconds=10.0)
        with pytest.raises((AttributeError, TypeError)):
            d.expires_at = d.expires_at  # type: ignore[misc]
