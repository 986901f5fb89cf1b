"""Resilience – cancellation of slow provider calls."""

from azperm.resilience.timeouts import Deadline

__all__ = ["Deadline"]
