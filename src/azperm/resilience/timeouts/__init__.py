"""Resilience – deadlines."""
from azperm.resilience.timeouts.deadline import Deadline

__all__ = ["Deadline"]
