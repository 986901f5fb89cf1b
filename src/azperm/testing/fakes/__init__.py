"""Testing fakes – in-memory doubles for the provider ports."""
from azperm.testing.fakes.provider import InMemoryAuthorizationProvider

__all__ = ["InMemoryAuthorizationProvider"]
