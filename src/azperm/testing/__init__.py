"""Testing helpers – fakes for provider ports."""
from azperm.testing.fakes import InMemoryAuthorizationProvider

__all__ = ["InMemoryAuthorizationProvider"]
