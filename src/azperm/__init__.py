"""
azperm – effective-permission evaluation for Azure-style authorization data.

Import path convention::

    from azperm.kernel.errors import InsufficientPermissionError
    from azperm.kernel.security import Operation, GrantSet, parse_scope
    from azperm.application.permissions import EffectivePermissionEvaluator
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
