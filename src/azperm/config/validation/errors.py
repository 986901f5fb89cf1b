"""Config validation errors.

Settings come from ``AZPERM_*`` environment variables, so each error names
the variable an operator has to fix alongside the dataclass field.
"""
from azperm.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Evaluator configuration is invalid or could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no value from any source."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, env_var: str | None = None) -> None:
        hint = f"; set {env_var} in the environment" if env_var else ""
        super().__init__(
            f"Required setting '{setting_name}' is missing{hint}",
            detail={"setting": setting_name, "env_var": env_var},
        )
        self.setting_name = setting_name
        self.env_var = env_var


class InvalidSettingValueError(ConfigError):
    """A value was supplied but cannot be used, e.g. a negative timeout."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, env_var: str | None = None) -> None:
        source = f" (from {env_var})" if env_var else ""
        super().__init__(
            f"Setting '{setting_name}'{source} has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "env_var": env_var, "reason": reason},
        )
        self.setting_name = setting_name
        self.env_var = env_var
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
