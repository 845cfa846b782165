"""Config validation errors."""
from csv_response.kernel.errors import BaseError


class ConfigError(BaseError):
    """Encoder settings could not be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``CSV_*`` setting is present but unusable (bad character, codec, flag)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
