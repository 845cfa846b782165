"""Config validation errors."""
from csv_response.config.validation.errors import ConfigError, InvalidSettingValueError

__all__ = ["ConfigError", "InvalidSettingValueError"]
