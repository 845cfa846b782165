"""Config – 12-factor encoder settings and loaders."""

from csv_response.config.settings import (
    DotenvSettingsLoader,
    EncoderSettings,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from csv_response.config.validation import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EncoderSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
