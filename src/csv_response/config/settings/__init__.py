"""Config settings – 12-factor env-based configuration."""
from csv_response.config.settings.base import EncoderSettings, Settings
from csv_response.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EncoderSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
