"""Config settings – 12-factor env-based configuration."""
from event_producer.config.settings.base import Settings
from event_producer.config.settings.broker import BACKOFF_POLICIES, BrokerSettings
from event_producer.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "BACKOFF_POLICIES",
    "BrokerSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
