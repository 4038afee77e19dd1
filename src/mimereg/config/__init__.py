"""Configuration management for mimereg."""

from mimereg.config.loader import load_config
from mimereg.config.models import Config, LoggingConfig, RegistryConfig

__all__ = ["Config", "LoggingConfig", "RegistryConfig", "load_config"]
