"""Configuration management"""

from .config_loader import ConfigLoader
from .settings import AppConfig, DispatchConfig, MessageConfig, StorageConfig

__all__ = ["ConfigLoader", "AppConfig", "DispatchConfig", "MessageConfig", "StorageConfig"]
