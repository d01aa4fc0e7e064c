"""Configuration module for the vocabulary CLI"""

from .settings import AppSettings, LoggingSettings, StorageSettings, settings

__all__ = [
    "AppSettings",
    "StorageSettings",
    "LoggingSettings",
    "settings",
]
