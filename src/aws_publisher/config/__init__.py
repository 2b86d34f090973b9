"""
Package: config
Description: Publisher configuration model, validation and environment settings.
"""

from .model import PublisherConfig
from .settings import PublisherSettings, load_config, load_settings
from .validation import validate

__all__ = [
    "PublisherConfig",
    "PublisherSettings",
    "load_config",
    "load_settings",
    "validate",
]
