"""
Module: validation.py
Description: Precondition check run before any service is constructed.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from aws_publisher.config.model import PublisherConfig
from aws_publisher.exceptions import ConfigurationError


def validate(config: Any) -> PublisherConfig:
    """
    Check a configuration for mandatory fields.

    Args:
        config: PublisherConfig or mapping with at least a Region key

    Returns:
        The configuration as a PublisherConfig

    Raises:
        ConfigurationError: If config is absent, lacks Region, or has
            values of the wrong type
    """
    if config is None:
        raise ConfigurationError("Config must be presented")

    if isinstance(config, PublisherConfig):
        return config

    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Config must be a mapping or PublisherConfig, got {type(config).__name__}"
        )

    if 'Region' not in config and 'region' not in config:
        raise ConfigurationError("Region must be presented")

    try:
        return PublisherConfig.model_validate(dict(config))
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid config: {e}") from e
