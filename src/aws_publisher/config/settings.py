"""
Module: settings.py
Description: Environment-driven settings using pydantic-settings.

Holds the log level and endpoint override, and lets a PublisherConfig
be assembled from AWS_PUBLISHER_* environment variables
or a .env file instead of an explicit mapping.
"""

import re
from typing import List, Optional

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from aws_publisher.config.model import PublisherConfig
from aws_publisher.config.validation import validate
from aws_publisher.exceptions import ConfigurationError


class PublisherSettings(BaseSettings):
    """Publisher settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AWS_PUBLISHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")
    endpoint_url: Optional[str] = Field(
        default=None,
        description="Endpoint override for every AWS client (e.g. LocalStack)"
    )

    # Defaults for PublisherConfig
    region: Optional[str] = Field(default=None, description="AWS region")
    queue_url: Optional[str] = Field(default=None, description="Default SQS queue URL")
    visibility_timeout: Optional[int] = Field(
        default=None,
        ge=0,
        le=43200,
        description="Default SQS visibility timeout in seconds"
    )
    arn_path: Optional[str] = Field(
        default=None,
        description="Default SNS topic / platform application / SES identity ARN"
    )
    default_sender: Optional[str] = Field(default=None, description="Default SES sender")
    env: Optional[str] = Field(default=None, description="Email environment")
    dev_email_addresses: Optional[List[str]] = Field(
        default=None,
        description="Recipients that replace all outbound addresses in development"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('endpoint_url')
    @classmethod
    def validate_endpoint_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate endpoint override is an HTTP(S) URL."""
        if v is None or v == "":
            return None
        if not re.match(r'^https?://', v):
            raise ValueError("endpoint_url must be a valid HTTP/HTTPS URL")
        return v



def load_settings() -> PublisherSettings:
    """
    Read PublisherSettings from the environment and .env file.

    Nothing is read at import time; call this when the settings are needed.

    Raises:
        ConfigurationError: If an AWS_PUBLISHER_* value is malformed
    """
    try:
        return PublisherSettings()
    except (PydanticValidationError, SettingsError) as e:
        raise ConfigurationError(f"Invalid AWS_PUBLISHER_* settings: {e}") from e


def load_config(publisher_settings: Optional[PublisherSettings] = None) -> PublisherConfig:
    """
    Build a PublisherConfig from environment settings.

    Args:
        publisher_settings: Settings to read; loaded from the environment
            when omitted

    Returns:
        Validated PublisherConfig

    Raises:
        ConfigurationError: If a setting is malformed or no region is configured
    """
    source = publisher_settings or load_settings()
    values = source.model_dump(
        include={
            'region', 'queue_url', 'visibility_timeout', 'arn_path',
            'default_sender', 'env', 'dev_email_addresses', 'endpoint_url'
        },
        exclude_none=True
    )
    return validate(values)
