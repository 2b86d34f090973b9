"""
Package: aws_publisher
Description: Async wrappers around SQS, SNS and SES built from one configuration.

Use get_service() to obtain a wrapper:

    >>> ses = get_service("SES", {"Region": "eu-west-1", "env": "production"})
    >>> await ses.send({"ToAddresses": "a@x.com", "Subject": "Hi", "Body": "<p>Hi</p>"})
"""

from .config import PublisherConfig, PublisherSettings, load_config, load_settings, validate
from .email import SESService
from .exceptions import (
    ConfigurationError,
    InvalidEnvironmentError,
    InvalidServiceError,
    MissingDeduplicationIdError,
    MissingMessageGroupIdError,
    PublisherError,
    ValidationError,
)
from .factory import ServiceName, get_service
from .notifications import SNSService
from .sqs_queue import SQSService
from .utils.logger import configure_logging

__all__ = [
    "ConfigurationError",
    "InvalidEnvironmentError",
    "InvalidServiceError",
    "MissingDeduplicationIdError",
    "MissingMessageGroupIdError",
    "PublisherConfig",
    "PublisherError",
    "PublisherSettings",
    "SESService",
    "SNSService",
    "SQSService",
    "ServiceName",
    "ValidationError",
    "get_service",
    "configure_logging",
    "load_config",
    "load_settings",
    "validate",
]
