"""
Module: exceptions.py
Description: Exception types raised by AWS Publisher.

Configuration problems surface synchronously when a service is built.
Request problems surface when the operation coroutine is awaited.
Errors reported by AWS itself (botocore ClientError and friends) are
never wrapped and reach the caller unchanged.
"""


class PublisherError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(PublisherError, ValueError):
    """Configuration is missing or malformed."""


class InvalidEnvironmentError(ConfigurationError):
    """Email environment is neither 'development' nor 'production'."""

    def __init__(self, env=None):
        self.env = env
        super().__init__(f"Invalid environment: {env!r}")


class InvalidServiceError(ConfigurationError):
    """Requested service name is not one of SQS, SNS or SES."""

    def __init__(self, service_name=None):
        self.service_name = service_name
        super().__init__(f"Invalid service: {service_name!r}")


class ValidationError(PublisherError, ValueError):
    """Request data is missing a required field."""


class MissingDeduplicationIdError(ValidationError):
    """FIFO queue send without a MessageDeduplicationId."""

    def __init__(self, queue_url: str):
        self.queue_url = queue_url
        super().__init__(f"Missing MessageDeduplicationId for FIFO queue {queue_url}")


class MissingMessageGroupIdError(ValidationError):
    """FIFO queue send without a MessageGroupId."""

    def __init__(self, queue_url: str):
        self.queue_url = queue_url
        super().__init__(f"Missing MessageGroupId for FIFO queue {queue_url}")
