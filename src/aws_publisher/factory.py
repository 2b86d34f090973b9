"""
Module: factory.py
Description: Builds SQS, SNS or SES service wrappers from a configuration.

Example:
    >>> sqs = get_service("SQS", {"Region": "eu-west-1", "QueueUrl": url})
    >>> await sqs.send({"topic": "order.created", "id": 1})
"""

from enum import Enum
from typing import Any, Optional, Union

from aioboto3 import Session

from aws_publisher.config.validation import validate
from aws_publisher.email.ses import SESService
from aws_publisher.exceptions import InvalidServiceError
from aws_publisher.notifications.sns import SNSService
from aws_publisher.sqs_queue.sqs import SQSService
from aws_publisher.utils.logger import get_logger

logger = get_logger(__name__)

AWSService = Union[SQSService, SNSService, SESService]


class ServiceName(str, Enum):
    """Services get_service can build."""

    SQS = "SQS"
    SNS = "SNS"
    SES = "SES"


def get_service(
    service_name: Union[str, ServiceName],
    config: Any,
    session: Optional[Session] = None
) -> AWSService:
    """
    Validate the configuration and build the requested service.

    Args:
        service_name: "SQS", "SNS" or "SES"
        config: PublisherConfig or mapping with at least a Region key
        session: Optional aioboto3 Session shared by the service

    Returns:
        SQSService, SNSService or SESService

    Raises:
        ConfigurationError: If config is absent or invalid
        InvalidServiceError: If service_name is not a known service
    """
    publisher_config = validate(config)

    try:
        name = ServiceName(service_name)
    except ValueError:
        raise InvalidServiceError(service_name) from None

    logger.debug("Building service", service=name.value, region=publisher_config.region)

    if name is ServiceName.SQS:
        return SQSService(publisher_config, session=session)
    if name is ServiceName.SNS:
        return SNSService(publisher_config, session=session)
    return SESService(publisher_config, session=session)
