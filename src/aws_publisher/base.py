"""
Module: base.py
Description: Common construction for the AWS service wrappers.

Each wrapper owns an aioboto3 Session bound to the configured region
and opens a fresh client per operation.
"""

from typing import Any, Dict, Optional

from aioboto3 import Session

from aws_publisher.config.model import PublisherConfig
from aws_publisher.config.validation import validate
from aws_publisher.utils.logger import get_logger

logger = get_logger(__name__)


def compact(params: Dict[str, Any]) -> Dict[str, Any]:
    """Drop request fields whose value is None; botocore rejects them."""
    return {k: v for k, v in params.items() if v is not None}


class BaseService:
    """
    Base class for SQS, SNS and SES wrappers.

    Attributes:
        config: Validated, immutable publisher configuration
        session: aioboto3 Session bound to config.region
    """

    service_name: str = ""

    def __init__(self, config: Any, session: Optional[Session] = None):
        """
        Initialize the service.

        Args:
            config: PublisherConfig or mapping with at least a Region key
            session: Optional pre-built session (mainly for tests)

        Raises:
            ConfigurationError: If config is absent or invalid
        """
        self.config: PublisherConfig = validate(config)
        self.session = session or Session(region_name=self.config.region)

        logger.info(
            "AWS service initialized",
            service=self.service_name,
            region=self.config.region,
            endpoint_url=self.config.endpoint_url
        )

    def client(self):
        """Return an async context manager yielding a vendor client."""
        return self.session.client(
            self.service_name,
            endpoint_url=self.config.endpoint_url
        )
