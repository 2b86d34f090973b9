"""
Module: ses.py
Description: SES wrapper for sending HTML email.

Outbound recipients and subject depend on config.env:

- production: addresses and subject pass through unchanged
- development: every recipient list is replaced with
  config.dev_email_addresses, and the subject is prefixed with the
  intended recipients, e.g. "[To: a@x.com] [Cc: b@x.com] Welcome"

The caller's "to" addresses go to BccAddresses and "cc" addresses to
CcAddresses.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from aioboto3 import Session
from botocore.exceptions import ClientError

from aws_publisher.base import BaseService, compact
from aws_publisher.exceptions import (
    ConfigurationError,
    InvalidEnvironmentError,
    ValidationError,
)
from aws_publisher.utils.logger import get_logger

logger = get_logger(__name__)

ENV_DEVELOPMENT = 'development'
ENV_PRODUCTION = 'production'
CHARSET = 'UTF-8'


def normalize_addresses(addresses: Union[str, Iterable[Optional[str]], None]) -> List[str]:
    """Turn a single address or a sequence of addresses into a list, dropping empty entries."""
    if addresses is None or isinstance(addresses, str):
        addresses = [addresses]
    return [address for address in addresses if address]


class SESService(BaseService):
    """
    SES client for transactional email.

    Raises ConfigurationError at construction when env is missing or
    unknown, or when development mode has no dev_email_addresses list.
    """

    service_name = 'ses'

    def __init__(self, config: Any, session: Optional[Session] = None):
        super().__init__(config, session=session)

        env = self.config.env
        if not env:
            raise ConfigurationError("Environment not set")
        if env not in (ENV_DEVELOPMENT, ENV_PRODUCTION):
            raise InvalidEnvironmentError(env)
        if env == ENV_DEVELOPMENT and not isinstance(self.config.dev_email_addresses, list):
            raise ConfigurationError("devEmailAddresses is not an array")

    def map_outbound_address(self, addresses: List[str]) -> List[str]:
        """Pick the recipient list actually sent to for the configured environment."""
        if self.config.env == ENV_DEVELOPMENT:
            return list(self.config.dev_email_addresses)
        if self.config.env == ENV_PRODUCTION:
            return addresses
        raise InvalidEnvironmentError(self.config.env)

    def map_subject(self, subject: str, to_addresses: List[str], cc_addresses: List[str]) -> str:
        """Prefix the subject with the intended recipients in development."""
        if self.config.env == ENV_DEVELOPMENT:
            dev_subject = f"[To: {','.join(to_addresses)}]"
            if cc_addresses:
                dev_subject += f" [Cc: {','.join(cc_addresses)}]"
            return f"{dev_subject} {subject}"
        if self.config.env == ENV_PRODUCTION:
            return subject
        raise InvalidEnvironmentError(self.config.env)

    async def send(
        self,
        data: Dict[str, Any],
        default_sender: Optional[str] = None,
        topic_arn: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Send an HTML email.

        Args:
            data: ToAddresses, optional ToCcAddresses, Body (HTML),
                Subject and optional Tags
            default_sender: Source and ReturnPath, defaults to config.default_sender
            topic_arn: SourceArn and ReturnPathArn, defaults to config.arn_path

        Returns:
            SES send_email response containing MessageId

        Raises:
            ValidationError: If no "to" address remains after normalization
            ClientError: If SES operation fails
        """
        default_sender = default_sender or self.config.default_sender
        topic_arn = topic_arn or self.config.arn_path

        to_addresses = normalize_addresses(data.get('ToAddresses'))
        cc_addresses = normalize_addresses(data.get('ToCcAddresses'))

        if not to_addresses:
            raise ValidationError("ToAddresses is empty")

        params = compact({
            'Destination': {
                'BccAddresses': self.map_outbound_address(to_addresses),
                'CcAddresses': self.map_outbound_address(cc_addresses),
            },
            'Message': {
                'Body': {
                    'Html': {
                        'Data': data.get('Body'),
                        'Charset': CHARSET
                    },
                },
                'Subject': {
                    'Data': self.map_subject(data.get('Subject'), to_addresses, cc_addresses),
                    'Charset': CHARSET
                }
            },
            'Source': default_sender,
            'ReturnPath': default_sender,
            'ReturnPathArn': topic_arn,
            'SourceArn': topic_arn,
            'Tags': data.get('Tags') or [],
        })

        try:
            async with self.client() as ses:
                response = await ses.send_email(**params)

        except ClientError as e:
            logger.error(
                "Failed to send email with SES",
                env=self.config.env,
                recipients=len(to_addresses),
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        logger.info(
            "Email sent with SES",
            message_id=response.get('MessageId'),
            env=self.config.env,
            recipients=len(to_addresses)
        )
        return response
