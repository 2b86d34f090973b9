"""
Module: sns.py
Description: SNS wrapper for topic publishing, mobile push and SMS.

Key Components:
- send(): publish a {message, topic} envelope to a topic
- add_device(): register a device token as a platform endpoint
- push_notification(): publish a pre-built JSON payload to an endpoint
- send_sms(): set account SMS attributes and publish to a phone number

Dependencies: aioboto3, botocore, asyncio, json
"""

import asyncio
import json
from typing import Any, Dict, Optional, Union

from botocore.exceptions import ClientError

from aws_publisher.base import BaseService, compact
from aws_publisher.exceptions import ValidationError
from aws_publisher.utils.logger import get_logger

logger = get_logger(__name__)

SMS_TYPE_TRANSACTIONAL = 'Transactional'
SMS_TYPE_PROMOTIONAL = 'Promotional'


def _log_client_error(message: str, error: ClientError, **context: Any) -> None:
    logger.error(
        message,
        error_code=error.response['Error']['Code'],
        error_message=error.response['Error']['Message'],
        **context
    )


class SNSService(BaseService):
    """
    SNS client for notification operations.

    Topic and platform application ARNs default to config.arn_path.
    """

    service_name = 'sns'

    async def send(
        self,
        message: Any,
        topic: Optional[str] = None,
        topic_arn: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Publish a message envelope to an SNS topic.

        Args:
            message: Payload placed under the "message" key
            topic: Value placed under the "topic" key
            topic_arn: Target topic, defaults to config.arn_path

        Returns:
            SNS publish response containing MessageId

        Raises:
            ClientError: If SNS operation fails
        """
        topic_arn = topic_arn or self.config.arn_path
        if not topic_arn:
            raise ValidationError("topic_arn is required")

        envelope = {'message': message}
        if topic is not None:
            envelope['topic'] = topic

        try:
            async with self.client() as sns:
                response = await sns.publish(
                    Message=json.dumps(envelope),
                    MessageStructure='sqs',
                    TopicArn=topic_arn
                )
        except ClientError as e:
            _log_client_error("Failed to publish to SNS topic", e, topic_arn=topic_arn)
            raise

        logger.info(
            "Message published to SNS topic",
            message_id=response.get('MessageId'),
            topic_arn=topic_arn,
            topic=topic
        )
        return response

    async def add_device(self, device_id: str, arn: Optional[str] = None) -> Dict[str, Any]:
        """
        Register a device token against a platform application.

        Args:
            device_id: Device push token
            arn: Platform application ARN, defaults to config.arn_path

        Returns:
            SNS response containing EndpointArn

        Raises:
            ClientError: If SNS operation fails
        """
        arn = arn or self.config.arn_path
        if not device_id:
            raise ValidationError("device_id is required")
        if not arn:
            raise ValidationError("platform application arn is required")

        try:
            async with self.client() as sns:
                response = await sns.create_platform_endpoint(
                    PlatformApplicationArn=arn,
                    Token=device_id
                )
        except ClientError as e:
            _log_client_error("Failed to register device with SNS", e, platform_application_arn=arn)
            raise

        logger.info(
            "Device registered with SNS",
            endpoint_arn=response.get('EndpointArn'),
            platform_application_arn=arn
        )
        return response

    async def push_notification(
        self,
        target_arn: str,
        payload: Union[str, Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Publish a pre-built, per-protocol JSON payload to a target endpoint.

        Args:
            target_arn: Endpoint ARN to deliver to
            payload: JSON text, or a dict that is encoded to JSON

        Returns:
            SNS publish response containing MessageId

        Raises:
            ClientError: If SNS operation fails
        """
        if not target_arn:
            raise ValidationError("target_arn is required")
        if not isinstance(payload, str):
            payload = json.dumps(payload)

        try:
            async with self.client() as sns:
                response = await sns.publish(
                    Message=payload,
                    MessageStructure='json',
                    TargetArn=target_arn
                )
        except ClientError as e:
            _log_client_error("Failed to push notification", e, target_arn=target_arn)
            raise

        logger.info(
            "Push notification published",
            message_id=response.get('MessageId'),
            target_arn=target_arn
        )
        return response

    async def send_sms(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send an SMS to a phone number.

        Account SMS attributes are set first but not awaited before the
        publish is issued. A failure there is logged and ignored; the SMS
        is still sent.

        Args:
            data: Dictionary with message, phoneNumber, and optional
                critical (Transactional instead of Promotional) and
                defaultSenderID

        Returns:
            SNS publish response containing MessageId

        Raises:
            ClientError: If the publish fails
        """
        if not data.get('phoneNumber'):
            raise ValidationError("phoneNumber is required")

        sms_type = SMS_TYPE_TRANSACTIONAL if data.get('critical') else SMS_TYPE_PROMOTIONAL
        attributes = compact({
            'DefaultSMSType': sms_type,
            'DefaultSenderID': data.get('defaultSenderID'),
        })

        async with self.client() as sns:
            attributes_result, publish_result = await asyncio.gather(
                sns.set_sms_attributes(attributes=attributes),
                sns.publish(
                    Message=data.get('message'),
                    PhoneNumber=data['phoneNumber']
                ),
                return_exceptions=True
            )

        if isinstance(attributes_result, BaseException):
            logger.warning(
                "Failed to set SMS attributes, sending anyway",
                sms_type=sms_type,
                error=str(attributes_result),
                error_type=type(attributes_result).__name__
            )

        if isinstance(publish_result, BaseException):
            if isinstance(publish_result, ClientError):
                _log_client_error("Failed to send SMS", publish_result, sms_type=sms_type)
            raise publish_result

        logger.info(
            "SMS published",
            message_id=publish_result.get('MessageId'),
            sms_type=sms_type
        )
        return publish_result
