"""
Module: sqs.py
Description: SQS wrapper for sending, receiving and deleting messages.

Messages are wrapped twice before transmission: the caller's payload is
JSON-encoded with its topic, then placed under a "Message" key and
encoded again, matching the shape SNS delivers to subscribed queues.
FIFO queues (URL ending in ".fifo") additionally require a message
group id and a deduplication id on every send.
"""

import json
from typing import Any, Dict, List, Optional

from botocore.exceptions import ClientError

from aws_publisher.base import BaseService, compact
from aws_publisher.exceptions import (
    MissingDeduplicationIdError,
    MissingMessageGroupIdError,
    ValidationError,
)
from aws_publisher.utils.logger import get_logger

logger = get_logger(__name__)


def is_fifo_queue(queue_url: str) -> bool:
    """Check whether the last dot-separated segment of the URL is 'fifo'."""
    return queue_url.split('.')[-1] == 'fifo'


def build_message_body(message: Any) -> str:
    """
    Encode a message into the double-wrapped SQS body.

    The topic is read from message["topic"] and left out when the
    message has none.
    """
    envelope = {'message': message}
    topic = message.get('topic') if isinstance(message, dict) else getattr(message, 'topic', None)
    if topic is not None:
        envelope['topic'] = topic

    return json.dumps({'Message': json.dumps(envelope)})


class SQSService(BaseService):
    """
    SQS client for queue operations.

    Every method defaults its queue URL (and visibility timeout) from
    the PublisherConfig the service was built with.
    """

    service_name = 'sqs'

    async def send(
        self,
        message: Any,
        queue_url: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Send a message to an SQS queue.

        Args:
            message: Payload; its "topic" key is copied into the envelope
            queue_url: Target queue, defaults to config.queue_url
            options: MessageAttributes, DelaySeconds, and for FIFO queues
                MessageGroupId and MessageDeduplicationId

        Returns:
            SQS send_message response (MessageId, MD5OfMessageBody, ...)

        Raises:
            ValidationError: If message or queue URL is missing, or a FIFO
                send lacks its group or deduplication id
            ClientError: If SQS operation fails
        """
        queue_url = queue_url or self.config.queue_url
        options = options or {}

        if message is None:
            raise ValidationError("message is required")
        if not queue_url:
            raise ValidationError("queue_url is required")

        params = {
            'MessageBody': build_message_body(message),
            'QueueUrl': queue_url,
            'MessageAttributes': options.get('MessageAttributes'),
            'DelaySeconds': options.get('DelaySeconds'),
        }

        if is_fifo_queue(queue_url):
            if options.get('MessageGroupId') is None:
                raise MissingMessageGroupIdError(queue_url)
            if options.get('MessageDeduplicationId') is None:
                raise MissingDeduplicationIdError(queue_url)
            params['MessageGroupId'] = options['MessageGroupId']
            params['MessageDeduplicationId'] = str(options['MessageDeduplicationId'])

        try:
            async with self.client() as sqs:
                response = await sqs.send_message(**compact(params))

                logger.info(
                    "Message sent to SQS",
                    message_id=response.get('MessageId'),
                    queue_url=queue_url
                )

                return response

        except ClientError as e:
            logger.error(
                "Failed to send message to SQS",
                queue_url=queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        except Exception as e:
            logger.error(
                "Unexpected error sending message to SQS",
                queue_url=queue_url,
                error=str(e)
            )
            raise

    async def get(
        self,
        queue_url: Optional[str] = None,
        visibility_timeout: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Receive messages from an SQS queue.

        Args:
            queue_url: Source queue, defaults to config.queue_url
            visibility_timeout: Seconds received messages stay hidden,
                defaults to config.visibility_timeout

        Returns:
            Received messages with all attributes (possibly empty)

        Raises:
            ClientError: If SQS operation fails
        """
        queue_url = queue_url or self.config.queue_url
        if visibility_timeout is None:
            visibility_timeout = self.config.visibility_timeout

        if not queue_url:
            raise ValidationError("queue_url is required")

        params = {
            'QueueUrl': queue_url,
            'AttributeNames': ['All'],
            'VisibilityTimeout': visibility_timeout,
        }

        try:
            async with self.client() as sqs:
                response = await sqs.receive_message(**compact(params))

        except ClientError as e:
            logger.error(
                "Failed to receive messages from SQS",
                queue_url=queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        except Exception as e:
            logger.error(
                "Unexpected error receiving messages from SQS",
                queue_url=queue_url,
                error=str(e)
            )
            raise

        messages = response.get('Messages', [])
        logger.info(
            "Messages received from SQS",
            count=len(messages),
            queue_url=queue_url
        )
        return messages

    async def delete(
        self,
        receipt_handle: str,
        queue_url: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Delete a previously received message.

        Args:
            receipt_handle: Receipt handle from a received message
            queue_url: Queue the message came from, defaults to config.queue_url

        Returns:
            SQS delete_message response

        Raises:
            ValidationError: If receipt handle or queue URL is missing
            ClientError: If SQS operation fails
        """
        queue_url = queue_url or self.config.queue_url

        if not receipt_handle:
            raise ValidationError("receipt_handle is required")
        if not queue_url:
            raise ValidationError("queue_url is required")

        try:
            async with self.client() as sqs:
                response = await sqs.delete_message(
                    QueueUrl=queue_url,
                    ReceiptHandle=receipt_handle
                )

        except ClientError as e:
            logger.error(
                "Failed to delete message from SQS",
                queue_url=queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        except Exception as e:
            logger.error(
                "Unexpected error deleting message from SQS",
                queue_url=queue_url,
                error=str(e)
            )
            raise

        logger.info("Message deleted from SQS", queue_url=queue_url)
        return response
