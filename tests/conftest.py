"""
Module: conftest.py
Description: Shared pytest fixtures for AWS Publisher tests.

Provides configurations and fake aioboto3 sessions. A fake session's
client() returns an async context manager yielding an AsyncMock, so
tests can assert on the exact vendor request without touching AWS.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from botocore.exceptions import ClientError


def make_session(vendor_client):
    """Build a MagicMock session whose client() yields vendor_client."""
    session = MagicMock()
    session.client.return_value.__aenter__.return_value = vendor_client
    session.client.return_value.__aexit__.return_value = False
    return session


@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors as AWS would report them."""
    def _make(code: str = "InternalError", operation: str = "Operation") -> ClientError:
        return ClientError(
            error_response={"Error": {"Code": code, "Message": "Test error"}},
            operation_name=operation
        )
    return _make


@pytest.fixture
def base_config():
    """Minimal valid configuration."""
    return {
        "Region": "us-east-1",
        "QueueUrl": "https://sqs.us-east-1.amazonaws.com/123456789012/events",
        "VisibilityTimeout": 30,
        "ArnPath": "arn:aws:sns:us-east-1:123456789012:events",
        "DefaultSender": "noreply@example.com",
    }


@pytest.fixture
def fifo_queue_url():
    """URL of a FIFO queue."""
    return "https://sqs.us-east-1.amazonaws.com/123456789012/events.fifo"


@pytest.fixture
def dev_email_config(base_config):
    """SES configuration for the development environment."""
    return {**base_config, "env": "development", "devEmailAddresses": ["dev@x.com"]}


@pytest.fixture
def prod_email_config(base_config):
    """SES configuration for the production environment."""
    return {**base_config, "env": "production"}


@pytest.fixture
def sqs_client():
    """Fake SQS client with canned responses."""
    client = AsyncMock()
    client.send_message.return_value = {'MessageId': 'msg-123', 'MD5OfMessageBody': 'abc'}
    client.receive_message.return_value = {
        'Messages': [
            {'MessageId': 'msg-1', 'ReceiptHandle': 'rh-1', 'Body': '{}'},
            {'MessageId': 'msg-2', 'ReceiptHandle': 'rh-2', 'Body': '{}'},
        ]
    }
    client.delete_message.return_value = {'ResponseMetadata': {'HTTPStatusCode': 200}}
    return client


@pytest.fixture
def sns_client():
    """Fake SNS client with canned responses."""
    client = AsyncMock()
    client.publish.return_value = {'MessageId': 'sns-123'}
    client.create_platform_endpoint.return_value = {
        'EndpointArn': 'arn:aws:sns:us-east-1:123456789012:endpoint/GCM/app/token123'
    }
    client.set_sms_attributes.return_value = {}
    return client


@pytest.fixture
def ses_client():
    """Fake SES client with canned responses."""
    client = AsyncMock()
    client.send_email.return_value = {'MessageId': 'ses-123'}
    return client


@pytest.fixture
def sqs_session(sqs_client):
    return make_session(sqs_client)


@pytest.fixture
def sns_session(sns_client):
    return make_session(sns_client)


@pytest.fixture
def ses_session(ses_client):
    return make_session(ses_client)
