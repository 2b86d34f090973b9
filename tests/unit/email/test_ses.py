"""
Module: test_ses.py
Description: Unit tests for SESService.

Covers constructor environment checks, address normalization, the
development/production recipient and subject mapping, and send_email
request construction.
"""

import pytest
from botocore.exceptions import ClientError

from aws_publisher.email.ses import SESService, normalize_addresses
from aws_publisher.exceptions import (
    ConfigurationError,
    InvalidEnvironmentError,
    ValidationError,
)


@pytest.fixture
def email_data():
    """Email addressed to one recipient with one cc."""
    return {
        "ToAddresses": ["a@x.com"],
        "ToCcAddresses": ["b@x.com"],
        "Body": "<p>Hello</p>",
        "Subject": "Welcome",
    }


class TestNormalizeAddresses:
    """Test cases for normalize_addresses()."""

    @pytest.mark.parametrize("value, expected", [
        ("a@x.com", ["a@x.com"]),
        (["a@x.com", "b@x.com"], ["a@x.com", "b@x.com"]),
        (["a@x.com", None, "", "b@x.com"], ["a@x.com", "b@x.com"]),
        (None, []),
        ("", []),
        ([None, ""], []),
        (("a@x.com",), ["a@x.com"]),
    ])
    def test_normalize(self, value, expected):
        assert normalize_addresses(value) == expected


class TestSESServiceConstruction:
    """Test cases for SESService constructor checks."""

    def test_env_required(self, base_config, ses_session):
        """Test construction fails without env."""
        with pytest.raises(ConfigurationError, match="Environment not set"):
            SESService(base_config, session=ses_session)

    def test_dev_addresses_required_in_development(self, base_config, ses_session):
        """Test development mode needs a devEmailAddresses list."""
        with pytest.raises(ConfigurationError, match="devEmailAddresses is not an array"):
            SESService({**base_config, "env": "development"}, session=ses_session)

    def test_dev_addresses_must_be_list(self, base_config, ses_session):
        """Test a plain string is not accepted as devEmailAddresses."""
        with pytest.raises(ConfigurationError):
            SESService(
                {**base_config, "env": "development", "devEmailAddresses": "dev@x.com"},
                session=ses_session
            )

    def test_invalid_environment(self, base_config, ses_session):
        """Test an unknown environment is rejected at construction."""
        with pytest.raises(InvalidEnvironmentError, match="staging"):
            SESService({**base_config, "env": "staging"}, session=ses_session)

    def test_production_needs_no_dev_addresses(self, prod_email_config, ses_session):
        service = SESService(prod_email_config, session=ses_session)
        assert service.config.env == "production"
        assert service.session is ses_session


class TestSESServiceMapping:
    """Test cases for recipient and subject mapping."""

    def test_development_mapping(self, dev_email_config, ses_session):
        service = SESService(dev_email_config, session=ses_session)

        assert service.map_outbound_address(["a@x.com"]) == ["dev@x.com"]
        assert service.map_outbound_address([]) == ["dev@x.com"]
        assert service.map_subject("Hi", ["a@x.com", "c@x.com"], []) == "[To: a@x.com,c@x.com] Hi"
        assert service.map_subject("Hi", ["a@x.com"], ["b@x.com"]) == "[To: a@x.com] [Cc: b@x.com] Hi"

    def test_production_mapping(self, prod_email_config, ses_session):
        service = SESService(prod_email_config, session=ses_session)

        assert service.map_outbound_address(["a@x.com"]) == ["a@x.com"]
        assert service.map_subject("Hi", ["a@x.com"], ["b@x.com"]) == "Hi"


class TestSESServiceSend:
    """Test cases for SESService.send()."""

    @pytest.mark.asyncio
    async def test_send_development(self, dev_email_config, ses_session, ses_client, email_data):
        """Test development redirects recipients and tags the subject."""
        service = SESService(dev_email_config, session=ses_session)

        result = await service.send(email_data)

        assert result == {"MessageId": "ses-123"}
        kwargs = ses_client.send_email.call_args.kwargs
        assert kwargs["Destination"] == {"BccAddresses": ["dev@x.com"], "CcAddresses": ["dev@x.com"]}
        assert kwargs["Message"]["Subject"] == {
            "Data": "[To: a@x.com] [Cc: b@x.com] Welcome",
            "Charset": "UTF-8"
        }

    @pytest.mark.asyncio
    async def test_send_production(self, prod_email_config, ses_session, ses_client, email_data):
        """Test production passes recipients and subject through."""
        service = SESService(prod_email_config, session=ses_session)

        await service.send(email_data)

        ses_client.send_email.assert_called_once_with(
            Destination={"BccAddresses": ["a@x.com"], "CcAddresses": ["b@x.com"]},
            Message={
                "Body": {"Html": {"Data": "<p>Hello</p>", "Charset": "UTF-8"}},
                "Subject": {"Data": "Welcome", "Charset": "UTF-8"},
            },
            Source="noreply@example.com",
            ReturnPath="noreply@example.com",
            ReturnPathArn=prod_email_config["ArnPath"],
            SourceArn=prod_email_config["ArnPath"],
            Tags=[],
        )

    @pytest.mark.asyncio
    async def test_send_overrides_and_tags(self, prod_email_config, ses_session, ses_client, email_data):
        """Test explicit sender, ARN and tags are used."""
        service = SESService(prod_email_config, session=ses_session)
        tags = [{"Name": "campaign", "Value": "welcome"}]

        await service.send(
            {**email_data, "ToAddresses": "single@x.com", "Tags": tags},
            default_sender="team@example.com",
            topic_arn="arn:aws:ses:us-east-1:1:identity/example.com"
        )

        kwargs = ses_client.send_email.call_args.kwargs
        assert kwargs["Destination"]["BccAddresses"] == ["single@x.com"]
        assert kwargs["Source"] == "team@example.com"
        assert kwargs["ReturnPath"] == "team@example.com"
        assert kwargs["SourceArn"] == "arn:aws:ses:us-east-1:1:identity/example.com"
        assert kwargs["Tags"] == tags

    @pytest.mark.asyncio
    @pytest.mark.parametrize("to_addresses", [[], None, "", [None, ""]])
    async def test_send_empty_recipients(self, prod_email_config, ses_session, ses_client, email_data, to_addresses):
        """Test an empty recipient list fails without calling SES."""
        service = SESService(prod_email_config, session=ses_session)

        with pytest.raises(ValidationError, match="ToAddresses is empty"):
            await service.send({**email_data, "ToAddresses": to_addresses})

        ses_client.send_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_send_omits_unset_sender(self, ses_session, ses_client, email_data):
        """Test unset sender and ARN are not transmitted."""
        service = SESService({"Region": "us-east-1", "env": "production"}, session=ses_session)

        await service.send(email_data)

        kwargs = ses_client.send_email.call_args.kwargs
        for key in ("Source", "ReturnPath", "SourceArn", "ReturnPathArn"):
            assert key not in kwargs

    @pytest.mark.asyncio
    async def test_send_client_error_propagates(self, prod_email_config, ses_session, ses_client, email_data, client_error):
        """Test SES errors reach the caller unchanged."""
        error = client_error("MessageRejected", "SendEmail")
        ses_client.send_email.side_effect = error
        service = SESService(prod_email_config, session=ses_session)

        with pytest.raises(ClientError) as exc_info:
            await service.send(email_data)

        assert exc_info.value is error
