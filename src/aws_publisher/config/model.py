"""
Module: model.py
Description: PublisherConfig, the immutable configuration shared by all services.

Field aliases keep the capitalized keys callers already pass around
(Region, QueueUrl, ...); snake_case names are accepted as well.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PublisherConfig(BaseModel):
    """
    Configuration for SQS, SNS and SES services.

    Attributes:
        region: AWS region every vendor client is bound to
        queue_url: Default SQS queue URL
        visibility_timeout: Default SQS visibility timeout for receives
        arn_path: Default SNS topic / platform application ARN, also used
            as SES SourceArn and ReturnPathArn
        default_sender: Default SES Source and ReturnPath address
        env: Email environment ('development' or 'production')
        dev_email_addresses: Recipients used instead of the real ones
            when env is 'development'
        endpoint_url: Endpoint override passed to every AWS client
            (e.g. LocalStack); AWS default endpoints when unset
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore"
    )

    region: str = Field(..., alias="Region", min_length=1)
    queue_url: Optional[str] = Field(default=None, alias="QueueUrl")
    visibility_timeout: Optional[int] = Field(
        default=None,
        alias="VisibilityTimeout",
        ge=0,
        le=43200
    )
    arn_path: Optional[str] = Field(default=None, alias="ArnPath")
    default_sender: Optional[str] = Field(default=None, alias="DefaultSender")
    env: Optional[str] = Field(default=None)
    dev_email_addresses: Optional[List[str]] = Field(
        default=None,
        alias="devEmailAddresses"
    )
    endpoint_url: Optional[str] = Field(
        default=None,
        alias="EndpointUrl",
        pattern=r"^https?://"
    )
