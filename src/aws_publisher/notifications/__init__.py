"""
Package: notifications
Description: SNS topic, mobile push and SMS operations.
"""

from .sns import SNSService

__all__ = ["SNSService"]
