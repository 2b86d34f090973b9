"""
Package: sqs_queue
Description: SQS message queue operations.

Provides an async wrapper for sending, receiving and deleting
queue messages, including FIFO queue parameter handling.
"""

from .sqs import SQSService

__all__ = ["SQSService"]
