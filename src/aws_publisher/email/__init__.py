"""
Package: email
Description: SES transactional email with environment-aware recipient mapping.
"""

from .ses import SESService, normalize_addresses

__all__ = ["SESService", "normalize_addresses"]
