"""
Module: utils
Description: Package initialization for shared helpers.

Current utilities:
- logger: Structured logging configuration and helpers
"""

__all__ = []
