"""Utility helpers."""
from .helpers import utc_timestamp, is_valid_email

__all__ = ['utc_timestamp', 'is_valid_email']
