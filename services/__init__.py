"""Services for email submission."""
from .submission import SubmissionResult, validate_email, google_configured, submit_email

__all__ = ['SubmissionResult', 'validate_email', 'google_configured', 'submit_email']
