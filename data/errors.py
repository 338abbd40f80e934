"""Errors raised along the email submission path."""


class SubmissionError(Exception):
    """Base class for submission failures."""


class InvalidEmail(SubmissionError):
    """The submitted value is not a usable email."""


class RemoteUnavailable(SubmissionError):
    """Google Sheets is not configured or the append call failed.

    `detail` holds the API response body when the service returned one.
    """

    def __init__(self, message: str, detail=None):
        super().__init__(message)
        self.detail = detail


class LocalWriteFailed(SubmissionError):
    """The local Excel fallback could not be read or written."""
