"""Storage tiers for submitted emails."""
from .errors import SubmissionError, InvalidEmail, RemoteUnavailable, LocalWriteFailed
from .sheets import get_gspread_client, append_email_row
from .excel import read_records, append_record

__all__ = [
    'SubmissionError',
    'InvalidEmail',
    'RemoteUnavailable',
    'LocalWriteFailed',
    'get_gspread_client',
    'append_email_row',
    'read_records',
    'append_record',
]
