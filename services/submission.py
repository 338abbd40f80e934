"""Email submission: validation and the Sheets → Excel fallback."""
import logging
from dataclasses import dataclass
from typing import Callable

from config.settings import Settings
from data import excel, sheets
from data.errors import InvalidEmail, RemoteUnavailable
from utils.helpers import is_valid_email, utc_timestamp

logger = logging.getLogger(__name__)

TIER_REMOTE = "remote"
TIER_LOCAL = "local"

REMOTE_SUCCESS_MESSAGE = "Email stored successfully in Google Sheets"
LOCAL_SUCCESS_MESSAGE = "Email stored locally (fallback) because Sheets failed or not configured"


@dataclass(frozen=True)
class SubmissionResult:
    tier: str
    message: str
    email: str
    timestamp: str


def validate_email(value) -> str:
    """Returns the email unchanged or raises InvalidEmail."""
    if not is_valid_email(value):
        raise InvalidEmail("Invalid email")
    return value


def google_configured(settings: Settings) -> bool:
    """True when both credentials and a spreadsheet ID are present."""
    return settings.google_configured


def submit_email(value, settings: Settings, clock: Callable[[], str] = utc_timestamp) -> SubmissionResult:
    """
    Stores one email, trying Google Sheets first and the local workbook second.

    The record lands in exactly one tier. Callers can't tell an unconfigured
    Sheets tier from a failed one; both show up as a local result.

    Raises:
        InvalidEmail: nothing is written
        LocalWriteFailed: both tiers failed, nothing is written
    """
    email = validate_email(value)

    if google_configured(settings):
        timestamp = clock()
        try:
            res = sheets.append_email_row(settings, email, timestamp)
            logger.info("Google Sheets append success, range: %s", (res or {}).get("updates", {}).get("updatedRange"))
            return SubmissionResult(TIER_REMOTE, REMOTE_SUCCESS_MESSAGE, email, timestamp)
        except RemoteUnavailable as e:
            logger.error("Error adding to Google Sheets: %s", e.__cause__ or e)
            if e.detail:
                logger.error("Sheets API response: %s", e.detail)
    else:
        logger.info("Skipping Google Sheets because credentials or SPREADSHEET_ID missing.")

    timestamp = clock()
    excel.append_record(settings.local_path, email, timestamp)
    return SubmissionResult(TIER_LOCAL, LOCAL_SUCCESS_MESSAGE, email, timestamp)
