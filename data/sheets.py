"""Google Sheets access and authentication."""
import logging

import gspread
from google.oauth2.service_account import Credentials

from config.settings import Settings
from .errors import RemoteUnavailable

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def get_gspread_client(credentials: dict) -> gspread.Client:
    """Authorized gspread client for the service account."""
    creds = Credentials.from_service_account_info(credentials, scopes=SCOPES)
    return gspread.authorize(creds)


def _api_error_detail(err: gspread.exceptions.APIError):
    try:
        return err.response.json()
    except Exception:
        return getattr(err.response, "text", None)


def append_email_row(settings: Settings, email: str, timestamp: str) -> dict:
    """
    Appends one [email, timestamp] row to the configured range.

    Values go through USER_ENTERED so Sheets parses the timestamp the same
    way it would if typed into the cell. Nothing is retried here.

    Raises:
        RemoteUnavailable: when not configured or when any step of the call fails
    """
    if not settings.credentials:
        raise RemoteUnavailable("Missing Google credentials")
    if not settings.spreadsheet_id:
        raise RemoteUnavailable("Missing SPREADSHEET_ID")

    try:
        gc = get_gspread_client(settings.credentials)
        sh = gc.open_by_key(settings.spreadsheet_id)
        res = sh.values_append(
            settings.sheet_range,
            params={"valueInputOption": "USER_ENTERED", "insertDataOption": "INSERT_ROWS"},
            body={"values": [[email, timestamp]]},
        )
    except gspread.exceptions.APIError as e:
        raise RemoteUnavailable(f"Google Sheets API error: {e}", detail=_api_error_detail(e)) from e
    except Exception as e:
        raise RemoteUnavailable(f"Error adding to Google Sheets: {e}") from e

    logger.debug("Sheets append response: %s", res)
    return res
