"""Configuration and secrets management."""
import base64
import binascii
import json
import logging
import os
import streamlit as st

logger = logging.getLogger(__name__)


def read_secrets(key: str, default: str = "") -> str:
    """Reads a secret from the environment or Streamlit secrets."""
    val = os.environ.get(key)
    if val:
        return val
    try:
        return st.secrets.get(key, default)
    except Exception:
        return default


def _parse_credentials(raw: str, source: str) -> dict | None:
    try:
        info = json.loads(raw)
    except ValueError as e:
        logger.error("Failed to parse %s: %s", source, e)
        return None
    if not isinstance(info, dict):
        logger.error("Failed to parse %s: expected a JSON object", source)
        return None
    return info


def load_credentials() -> dict | None:
    """Service account info for Google Sheets, or None when not configured.

    GOOGLE_CREDENTIALS_BASE64 wins whenever it is set, even if it turns out
    to be unreadable; GOOGLE_CREDENTIALS (raw JSON) is only consulted when
    the encoded form is absent.
    """
    b64 = read_secrets("GOOGLE_CREDENTIALS_BASE64", "")
    raw = read_secrets("GOOGLE_CREDENTIALS", "")

    if b64:
        try:
            decoded = base64.b64decode(b64).decode("utf-8")
        except (binascii.Error, ValueError) as e:
            logger.error("Failed to parse GOOGLE_CREDENTIALS_BASE64: %s", e)
            return None
        return _parse_credentials(decoded, "GOOGLE_CREDENTIALS_BASE64")

    if raw:
        return _parse_credentials(raw, "GOOGLE_CREDENTIALS (raw)")

    return None


def spreadsheet_id() -> str:
    """ID of the target Google Sheet; empty when not configured."""
    return str(read_secrets("SPREADSHEET_ID", "") or "").strip()
