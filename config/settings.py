"""Process-wide settings, built once at startup."""
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from .secrets import read_secrets, load_credentials, spreadsheet_id

logger = logging.getLogger(__name__)

# Repository root; assumes a checkout or editable install.
BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_PORT = 3000
DEFAULT_SHEET_RANGE = "Email Data!A:B"
DEFAULT_LOCAL_FILE = "emails.xlsx"


@dataclass(frozen=True)
class Settings:
    credentials: dict | None = field(default=None, repr=False)
    spreadsheet_id: str = ""
    sheet_range: str = DEFAULT_SHEET_RANGE
    local_path: Path = BASE_DIR / DEFAULT_LOCAL_FILE
    port: int = DEFAULT_PORT

    @property
    def google_configured(self) -> bool:
        return bool(self.credentials) and bool(self.spreadsheet_id)


def _read_port() -> int:
    raw = str(read_secrets("PORT", "") or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric PORT %r, using %s", raw, DEFAULT_PORT)
        return DEFAULT_PORT


def settings_from_env() -> Settings:
    """Builds a fresh Settings from env/secrets and logs what is missing."""
    credentials = load_credentials()
    sheet_id = spreadsheet_id()

    if not credentials:
        logger.warning(
            "No Google credentials found in environment (GOOGLE_CREDENTIALS_BASE64 or "
            "GOOGLE_CREDENTIALS). Google Sheets will be disabled until you set them."
        )
    else:
        logger.info(
            "Google credentials detected. service account email (if present): %s",
            credentials.get("client_email") or "N/A",
        )
    if not sheet_id:
        logger.warning("No SPREADSHEET_ID found in environment. Set SPREADSHEET_ID to your sheet ID.")

    local_path = Path(read_secrets("LOCAL_EXCEL_PATH", "") or BASE_DIR / DEFAULT_LOCAL_FILE)
    if not local_path.is_absolute():
        local_path = BASE_DIR / local_path

    return Settings(
        credentials=credentials,
        spreadsheet_id=sheet_id,
        sheet_range=read_secrets("SHEET_RANGE", "") or DEFAULT_SHEET_RANGE,
        local_path=local_path,
        port=_read_port(),
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Settings for the lifetime of the process."""
    return settings_from_env()
