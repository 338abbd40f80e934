"""Local Excel fallback store.

The whole `Emails` sheet is rewritten on each append: existing rows are
read into a DataFrame, the new row is added at the end and the sheet is
written to a temp file that replaces the original once saved.
"""
import logging
import os
import tempfile
import threading
from pathlib import Path

import pandas as pd
from openpyxl import Workbook, load_workbook

from .errors import LocalWriteFailed

logger = logging.getLogger(__name__)

SHEET_NAME = "Emails"
COLUMNS = ["Email", "Timestamp"]

_write_lock = threading.Lock()


def _empty_records() -> pd.DataFrame:
    return pd.DataFrame(columns=COLUMNS)


def read_records(path) -> pd.DataFrame:
    """Rows of the Emails sheet as text, in file order."""
    path = Path(path)
    if not path.exists():
        return _empty_records()

    with pd.ExcelFile(path, engine="openpyxl") as xls:
        if SHEET_NAME not in xls.sheet_names:
            return _empty_records()
        df = pd.read_excel(xls, sheet_name=SHEET_NAME, dtype=str)

    df = df.fillna("")
    for col in COLUMNS:
        if col not in df.columns:
            df[col] = ""
    return df


def _string_cell(ws, row: int, column: int, value) -> None:
    cell = ws.cell(row=row, column=column, value=value)
    # Text starting with '=' would otherwise be saved as a formula.
    cell.data_type = "s"


def _build_workbook(path: Path, df: pd.DataFrame) -> Workbook:
    if path.exists():
        wb = load_workbook(path)
        if SHEET_NAME in wb.sheetnames:
            idx = wb.sheetnames.index(SHEET_NAME)
            wb.remove(wb[SHEET_NAME])
            ws = wb.create_sheet(SHEET_NAME, idx)
        else:
            ws = wb.create_sheet(SHEET_NAME)
    else:
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_NAME

    values = [df.columns.tolist()] + df.astype(str).values.tolist()
    for r, row in enumerate(values, start=1):
        for c, value in enumerate(row, start=1):
            _string_cell(ws, r, c, value)
    return wb


def _write_records(path: Path, df: pd.DataFrame) -> None:
    """Saves to a temp file beside `path` and swaps it in only after a clean save."""
    path.parent.mkdir(parents=True, exist_ok=True)
    wb = _build_workbook(path, df)
    with tempfile.NamedTemporaryFile(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False) as tmp:
        tmp_path = Path(tmp.name)
    try:
        wb.save(tmp_path)
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def append_record(path, email: str, timestamp: str) -> int:
    """
    Adds one Email/Timestamp row to the local workbook.

    Creates the file (and the Emails sheet with its header) on first use.

    Returns:
        int: number of data rows after the append

    Raises:
        LocalWriteFailed: on any read or write error
    """
    path = Path(path)
    with _write_lock:
        try:
            df = read_records(path)
            new_row = pd.DataFrame([{"Email": email, "Timestamp": timestamp}], columns=COLUMNS)
            df = new_row if df.empty else pd.concat([df, new_row], ignore_index=True)
            _write_records(path, df)
        except Exception as e:
            raise LocalWriteFailed(f"Failed to write local Excel fallback: {e}") from e

    logger.info("Saved email to local Excel fallback: %s", email)
    return len(df)
