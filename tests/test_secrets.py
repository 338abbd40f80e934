import base64
import json

import streamlit as st

from config import secrets, settings as cfg


def _b64(text):
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def test_read_secrets_prefers_env(monkeypatch):
    monkeypatch.setenv("SPREADSHEET_ID", "from-env")
    monkeypatch.setattr(st, "secrets", {"SPREADSHEET_ID": "from-secrets"})
    assert secrets.read_secrets("SPREADSHEET_ID") == "from-env"


def test_read_secrets_falls_back_to_streamlit_secrets(monkeypatch):
    monkeypatch.setattr(st, "secrets", {"SPREADSHEET_ID": "from-secrets"})
    assert secrets.read_secrets("SPREADSHEET_ID") == "from-secrets"
    assert secrets.read_secrets("MISSING", "dflt") == "dflt"


def test_base64_credentials(monkeypatch, service_account):
    monkeypatch.setenv("GOOGLE_CREDENTIALS_BASE64", _b64(json.dumps(service_account)))
    assert secrets.load_credentials() == service_account


def test_raw_credentials(monkeypatch, service_account):
    monkeypatch.setenv("GOOGLE_CREDENTIALS", json.dumps(service_account))
    assert secrets.load_credentials() == service_account


def test_bad_base64_does_not_fall_through_to_raw(monkeypatch, service_account):
    monkeypatch.setenv("GOOGLE_CREDENTIALS_BASE64", _b64("{not json"))
    monkeypatch.setenv("GOOGLE_CREDENTIALS", json.dumps(service_account))
    assert secrets.load_credentials() is None


def test_bad_raw_credentials(monkeypatch, caplog):
    monkeypatch.setenv("GOOGLE_CREDENTIALS", "{oops")
    assert secrets.load_credentials() is None
    assert "GOOGLE_CREDENTIALS" in caplog.text


def test_non_object_credentials_rejected(monkeypatch):
    monkeypatch.setenv("GOOGLE_CREDENTIALS", "[1, 2]")
    assert secrets.load_credentials() is None


def test_no_credentials():
    assert secrets.load_credentials() is None


def test_settings_from_env(monkeypatch, tmp_path, service_account):
    monkeypatch.setenv("GOOGLE_CREDENTIALS", json.dumps(service_account))
    monkeypatch.setenv("SPREADSHEET_ID", "  sheet-123 \n")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOCAL_EXCEL_PATH", str(tmp_path / "out.xlsx"))
    s = cfg.settings_from_env()
    assert s.spreadsheet_id == "sheet-123"
    assert s.port == 8080
    assert s.local_path == tmp_path / "out.xlsx"
    assert s.sheet_range == "Email Data!A:B"
    assert s.google_configured


def test_settings_defaults(monkeypatch):
    monkeypatch.setenv("PORT", "abc")
    s = cfg.settings_from_env()
    assert s.port == cfg.DEFAULT_PORT
    assert s.local_path == cfg.BASE_DIR / "emails.xlsx"
    assert not s.google_configured


def test_google_configured_needs_both(configured, service_account):
    assert configured.google_configured
    assert not cfg.Settings(credentials=service_account).google_configured
    assert not cfg.Settings(spreadsheet_id="sheet-123").google_configured
