"""Configuration module for secrets and settings."""
from .secrets import read_secrets, load_credentials, spreadsheet_id
from .settings import Settings, load_settings, settings_from_env

__all__ = [
    'read_secrets',
    'load_credentials',
    'spreadsheet_id',
    'Settings',
    'load_settings',
    'settings_from_env',
]
