"""Tests for loading stored Google OAuth tokens."""

import json

import pytest
from unittest.mock import MagicMock, patch

from google.auth.exceptions import RefreshError

from notecal.core.config import Settings
from notecal.calendars.google_credentials import load_google_credentials

TOKEN_DATA = {
    'token': 'access-token',
    'refresh_token': 'refresh-token',
    'token_uri': 'https://oauth2.googleapis.com/token',
    'client_id': 'client-id',
    'client_secret': 'client-secret',
    'scopes': ['https://www.googleapis.com/auth/calendar.events'],
}

@pytest.fixture
def token_settings(tmp_path):
    return Settings(GOOGLE_OAUTH_TOKENS_PATH=str(tmp_path / "tokens.json"), _env_file=None)

def _write_tokens(settings, data):
    with open(settings.GOOGLE_OAUTH_TOKENS_PATH, 'w') as f:
        f.write(data if isinstance(data, str) else json.dumps(data))

def test_missing_token_file_returns_none(token_settings):
    assert load_google_credentials(token_settings) is None

def test_malformed_token_file_returns_none(token_settings):
    _write_tokens(token_settings, "{not json")
    assert load_google_credentials(token_settings) is None

def test_token_file_missing_fields_returns_none(token_settings):
    _write_tokens(token_settings, {'token': 'only-a-token'})
    assert load_google_credentials(token_settings) is None

def test_valid_token_file_loads_credentials(token_settings):
    _write_tokens(token_settings, TOKEN_DATA)

    creds = load_google_credentials(token_settings)

    assert creds is not None
    assert creds.token == 'access-token'
    assert creds.refresh_token == 'refresh-token'
    assert creds.client_id == 'client-id'

def test_expired_token_is_refreshed_and_saved(token_settings):
    _write_tokens(token_settings, TOKEN_DATA)
    mock_creds = MagicMock(expired=True, refresh_token='refresh-token')

    with patch('notecal.calendars.google_credentials.Credentials', return_value=mock_creds), \
         patch('notecal.calendars.google_credentials.save_tokens') as mock_save:
        creds = load_google_credentials(token_settings)

    assert creds is mock_creds
    mock_creds.refresh.assert_called_once()
    mock_save.assert_called_once_with(mock_creds, token_settings)

def test_failed_refresh_returns_none(token_settings):
    _write_tokens(token_settings, TOKEN_DATA)
    mock_creds = MagicMock(expired=True, refresh_token='refresh-token')
    mock_creds.refresh.side_effect = RefreshError("revoked")

    with patch('notecal.calendars.google_credentials.Credentials', return_value=mock_creds):
        assert load_google_credentials(token_settings) is None
