"""Loads stored Google OAuth tokens for the Calendar API.

Tokens are written by an external login tool; this module only reads them
and refreshes expired access tokens.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2.credentials import Credentials

from notecal.core.config import Settings

logger = logging.getLogger(__name__)

REQUIRED_TOKEN_FIELDS = ('token', 'token_uri', 'client_id', 'client_secret')

def _get_token_path(settings: Settings) -> Path:
    token_p = Path(settings.GOOGLE_OAUTH_TOKENS_PATH)
    if not token_p.is_absolute():
        return Path.cwd() / token_p
    return token_p

def save_tokens(credentials: Credentials, settings: Settings):
    token_path = _get_token_path(settings)
    token_path.parent.mkdir(parents=True, exist_ok=True)
    token_data = {
        'token': credentials.token,
        'refresh_token': credentials.refresh_token,
        'token_uri': credentials.token_uri,
        'client_id': credentials.client_id,
        'client_secret': credentials.client_secret,
        'scopes': credentials.scopes
    }
    try:
        with open(token_path, 'w') as f:
            json.dump(token_data, f)
        logger.info(f"Saved Google OAuth tokens to {token_path}")
    except IOError as e:
        logger.error(f"Error saving Google OAuth tokens to {token_path}: {e}", exc_info=True)

def load_google_credentials(settings: Settings) -> Optional[Credentials]:
    """Loads Google credentials from the token file, refreshing them if expired.

    Args:
        settings: Application settings holding the token path and scopes.

    Returns:
        Usable credentials, or None if the file is missing, malformed, or the
        token could not be refreshed.
    """
    token_path = _get_token_path(settings)
    if not token_path.exists():
        logger.warning(f"Google OAuth token file {token_path} does not exist.")
        return None

    try:
        with open(token_path, 'r') as f:
            token_data = json.load(f)
    except (IOError, json.JSONDecodeError) as e:
        logger.error(f"Error loading Google OAuth tokens from {token_path}: {e}", exc_info=True)
        return None

    if not all(k in token_data for k in REQUIRED_TOKEN_FIELDS):
        logger.warning(f"Token file {token_path} is missing required fields. Ignoring.")
        return None

    creds = Credentials(
        token=token_data['token'],
        refresh_token=token_data.get('refresh_token'),
        token_uri=token_data['token_uri'],
        client_id=token_data['client_id'],
        client_secret=token_data['client_secret'],
        scopes=token_data.get('scopes') or settings.GOOGLE_CALENDAR_API_SCOPES,
    )

    if creds.expired and creds.refresh_token:
        try:
            logger.info("Google OAuth token expired, attempting refresh.")
            creds.refresh(GoogleAuthRequest())
            save_tokens(creds, settings)
        except RefreshError as e:
            logger.error(f"Error refreshing Google OAuth token: {e}. Tokens need to be re-issued.", exc_info=True)
            return None

    logger.debug(f"Loaded Google OAuth tokens from {token_path}")
    return creds
