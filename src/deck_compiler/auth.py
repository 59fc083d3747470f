"""OAuth credentials for the Google Slides API (installed-app flow)."""

import logging
import os
from pathlib import Path

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from .errors import AuthError

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/presentations",
    "https://www.googleapis.com/auth/drive.file",
]

HOME_ENV_VAR = "DECK_COMPILER_HOME"
DEFAULT_HOME = Path.home() / ".config" / "deck-compiler"


def config_dir() -> Path:
    """Directory holding credentials.json and token.json."""
    override = os.environ.get(HOME_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_HOME


def client_secrets_path() -> Path:
    return config_dir() / "credentials.json"


def token_path() -> Path:
    return config_dir() / "token.json"


def _save_token(creds: Credentials) -> None:
    path = token_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(creds.to_json(), encoding="utf-8")
    logger.info("Saved OAuth token to %s", path)


def run_auth_flow() -> Credentials:
    """Run the browser OAuth flow and store the resulting token."""
    secrets = client_secrets_path()
    if not secrets.exists():
        raise AuthError(
            f"OAuth client secrets not found at {secrets}. "
            f"Download them from Google Cloud Console or set {HOME_ENV_VAR}."
        )
    flow = InstalledAppFlow.from_client_secrets_file(str(secrets), SCOPES)
    creds = flow.run_local_server(port=0)
    _save_token(creds)
    return creds


def get_credentials() -> Credentials:
    """Load the stored token, refreshing it when expired."""
    path = token_path()
    if not path.exists():
        raise AuthError("Not authenticated. Run with --auth first.")

    creds = Credentials.from_authorized_user_file(str(path), SCOPES)
    if creds.valid:
        return creds
    if creds.expired and creds.refresh_token:
        creds.refresh(Request())
        logger.info("Refreshed OAuth token")
        _save_token(creds)
        return creds
    raise AuthError("Stored OAuth token is invalid. Run with --auth again.")
