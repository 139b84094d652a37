"""
Google API authentication for the Google Docs Editor MCP Server.

Supports two authentication methods:
1. OAuth2 installed-app flow (default) - user authorizes via browser once,
   the refresh token is stored next to the client secrets
2. Service account authentication - set SERVICE_ACCOUNT_PATH
"""

import os
from pathlib import Path

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google.oauth2.service_account import Credentials as ServiceAccountCredentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from google_docs_editor.utils import log

SCOPES = [
    "https://www.googleapis.com/auth/documents",
    "https://www.googleapis.com/auth/drive",
]

DEFAULT_OAUTH_PORT = 3000


def get_credentials_dir() -> Path:
    """
    Directory holding credentials.json and token.json.

    GOOGLE_DOCS_CREDENTIALS_DIR wins; otherwise /workspace/credentials in
    Docker and <project root>/credentials in local development.
    """
    configured = os.environ.get("GOOGLE_DOCS_CREDENTIALS_DIR")
    if configured:
        return Path(configured)
    if os.getenv("DOCKER_ENV"):
        return Path("/workspace/credentials")
    return Path(__file__).parent.parent.parent / "credentials"


def get_oauth_port() -> int:
    """Loopback port for the OAuth redirect (OAUTH_PORT, default 3000)."""
    value = os.environ.get("OAUTH_PORT")
    if not value:
        return DEFAULT_OAUTH_PORT
    try:
        return int(value)
    except ValueError:
        raise Exception(f"OAUTH_PORT must be an integer, got {value!r}")


def _authorize_with_service_account(service_account_path: str) -> ServiceAccountCredentials:
    """
    Authorize using a service account key file.

    Raises:
        Exception: If the key file is missing or invalid
    """
    path = Path(service_account_path)
    if not path.exists():
        raise Exception(
            f"Service account key file not found at path: {service_account_path}"
        )

    try:
        credentials = ServiceAccountCredentials.from_service_account_file(
            str(path), scopes=SCOPES
        )
    except Exception as e:
        log(f"Error loading service account key: {e}")
        raise Exception(
            "Failed to authorize using the service account. "
            "Ensure the key file is valid and the path is correct."
        ) from e

    log("Service Account authentication successful!")
    return credentials


def _load_saved_credentials(token_path: Path) -> Credentials | None:
    """Load a stored OAuth token, refreshing it if expired. None if unusable."""
    if not token_path.exists():
        return None

    try:
        credentials = Credentials.from_authorized_user_file(str(token_path), SCOPES)
        if credentials.valid:
            return credentials
        if credentials.expired and credentials.refresh_token:
            credentials.refresh(Request())
            _save_credentials(credentials, token_path)
            return credentials
        return None
    except Exception as e:
        log(f"Error loading saved credentials: {e}")
        return None


def _save_credentials(credentials: Credentials, token_path: Path) -> None:
    try:
        token_path.write_text(credentials.to_json())
        log(f"Token stored to {token_path}")
    except OSError as e:
        log(f"Error saving credentials: {e}")


def _authenticate(credentials_dir: Path) -> Credentials:
    """
    Run the OAuth2 installed-app flow on the loopback port.

    Raises:
        Exception: If the client secrets are missing or the flow fails
    """
    client_secrets = credentials_dir / "credentials.json"
    if not client_secrets.exists():
        raise Exception(f"Credentials file not found at {client_secrets}")

    port = get_oauth_port()
    log(f"Using loopback OAuth flow on http://localhost:{port}")

    flow = InstalledAppFlow.from_client_secrets_file(str(client_secrets), scopes=SCOPES)
    try:
        credentials = flow.run_local_server(
            host="localhost",
            bind_addr="0.0.0.0",
            port=port,
            open_browser=False,
            authorization_prompt_message=(
                "Authorize this app by visiting this URL in your browser:\n{url}"
            ),
            access_type="offline",
        )
    except Exception as e:
        log(f"Error retrieving access token: {e}")
        raise Exception("Authentication failed") from e

    if credentials.refresh_token:
        _save_credentials(credentials, credentials_dir / "token.json")
    else:
        log("Did not receive refresh token. Token might expire.")
    log("Authentication successful!")
    return credentials


def authorize() -> Credentials | ServiceAccountCredentials:
    """
    Authorize with Google APIs.

    Checks for a service account path first, then falls back to OAuth2.
    """
    service_account_path = os.environ.get("SERVICE_ACCOUNT_PATH")
    if service_account_path:
        log("Service account path detected. Attempting service account authentication...")
        return _authorize_with_service_account(service_account_path)

    credentials_dir = get_credentials_dir()
    credentials = _load_saved_credentials(credentials_dir / "token.json")
    if credentials:
        log("Using saved credentials.")
        return credentials
    log("Starting authentication flow...")
    return _authenticate(credentials_dir)


# Global clients (initialized lazily)
_auth_client = None
_docs_client = None
_drive_client = None


def _get_auth_client():
    global _auth_client

    if _auth_client is None:
        log("Attempting to authorize Google API client...")
        _auth_client = authorize()
        log("Google API client authorized successfully.")
    return _auth_client


def get_docs_client():
    """Get the Google Docs v1 API client."""
    global _docs_client

    if _docs_client is None:
        _docs_client = build("docs", "v1", credentials=_get_auth_client())
    return _docs_client


def get_drive_client():
    """Get the Google Drive v3 API client."""
    global _drive_client

    if _drive_client is None:
        _drive_client = build("drive", "v3", credentials=_get_auth_client())
    return _drive_client
