"""
Optional API key selection.

The hosting environment may let the user pick their own key. When it does
not, the default selector reports a key as already selected and the Gemini
client falls back to environment credentials.
"""

from typing import MutableMapping, Optional

from google import genai

from app.config import config
from app.utils.error_handling import CredentialSelectionFailedError, MissingCredentialsError
from app.utils.logger import logging


class KeySelector:
    """Key selection capability with nothing to select."""

    def has_selected_api_key(self) -> bool:
        return True

    def open_select_key(self, api_key: Optional[str] = None) -> None:
        return None

    @property
    def api_key(self) -> Optional[str]:
        return None


class SessionKeySelector(KeySelector):
    """Keeps a user-supplied key in a session mapping such as Streamlit's session_state."""

    STORE_KEY = "selected_api_key"

    def __init__(self, store: MutableMapping):
        self.store = store

    def has_selected_api_key(self) -> bool:
        return bool(self.store.get(self.STORE_KEY))

    def open_select_key(self, api_key: Optional[str] = None) -> None:
        if not api_key or not api_key.strip():
            raise ValueError("API key must not be empty")
        self.store[self.STORE_KEY] = api_key.strip()

    def clear(self) -> None:
        self.store.pop(self.STORE_KEY, None)

    @property
    def api_key(self) -> Optional[str]:
        return self.store.get(self.STORE_KEY)


def check_key_selection(selector: KeySelector) -> bool:
    """Whether a key is selected; a failing check counts as selected."""
    try:
        return bool(selector.has_selected_api_key())
    except Exception as e:
        logging.warning(f"API key check failed, continuing with default credentials: {e}")
        return True


def select_key(selector: KeySelector, api_key: Optional[str] = None) -> None:
    """
    Run the selector's key selection action.

    Raises:
        CredentialSelectionFailedError: if the selector rejects or fails
    """
    try:
        selector.open_select_key(api_key)
    except Exception as e:
        logging.error(f"Failed to select API key: {e}")
        raise CredentialSelectionFailedError() from e
    logging.info("API key selected")


def resolve_api_key(selector: Optional[KeySelector] = None) -> Optional[str]:
    """Selected key first, then the configured key; None lets google-genai use its own env lookup."""
    if selector is not None and selector.api_key:
        return selector.api_key
    return config.GEMINI_API_KEY or None


def create_client(api_key: Optional[str] = None) -> genai.Client:
    """
    Build a google-genai client.

    Raises:
        MissingCredentialsError: if no key was given and none is in the environment
    """
    try:
        return genai.Client(api_key=api_key)
    except ValueError as e:
        logging.error(f"Could not create Gemini client: {e}")
        raise MissingCredentialsError() from e
