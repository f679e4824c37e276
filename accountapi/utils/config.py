"""Load and validate environment variables. Uses python-dotenv.

This module is thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.

`.env` is looked up from the current working directory upwards, so an
installed copy of the library picks up the calling project's settings.
"""

from dotenv import find_dotenv, load_dotenv
import os

DEFAULT_BASE_URL = "http://accountapi:8080/"
DEFAULT_TIMEOUT_SECONDS = 5.0


def load_config() -> None:
    """
    Load the nearest .env at or above the working directory. Idempotent; safe
    to call multiple times. Uses override=True so .env values take precedence
    over existing env vars.
    """
    load_dotenv(find_dotenv(usecwd=True), override=True)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_float(key: str, default: float) -> float:
    """Get optional env var as float; return default if missing, invalid or not positive."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


# --- Public config accessors ---

def account_api_base_url() -> str:
    """
    Optional: base URL of the account service. Default http://accountapi:8080/.
    Always ends with '/' so relative resource paths resolve beneath it.
    """
    url = get_optional("ACCOUNT_API_BASE_URL", DEFAULT_BASE_URL)
    return url if url.endswith("/") else url + "/"


def account_api_timeout() -> float:
    """Optional: per-request timeout in seconds. Default 5."""
    return get_optional_float("ACCOUNT_API_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)


def log_level() -> str:
    """Optional: log level name. Default INFO."""
    return get_optional("ACCOUNT_API_LOG_LEVEL", "INFO").upper()


def integration_enabled() -> bool:
    """Optional: run the live integration suite when set to 1/true/yes."""
    return get_optional("ACCOUNT_API_INTEGRATION", "").lower() in ("1", "true", "yes")
