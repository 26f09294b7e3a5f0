"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent. Every setting is optional:
with no `.env` the app talks to the public TheCatAPI endpoints.
"""

from pathlib import Path
import logging

from dotenv import load_dotenv
import os

DEFAULT_CAT_API_BASE_URL = "https://api.thecatapi.com/v1"
DEFAULT_CAT_IMAGE_BASE_URL = "https://cdn2.thecatapi.com/images"


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Uses override=True to ensure .env values take precedence over existing env vars.
    """
    root = _project_root()
    env_path = root / ".env"
    load_dotenv(env_path, override=True)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_float(key: str, default: float | None = None) -> float | None:
    """Get optional env var as a positive float; return default if missing or invalid."""
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

def cat_api_base_url() -> str:
    """Optional: TheCatAPI base URL. Default https://api.thecatapi.com/v1."""
    return get_optional("CAT_API_BASE_URL", DEFAULT_CAT_API_BASE_URL).rstrip("/")


def breeds_endpoint() -> str:
    """Breed listing URL: {CAT_API_BASE_URL}/breeds."""
    return f"{cat_api_base_url()}/breeds"


def cat_image_base_url() -> str:
    """Optional: image CDN base. Default https://cdn2.thecatapi.com/images."""
    return get_optional("CAT_IMAGE_BASE_URL", DEFAULT_CAT_IMAGE_BASE_URL).rstrip("/")


def cat_api_timeout() -> float | None:
    """Optional: HTTP timeout in seconds. Unset means no timeout (requests default)."""
    return get_optional_float("CAT_API_TIMEOUT", None)


def log_level() -> int:
    """Optional: MEOWA_LOG_LEVEL name (DEBUG, INFO, ...). Default INFO."""
    name = get_optional("MEOWA_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
