"""
Configuration constants and environment lookups for llm-adaptors.
"""

import os
from typing import Optional


# ─────────────────────────────────────────────────────────────────────
# CLIENT IDENTITY - Reported in the User-Agent header
# ─────────────────────────────────────────────────────────────────────

CLIENT_NAME: str = "llm-adaptors"
CLIENT_VERSION: str = "0.1.0"


# ─────────────────────────────────────────────────────────────────────
# GENERATION DEFAULTS
# ─────────────────────────────────────────────────────────────────────

DEFAULT_MAX_NEW_TOKENS: int = 60
DEFAULT_TEMPERATURE: float = 0.2
DEFAULT_DO_SAMPLE: bool = True
DEFAULT_TOP_P: float = 0.95


# ─────────────────────────────────────────────────────────────────────
# INTERNAL CONSTANTS
# ─────────────────────────────────────────────────────────────────────

HF_INFERENCE_API_BASE: str = "https://api-inference.huggingface.co/models"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 60.0


# ─────────────────────────────────────────────────────────────────────
# ENVIRONMENT LOADING
# ─────────────────────────────────────────────────────────────────────

def _int_from_env(key: str, default: int) -> int:
    try:
        return int(os.environ.get(key, str(default)))
    except ValueError:
        return default


def get_adaptor_tag() -> Optional[str]:
    """
    Get the configured adaptor tag (e.g. "ollama").

    Set LLM_ADAPTOR in .env. Returns None when unset, which means the
    default backend.
    """
    value = os.environ.get("LLM_ADAPTOR", "").strip()
    return value or None


def get_api_token() -> Optional[str]:
    """
    Get the bearer token for the inference backend.

    LLM_API_TOKEN takes precedence over HF_TOKEN.
    """
    return os.environ.get("LLM_API_TOKEN") or os.environ.get("HF_TOKEN") or None


def get_ide_tag() -> str:
    """Get the editor identity tag from LLM_IDE (default: "unknown")."""
    return os.environ.get("LLM_IDE", "unknown").strip().lower() or "unknown"


def get_retry_attempts() -> int:
    """
    Get max transport retry attempts from environment or default.

    Set LLM_RETRY_ATTEMPTS in .env (default: 3).
    """
    return _int_from_env("LLM_RETRY_ATTEMPTS", 3)


def get_retry_min_wait() -> int:
    """Minimum wait between transport retries in seconds (LLM_RETRY_MIN_WAIT, default 1)."""
    return _int_from_env("LLM_RETRY_MIN_WAIT", 1)


def get_retry_max_wait() -> int:
    """Maximum wait between transport retries in seconds (LLM_RETRY_MAX_WAIT, default 10)."""
    return _int_from_env("LLM_RETRY_MAX_WAIT", 10)


def get_request_timeout() -> float:
    """
    Get HTTP request timeout in seconds.

    Returns LLM_REQUEST_TIMEOUT, or DEFAULT_REQUEST_TIMEOUT_SECONDS if unset
    or not a number.
    """
    try:
        return float(os.environ.get("LLM_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS))
    except ValueError:
        return DEFAULT_REQUEST_TIMEOUT_SECONDS
