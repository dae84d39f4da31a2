"""
HTTP header construction shared by token-authenticated backends.
"""

import platform
from typing import Optional

import httpx

from llm_adaptors.adaptors.errors import InvalidHeaderError
from llm_adaptors.adaptors.schema import Backend, Ide
from llm_adaptors.config import CLIENT_NAME, CLIENT_VERSION


def _is_valid_header_value(value: str) -> bool:
    # Field values may contain HTAB but no other control character or DEL.
    return all(ch == "\t" or (ord(ch) >= 0x20 and ord(ch) != 0x7F) for ch in value)


def header_value(name: str, value: str, backend: Optional[Backend] = None) -> str:
    """Return value unchanged, or raise InvalidHeaderError if it is not a legal field value."""
    if not _is_valid_header_value(value):
        raise InvalidHeaderError(name, backend)
    return value


def user_agent(ide: Ide) -> str:
    runtime_version = platform.python_version() or "unknown"
    return f"{CLIENT_NAME}/{CLIENT_VERSION}; python/{runtime_version}; ide/{ide}"


def build_token_headers(
    backend: Backend, api_token: Optional[str], ide: Ide
) -> httpx.Headers:
    """User-Agent always, Authorization only when a token is supplied."""
    headers = httpx.Headers()
    headers["User-Agent"] = header_value("User-Agent", user_agent(ide), backend)
    if api_token is not None:
        headers["Authorization"] = header_value(
            "Authorization", f"Bearer {api_token}", backend
        )
    return headers
