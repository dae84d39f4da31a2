"""
Helpers shared by the per-backend adaptors.

Backends signal success or failure only through the structure of the JSON
they return. Each parser lists its candidate shapes in priority order and
the first one that validates is taken.
"""

import json
import logging
from typing import Any, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from llm_adaptors.adaptors.errors import MalformedResponseError, MissingModelError
from llm_adaptors.adaptors.schema import Backend, CompletionParams

logger = logging.getLogger(__name__)

Shape = tuple[str, TypeAdapter]


def payload_size(text: str) -> int:
    # Lone surrogates (e.g. from surrogateescape decoding) still count as bytes.
    return len(text.encode("utf-8", errors="surrogatepass"))


def require_model(backend: Backend, params: CompletionParams) -> Any:
    """Return request_body["model"], raising MissingModelError if absent."""
    body = params.request_body
    if body is None or body.get("model") is None:
        raise MissingModelError(backend)
    return body["model"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def load_json(backend: Backend, text: str) -> Any:
    """
    Decode the raw body, raising MalformedResponseError if it is not JSON.

    NaN, Infinity and -Infinity are not JSON and are rejected.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        size = payload_size(text)
        logger.debug(f"{backend} response is not JSON ({size} bytes): {e}")
        raise MalformedResponseError(backend, size) from e


def match_shape(data: Any, shapes: Sequence[Shape]) -> tuple[Optional[str], Any]:
    """
    Try each (name, adapter) in order.

    Returns (name, value) for the first adapter that validates, or
    (None, None) if none does.
    """
    for name, adapter in shapes:
        try:
            return name, adapter.validate_python(data)
        except ValidationError:
            continue
    return None, None
