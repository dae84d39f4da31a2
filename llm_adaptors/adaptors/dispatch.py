"""
Adaptor dispatch: one table per operation, keyed by Backend.

A missing selector means Backend.HUGGINGFACE.
"""

import logging
from typing import Any, Callable, Optional

import httpx

from llm_adaptors.adaptors.huggingface import (
    build_api_body,
    build_api_headers,
    build_tgi_body,
    build_tgi_headers,
    parse_api_text,
    parse_tgi_text,
)
from llm_adaptors.adaptors.ollama import build_ollama_body, build_ollama_headers, parse_ollama_text
from llm_adaptors.adaptors.openai_compat import (
    build_openai_body,
    build_openai_headers,
    parse_openai_text,
)
from llm_adaptors.adaptors.schema import Backend, CompletionParams, Generation, Ide

logger = logging.getLogger(__name__)

BodyBuilder = Callable[[str, CompletionParams], dict[str, Any]]
HeaderBuilder = Callable[[Optional[str], Ide], httpx.Headers]
ResponseParser = Callable[[str], list[Generation]]

_BODY_BUILDERS: dict[Backend, BodyBuilder] = {
    Backend.HUGGINGFACE: build_api_body,
    Backend.TGI: build_tgi_body,
    Backend.OLLAMA: build_ollama_body,
    Backend.OPENAI: build_openai_body,
}

_HEADER_BUILDERS: dict[Backend, HeaderBuilder] = {
    Backend.HUGGINGFACE: build_api_headers,
    Backend.TGI: build_tgi_headers,
    Backend.OLLAMA: build_ollama_headers,
    Backend.OPENAI: build_openai_headers,
}

_RESPONSE_PARSERS: dict[Backend, ResponseParser] = {
    Backend.HUGGINGFACE: parse_api_text,
    Backend.TGI: parse_tgi_text,
    Backend.OLLAMA: parse_ollama_text,
    Backend.OPENAI: parse_openai_text,
}


def _resolve(backend: Optional[Backend]) -> Backend:
    return backend if backend is not None else Backend.default()


def adapt_body(prompt: str, params: CompletionParams) -> dict[str, Any]:
    """
    Build the JSON request body for params' backend.

    Raises:
        MissingModelError: Ollama/OpenAI selected without request_body["model"]
    """
    backend = _resolve(params.backend)
    logger.debug(f"Building {backend} request body ({len(prompt)} chars of prompt)")
    return _BODY_BUILDERS[backend](prompt, params)


def adapt_headers(
    backend: Optional[Backend],
    api_token: Optional[str],
    ide: Ide = Ide.UNKNOWN,
) -> httpx.Headers:
    """
    Build request headers for backend.

    Raises:
        InvalidHeaderError: token (or User-Agent) is not a legal header value
    """
    return _HEADER_BUILDERS[_resolve(backend)](api_token, ide)


def parse_generations(backend: Optional[Backend], text: str) -> list[Generation]:
    """
    Parse a raw response body into Generations, in payload order.

    Raises:
        MalformedResponseError: text is not JSON
        UnexpectedShapeError: JSON matches no shape known for backend
        BackendError: the backend reported an error (subclass per backend)
    """
    backend = _resolve(backend)
    generations = _RESPONSE_PARSERS[backend](text)
    logger.debug(f"Parsed {len(generations)} generation(s) from {backend} response")
    return generations
