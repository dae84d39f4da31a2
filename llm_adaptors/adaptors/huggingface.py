"""
TGI-style adaptors: HuggingFace Inference API and Text Generation Inference.

Both speak the same "inputs"/"parameters" request schema. They differ in what
a successful response may look like:

- Inference API: a single {"generated_text": ...} object or a list of them
- TGI: exactly one {"generated_text": ...} object; a list means the caller
  pointed the TGI adaptor at an Inference API endpoint

Both report failures as {"error": "..."}.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, TypeAdapter

from llm_adaptors.adaptors.common import load_json, match_shape, payload_size
from llm_adaptors.adaptors.errors import (
    InferenceApiError,
    InvalidAdaptorError,
    TgiError,
    UnexpectedShapeError,
)
from llm_adaptors.adaptors.headers import build_token_headers
from llm_adaptors.adaptors.schema import Backend, CompletionParams, Generation, Ide

logger = logging.getLogger(__name__)


class APIError(BaseModel):
    """Error body shared by TGI, the Inference API and Ollama."""
    error: str


# Trial order matters: an object is tried as a generation before an error.
_TGI_SHAPES = (
    ("generation", TypeAdapter(Generation)),
    ("generations", TypeAdapter(list[Generation])),
    ("error", TypeAdapter(APIError)),
)


def build_tgi_body(prompt: str, params: CompletionParams) -> dict[str, Any]:
    gen = params.generation_params
    return {
        "inputs": prompt,
        "parameters": {
            "max_new_tokens": gen.max_new_tokens,
            "temperature": gen.temperature,
            "do_sample": gen.do_sample,
            "top_p": gen.top_p,
            "stop_tokens": list(gen.stop_tokens),
        },
    }


def build_tgi_headers(api_token: Optional[str], ide: Ide) -> httpx.Headers:
    return build_token_headers(Backend.TGI, api_token, ide)


def build_api_body(prompt: str, params: CompletionParams) -> dict[str, Any]:
    return build_tgi_body(prompt, params)


def build_api_headers(api_token: Optional[str], ide: Ide) -> httpx.Headers:
    return build_token_headers(Backend.HUGGINGFACE, api_token, ide)


def parse_tgi_text(text: str) -> list[Generation]:
    """Parse a TGI /generate response into exactly one Generation."""
    data = load_json(Backend.TGI, text)
    shape, value = match_shape(data, _TGI_SHAPES)

    if shape == "generation":
        return [value]
    if shape == "generations":
        logger.warning(f"TGI adaptor received {len(value)} generations, expected a single object")
        raise InvalidAdaptorError(Backend.TGI, payload_size(text))
    if shape == "error":
        raise TgiError(value.error)
    raise UnexpectedShapeError(Backend.TGI, payload_size(text))


def parse_api_text(text: str) -> list[Generation]:
    """Parse an Inference API response; one object or a list are both valid."""
    data = load_json(Backend.HUGGINGFACE, text)
    shape, value = match_shape(data, _TGI_SHAPES)

    if shape == "generation":
        return [value]
    if shape == "generations":
        return list(value)
    if shape == "error":
        raise InferenceApiError(value.error)
    raise UnexpectedShapeError(Backend.HUGGINGFACE, payload_size(text))
