"""
OpenAI-compatible /v1/completions adaptor.

Success carries a "choices" list; failure carries a FastAPI-style "detail"
list of {loc, msg, type} records.
"""

from typing import Any, Optional

import httpx
from pydantic import BaseModel, TypeAdapter

from llm_adaptors.adaptors.common import load_json, match_shape, payload_size, require_model
from llm_adaptors.adaptors.errors import OpenAIError, UnexpectedShapeError
from llm_adaptors.adaptors.headers import build_token_headers
from llm_adaptors.adaptors.schema import (
    Backend,
    CompletionParams,
    Generation,
    Ide,
    OpenAIErrorDetail,
)


class OpenAIChoice(BaseModel):
    text: str


class OpenAIGeneration(BaseModel):
    choices: list[OpenAIChoice]


class OpenAIErrorBody(BaseModel):
    detail: list[OpenAIErrorDetail]


_OPENAI_SHAPES = (
    ("generation", TypeAdapter(OpenAIGeneration)),
    ("error", TypeAdapter(OpenAIErrorBody)),
)


def build_openai_body(prompt: str, params: CompletionParams) -> dict[str, Any]:
    gen = params.generation_params
    return {
        "prompt": prompt,
        "model": require_model(Backend.OPENAI, params),
        "max_tokens": gen.max_new_tokens,
        "temperature": gen.temperature,
        "top_p": gen.top_p,
        "stop": list(gen.stop_tokens),
    }


def build_openai_headers(api_token: Optional[str], ide: Ide) -> httpx.Headers:
    return build_token_headers(Backend.OPENAI, api_token, ide)


def parse_openai_text(text: str) -> list[Generation]:
    """Map each choice to a Generation, preserving order."""
    data = load_json(Backend.OPENAI, text)
    shape, value = match_shape(data, _OPENAI_SHAPES)

    if shape == "generation":
        return [Generation(generated_text=choice.text) for choice in value.choices]
    if shape == "error":
        raise OpenAIError(value.detail)
    raise UnexpectedShapeError(Backend.OPENAI, payload_size(text))
