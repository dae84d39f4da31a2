"""
Ollama adaptor for the /api/generate endpoint (non-streaming).

Ollama has no authentication scheme, so no headers are sent. The model id
comes from the caller's request_body.
"""

from typing import Any, Optional

import httpx
from pydantic import BaseModel, TypeAdapter

from llm_adaptors.adaptors.common import load_json, match_shape, payload_size, require_model
from llm_adaptors.adaptors.errors import OllamaError, UnexpectedShapeError
from llm_adaptors.adaptors.huggingface import APIError
from llm_adaptors.adaptors.schema import Backend, CompletionParams, Generation, Ide


class OllamaGeneration(BaseModel):
    response: str


_OLLAMA_SHAPES = (
    ("generation", TypeAdapter(OllamaGeneration)),
    ("error", TypeAdapter(APIError)),
)


def build_ollama_body(prompt: str, params: CompletionParams) -> dict[str, Any]:
    gen = params.generation_params
    return {
        "prompt": prompt,
        "model": require_model(Backend.OLLAMA, params),
        "stream": False,
        # Option names per https://github.com/ollama/ollama/blob/main/docs/modelfile.md#valid-parameters-and-values
        "options": {
            "num_predict": gen.max_new_tokens,
            "temperature": gen.temperature,
            "top_p": gen.top_p,
            "stop": list(gen.stop_tokens),
        },
    }


def build_ollama_headers(api_token: Optional[str] = None, ide: Ide = Ide.UNKNOWN) -> httpx.Headers:
    return httpx.Headers()


def parse_ollama_text(text: str) -> list[Generation]:
    data = load_json(Backend.OLLAMA, text)
    shape, value = match_shape(data, _OLLAMA_SHAPES)

    if shape == "generation":
        return [Generation(generated_text=value.response)]
    if shape == "error":
        raise OllamaError(value.error)
    raise UnexpectedShapeError(Backend.OLLAMA, payload_size(text))
