"""
Adaptors for LLM inference backends.

Callers see three operations (adapt_body, adapt_headers, parse_generations);
each backend module supplies the WHAT for one wire format.
"""

from .dispatch import adapt_body, adapt_headers, parse_generations
from .errors import (
    AdaptorError,
    BackendError,
    InferenceApiError,
    InvalidAdaptorError,
    InvalidHeaderError,
    MalformedResponseError,
    MissingModelError,
    OllamaError,
    OpenAIError,
    TgiError,
    UnexpectedShapeError,
)
from .schema import (
    Backend,
    CompletionParams,
    Generation,
    GenerationParams,
    Ide,
    OpenAIErrorDetail,
)

__all__ = [
    "adapt_body",
    "adapt_headers",
    "parse_generations",
    "AdaptorError",
    "BackendError",
    "InferenceApiError",
    "InvalidAdaptorError",
    "InvalidHeaderError",
    "MalformedResponseError",
    "MissingModelError",
    "OllamaError",
    "OpenAIError",
    "TgiError",
    "UnexpectedShapeError",
    "Backend",
    "CompletionParams",
    "Generation",
    "GenerationParams",
    "Ide",
    "OpenAIErrorDetail",
]
