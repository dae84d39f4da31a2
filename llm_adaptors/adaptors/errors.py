"""
Errors raised by adaptors.

Every error knows which backend it came from. Backend-reported failures keep
the backend's own error payload so callers can inspect it instead of parsing
a message string.
"""

from typing import Optional

from llm_adaptors.adaptors.schema import Backend, OpenAIErrorDetail


class AdaptorError(Exception):
    """Base class for all adaptor failures."""

    def __init__(self, message: str, backend: Optional[Backend] = None):
        super().__init__(message)
        self.backend = backend


class InvalidHeaderError(AdaptorError):
    """A header value could not be represented as a valid HTTP field value."""

    def __init__(self, header: str, backend: Optional[Backend] = None):
        super().__init__(f"Invalid value for header '{header}'", backend)
        self.header = header


class MissingModelError(AdaptorError):
    """request_body is absent or has no "model" for a backend that requires one."""

    def __init__(self, backend: Backend):
        super().__init__(
            f"The {backend} adaptor requires request_body with a 'model' field",
            backend,
        )


class MalformedResponseError(AdaptorError):
    """The response body is not JSON."""

    def __init__(self, backend: Backend, payload_size: int):
        super().__init__(
            f"{backend} response is not valid JSON ({payload_size} bytes)", backend
        )
        self.payload_size = payload_size


class UnexpectedShapeError(AdaptorError):
    """The response is JSON but matches none of the backend's known shapes."""

    def __init__(self, backend: Backend, payload_size: int, message: Optional[str] = None):
        super().__init__(
            message or f"Failed to deserialize {backend} response ({payload_size} bytes)",
            backend,
        )
        self.payload_size = payload_size


class InvalidAdaptorError(UnexpectedShapeError):
    """TGI answered with a list of generations; the backend is misconfigured."""

    def __init__(self, backend: Backend, payload_size: int):
        super().__init__(
            backend,
            payload_size,
            f"{backend} returned a list of generations; "
            f"the endpoint is likely the HuggingFace Inference API, use adaptor '{Backend.HUGGINGFACE}'",
        )


# ─────────────────────────────────────────────────────────────────────
# BACKEND-REPORTED ERRORS
# ─────────────────────────────────────────────────────────────────────

class BackendError(AdaptorError):
    """The backend answered with its own error payload."""


class InferenceApiError(BackendError):
    def __init__(self, error: str):
        super().__init__(f"Inference API error: {error}", Backend.HUGGINGFACE)
        self.error = error


class TgiError(BackendError):
    def __init__(self, error: str):
        super().__init__(f"TGI error: {error}", Backend.TGI)
        self.error = error


class OllamaError(BackendError):
    def __init__(self, error: str):
        super().__init__(f"Ollama error: {error}", Backend.OLLAMA)
        self.error = error


class OpenAIError(BackendError):
    """
    Validation errors from an OpenAI-compatible server.

    str() renders one "loc: msg (type)" line per detail entry.
    """

    def __init__(self, detail: list[OpenAIErrorDetail]):
        self.detail = list(detail)
        super().__init__("\n".join(str(item) for item in self.detail), Backend.OPENAI)
