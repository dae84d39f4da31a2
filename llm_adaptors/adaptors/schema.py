"""
Value types shared by every adaptor.

Callers build a CompletionParams, adaptors turn it into a request, and
parsers hand back Generation objects. All models are frozen: one call's
input can never leak into another's.
"""

from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from llm_adaptors.config import (
    DEFAULT_DO_SAMPLE,
    DEFAULT_MAX_NEW_TOKENS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
)


class Backend(str, Enum):
    """Inference backend selector. Serialized as its lowercase tag."""
    HUGGINGFACE = "huggingface"
    TGI = "tgi"
    OLLAMA = "ollama"
    OPENAI = "openai"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "Backend":
        return cls.HUGGINGFACE

    @classmethod
    def from_tag(cls, tag: str) -> "Backend":
        """Resolve a configuration tag (case-insensitive) to a Backend."""
        try:
            return cls(tag.strip().lower())
        except ValueError:
            valid = ", ".join(b.value for b in cls)
            raise ValueError(f"Unknown adaptor '{tag}' (expected one of: {valid})") from None


class Ide(str, Enum):
    """Editor identity reported in the User-Agent header."""
    NEOVIM = "neovim"
    VSCODE = "vscode"
    JETBRAINS = "jetbrains"
    EMACS = "emacs"
    JUPYTER = "jupyter"
    SUBLIME = "sublime"
    VISUALSTUDIO = "visualstudio"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class GenerationParams(BaseModel):
    """Sampling controls common to all backends."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    max_new_tokens: int = Field(default=DEFAULT_MAX_NEW_TOKENS, ge=0)
    temperature: float = DEFAULT_TEMPERATURE
    do_sample: bool = DEFAULT_DO_SAMPLE
    top_p: float = DEFAULT_TOP_P
    stop_tokens: tuple[str, ...] = ()


class CompletionParams(BaseModel):
    """
    Everything an adaptor needs besides the prompt.

    request_body is opaque to this layer; Ollama and OpenAI-compatible
    backends read their model id from its "model" key.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    generation_params: GenerationParams = Field(
        default_factory=GenerationParams, alias="requestParams"
    )
    backend: Optional[Backend] = Field(default=None, alias="adaptor")
    request_body: Optional[dict[str, Any]] = Field(default=None, alias="requestBody")

    @property
    def resolved_backend(self) -> Backend:
        return self.backend or Backend.default()


class Generation(BaseModel):
    """One normalized completion."""
    model_config = ConfigDict(frozen=True)

    generated_text: str


class OpenAIErrorDetail(BaseModel):
    """
    One entry of an OpenAI-compatible server's validation error list.

    location keeps the wire type of "loc": a field name arrives as str,
    an array index as int.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    location: Union[StrictStr, Annotated[StrictInt, Field(ge=0)]] = Field(alias="loc")
    message: str = Field(alias="msg")
    kind: str = Field(alias="type")

    def __str__(self) -> str:
        return f"{self.location}: {self.message} ({self.kind})"
