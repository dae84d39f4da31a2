"""Shared test fixtures for llm-adaptors tests."""

import json

import pytest

from llm_adaptors.adaptors import CompletionParams, GenerationParams


# ─────────────────────────────────────────────────────────────────────
# MOCK DATA
# ─────────────────────────────────────────────────────────────────────

MOCK_PROMPT = "def fibonacci(n):"
MOCK_MODEL = "bigcode/starcoder"
MOCK_TOKEN = "hf_test_token"

MOCK_TGI_GENERATION = {
    "generated_text": "\n    if n < 2:\n        return n",
    "details": {"finish_reason": "length", "generated_tokens": 12},
}

MOCK_API_GENERATIONS = [
    {"generated_text": "return n"},
    {"generated_text": "return fibonacci(n - 1) + fibonacci(n - 2)"},
]

MOCK_TGI_ERROR = {"error": "Input validation error: `inputs` must not be empty"}

MOCK_OLLAMA_GENERATION = {
    "model": "codellama",
    "created_at": "2023-11-04T14:56:49.277302595-07:00",
    "response": "    return n if n < 2 else fibonacci(n - 1) + fibonacci(n - 2)",
    "done": True,
}

MOCK_OLLAMA_ERROR = {"error": "model 'codellama' not found, try pulling it first"}

MOCK_OPENAI_COMPLETION = {
    "id": "cmpl-123",
    "object": "text_completion",
    "created": 1699000000,
    "model": "codellama",
    "choices": [
        {"index": 0, "text": "a", "finish_reason": "length"},
        {"index": 1, "text": "b", "finish_reason": "stop"},
    ],
}

MOCK_OPENAI_ERROR = {
    "detail": [
        {"loc": "body", "msg": "bad", "type": "value_error"},
        {"loc": 0, "msg": "field required", "type": "value_error.missing"},
    ]
}


def as_text(payload) -> str:
    return json.dumps(payload)


# ─────────────────────────────────────────────────────────────────────
# FIXTURES
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def generation_params():
    """Representative sampling parameters."""
    return GenerationParams(
        max_new_tokens=60,
        temperature=0.2,
        do_sample=True,
        top_p=0.95,
        stop_tokens=["<|endoftext|>", "\n\n"],
    )


@pytest.fixture
def tgi_params(generation_params):
    """CompletionParams without a backend (defaults to HuggingFace)."""
    return CompletionParams(generation_params=generation_params)


@pytest.fixture
def ollama_params(generation_params):
    return CompletionParams(
        generation_params=generation_params,
        backend="ollama",
        request_body={"model": "codellama"},
    )


@pytest.fixture
def openai_params(generation_params):
    return CompletionParams(
        generation_params=generation_params,
        backend="openai",
        request_body={"model": "codellama", "ignored": True},
    )
