"""Tests for the Ollama adaptor."""

import pytest

from llm_adaptors.adaptors import (
    Backend,
    CompletionParams,
    Generation,
    MalformedResponseError,
    MissingModelError,
    OllamaError,
    UnexpectedShapeError,
    adapt_body,
    parse_generations,
)
from tests.conftest import (
    MOCK_OLLAMA_ERROR,
    MOCK_OLLAMA_GENERATION,
    MOCK_PROMPT,
    as_text,
)


class TestOllamaBody:
    def test_wire_shape(self, ollama_params):
        assert adapt_body(MOCK_PROMPT, ollama_params) == {
            "prompt": MOCK_PROMPT,
            "model": "codellama",
            "stream": False,
            "options": {
                "num_predict": 60,
                "temperature": 0.2,
                "top_p": 0.95,
                "stop": ["<|endoftext|>", "\n\n"],
            },
        }

    def test_do_sample_not_sent(self, ollama_params):
        body = adapt_body(MOCK_PROMPT, ollama_params)
        assert "do_sample" not in body["options"]

    def test_missing_request_body(self, generation_params):
        params = CompletionParams(generation_params=generation_params, backend=Backend.OLLAMA)
        with pytest.raises(MissingModelError) as exc_info:
            adapt_body(MOCK_PROMPT, params)
        assert exc_info.value.backend is Backend.OLLAMA

    @pytest.mark.parametrize("request_body", [{}, {"model": None}, {"name": "codellama"}])
    def test_request_body_without_model(self, generation_params, request_body):
        params = CompletionParams(
            generation_params=generation_params,
            backend=Backend.OLLAMA,
            request_body=request_body,
        )
        with pytest.raises(MissingModelError):
            adapt_body(MOCK_PROMPT, params)


class TestParseOllamaText:
    def test_response_field(self):
        assert parse_generations(Backend.OLLAMA, '{"response": "hello"}') == [
            Generation(generated_text="hello")
        ]

    def test_full_response_keeps_text_verbatim(self):
        result = parse_generations(Backend.OLLAMA, as_text(MOCK_OLLAMA_GENERATION))
        assert result[0].generated_text == MOCK_OLLAMA_GENERATION["response"]

    def test_empty_response(self):
        assert parse_generations(Backend.OLLAMA, '{"response": ""}') == [Generation(generated_text="")]

    def test_error(self):
        with pytest.raises(OllamaError) as exc_info:
            parse_generations(Backend.OLLAMA, as_text(MOCK_OLLAMA_ERROR))
        assert exc_info.value.error == MOCK_OLLAMA_ERROR["error"]
        assert exc_info.value.backend is Backend.OLLAMA

    def test_tgi_shape_is_rejected(self):
        with pytest.raises(UnexpectedShapeError):
            parse_generations(Backend.OLLAMA, '{"generated_text": "x"}')

    def test_list_is_rejected(self):
        with pytest.raises(UnexpectedShapeError):
            parse_generations(Backend.OLLAMA, '[{"response": "x"}]')

    def test_malformed_json(self):
        with pytest.raises(MalformedResponseError):
            parse_generations(Backend.OLLAMA, "not json")

    def test_nan_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            parse_generations(Backend.OLLAMA, '{"response": "a", "eval": NaN}')
