"""
Request helper: one POST to an inference backend, parsed through the adaptors.

The caller owns the httpx.AsyncClient (pooling, TLS, timeouts). Only transport
failures are retried here; an HTTP error status still carries a body the
backend's parser knows how to read, so it is parsed like any other response.
"""

import logging
from typing import Optional

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from llm_adaptors.adaptors import (
    CompletionParams,
    Generation,
    Ide,
    adapt_body,
    adapt_headers,
    parse_generations,
)
from llm_adaptors.config import (
    HF_INFERENCE_API_BASE,
    get_retry_attempts,
    get_retry_max_wait,
    get_retry_min_wait,
)

logger = logging.getLogger(__name__)


def resolve_url(model: str) -> str:
    """
    Map a model reference to a request URL.

    Full http(s) URLs are used as-is; anything else is treated as a
    HuggingFace Hub model id served by the Inference API.
    """
    if model.startswith("http://") or model.startswith("https://"):
        return model
    return f"{HF_INFERENCE_API_BASE}/{model}"


async def _post(
    client: httpx.AsyncClient,
    url: str,
    body: dict,
    headers: httpx.Headers,
) -> httpx.Response:
    @retry(
        stop=stop_after_attempt(get_retry_attempts()),
        wait=wait_exponential(multiplier=1, min=get_retry_min_wait(), max=get_retry_max_wait()),
        retry=retry_if_exception_type(httpx.TransportError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async def post_with_retry() -> httpx.Response:
        return await client.post(url, json=body, headers=headers)

    return await post_with_retry()


async def request_generations(
    client: httpx.AsyncClient,
    model: str,
    prompt: str,
    params: CompletionParams,
    api_token: Optional[str] = None,
    ide: Ide = Ide.UNKNOWN,
) -> list[Generation]:
    """
    Send prompt to model's backend and return the parsed generations.

    Args:
        client: Caller-owned async HTTP client
        model: Endpoint URL or HuggingFace model id (see resolve_url)
        prompt: Fully-formed prompt text
        params: Generation parameters and backend selection
        api_token: Optional bearer token
        ide: Editor identity for the User-Agent header

    Raises:
        AdaptorError: request could not be built or response could not be parsed
        httpx.TransportError: the request failed after all retry attempts
    """
    url = resolve_url(model)
    body = adapt_body(prompt, params)
    headers = adapt_headers(params.backend, api_token, ide)

    response = await _post(client, url, body, headers)
    logger.debug(f"{params.resolved_backend} responded {response.status_code} from {url}")
    return parse_generations(params.backend, response.text)
