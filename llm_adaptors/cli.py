"""CLI entry point for llm-adaptors.

Builds requests and parses responses for any supported backend, so wire
formats can be inspected from a terminal or a script.

Entry point:
    llm-adaptors body --prompt <text> [--adaptor ollama --request-body '{"model": "..."}']
    llm-adaptors headers [--adaptor tgi] [--ide neovim]
    llm-adaptors parse [--adaptor openai] [response.json | -]
    llm-adaptors complete --model <url-or-id> --prompt <text>
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

import httpx
from dotenv import load_dotenv

from llm_adaptors.adaptors import (
    AdaptorError,
    Backend,
    CompletionParams,
    GenerationParams,
    Ide,
    adapt_body,
    adapt_headers,
    parse_generations,
)
from llm_adaptors.client import request_generations
from llm_adaptors.config import (
    DEFAULT_MAX_NEW_TOKENS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
    get_adaptor_tag,
    get_api_token,
    get_ide_tag,
    get_request_timeout,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────
# ARGUMENT PARSING
# ─────────────────────────────────────────────────────────────────────


def _add_adaptor_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--adaptor", default=None,
        help="huggingface, tgi, ollama or openai (default: $LLM_ADAPTOR or huggingface)",
    )


def _add_generation_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--prompt", required=True, help="Prompt text")
    parser.add_argument("--request-body", default=None, help="JSON object; must carry 'model' for ollama/openai")
    parser.add_argument("--max-new-tokens", type=int, default=DEFAULT_MAX_NEW_TOKENS)
    parser.add_argument("--temperature", type=float, default=DEFAULT_TEMPERATURE)
    parser.add_argument("--top-p", type=float, default=DEFAULT_TOP_P)
    parser.add_argument("--no-sample", action="store_true", help="Disable sampling (do_sample=false)")
    parser.add_argument("--stop", action="append", default=[], help="Stop token (repeatable)")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-adaptors",
        description="Build and parse LLM backend completion requests.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command")

    body_p = sub.add_parser("body", help="Print the JSON request body")
    _add_adaptor_arg(body_p)
    _add_generation_args(body_p)

    headers_p = sub.add_parser("headers", help="Print the request headers")
    _add_adaptor_arg(headers_p)
    headers_p.add_argument("--api-token", default=None, help="Bearer token (default: $LLM_API_TOKEN or $HF_TOKEN)")
    headers_p.add_argument("--ide", default=None, help="Editor identity (default: $LLM_IDE or unknown)")

    parse_p = sub.add_parser("parse", help="Parse a raw response body")
    _add_adaptor_arg(parse_p)
    parse_p.add_argument("input", nargs="?", default="-", help="Response file (default: stdin)")

    complete_p = sub.add_parser("complete", help="Send a request and print the generations")
    _add_adaptor_arg(complete_p)
    _add_generation_args(complete_p)
    complete_p.add_argument("--model", required=True, help="Endpoint URL or HuggingFace model id")
    complete_p.add_argument("--api-token", default=None)
    complete_p.add_argument("--ide", default=None)

    return parser


def _resolve_backend(tag: Optional[str]) -> Optional[Backend]:
    tag = tag or get_adaptor_tag()
    return Backend.from_tag(tag) if tag else None


def _completion_params(args: argparse.Namespace) -> CompletionParams:
    request_body = json.loads(args.request_body) if args.request_body else None
    if request_body is not None and not isinstance(request_body, dict):
        raise ValueError("--request-body must be a JSON object")
    return CompletionParams(
        generation_params=GenerationParams(
            max_new_tokens=args.max_new_tokens,
            temperature=args.temperature,
            do_sample=not args.no_sample,
            top_p=args.top_p,
            stop_tokens=args.stop,
        ),
        backend=_resolve_backend(args.adaptor),
        request_body=request_body,
    )


def _dump(data) -> None:
    json.dump(data, sys.stdout, indent=2)
    sys.stdout.write("\n")


# ─────────────────────────────────────────────────────────────────────
# COMMANDS
# ─────────────────────────────────────────────────────────────────────


def _cmd_body(args: argparse.Namespace) -> int:
    _dump(adapt_body(args.prompt, _completion_params(args)))
    return 0


def _cmd_headers(args: argparse.Namespace) -> int:
    headers = adapt_headers(
        _resolve_backend(args.adaptor),
        args.api_token or get_api_token(),
        Ide(args.ide or get_ide_tag()),
    )
    _dump(dict(headers.items()))
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as f:
            text = f.read()
    generations = parse_generations(_resolve_backend(args.adaptor), text)
    _dump([g.model_dump() for g in generations])
    return 0


async def _cmd_complete(args: argparse.Namespace) -> int:
    params = _completion_params(args)
    async with httpx.AsyncClient(timeout=get_request_timeout()) as client:
        generations = await request_generations(
            client,
            args.model,
            args.prompt,
            params,
            api_token=args.api_token or get_api_token(),
            ide=Ide(args.ide or get_ide_tag()),
        )
    _dump([g.model_dump() for g in generations])
    return 0


# ─────────────────────────────────────────────────────────────────────
# ENTRY POINT
# ─────────────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s %(message)s", stream=sys.stderr)

    load_dotenv()

    try:
        if args.command == "body":
            return _cmd_body(args)
        if args.command == "headers":
            return _cmd_headers(args)
        if args.command == "parse":
            return _cmd_parse(args)
        return asyncio.run(_cmd_complete(args))
    except AdaptorError as e:
        backend = f"[{e.backend}] " if e.backend else ""
        print(f"Error: {backend}{e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
