"""Command-line entry point.

Builds the index once at startup, then either runs a single tool and
prints its JSON result, or serves line-delimited JSON-RPC on stdin/stdout.

    interview-sources stats
    interview-sources search "show if" --scope examples --max-results 5
    interview-sources cite docassemble_base/.../yesno.yml 1 12
    interview-sources serve
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, TextIO

from pydantic import ValidationError

from . import __version__
from .config import Settings, get_settings
from .engine import CorpusIndex, initialize
from .engine.handlers import HandlerContext
from .exceptions import CorpusRootNotFoundError
from .mcp import PARSE_ERROR, call_tool, handle_jsonrpc, jsonrpc_error
from .models import SearchScope, ToolName

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Log to stderr so stdout carries only JSON."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_index(corpus_path: str, config: Settings) -> CorpusIndex:
    """Build the index, exiting with status 1 if the corpus base is missing."""
    try:
        return initialize(corpus_path, config.corpus_roots, config.extensions_list)
    except CorpusRootNotFoundError as e:
        logger.error(str(e))
        logger.error("Set IS_CORPUS_PATH (or --corpus) to the docassemble repository checkout.")
        raise SystemExit(1) from e


async def serve(ctx: HandlerContext, stdin: TextIO, stdout: TextIO) -> None:
    """Answer one JSON-RPC request per input line until EOF."""
    logger.info("Serving JSON-RPC on stdin/stdout")
    while True:
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            break
        if not line.strip():
            continue
        try:
            message = json.loads(line)
        except json.JSONDecodeError as e:
            response = jsonrpc_error(None, PARSE_ERROR, f"Parse error: {e.msg}")
        else:
            response = await handle_jsonrpc(message, ctx)
        stdout.write(json.dumps(response) + "\n")
        stdout.flush()


def _tool_arguments(args: argparse.Namespace) -> tuple[ToolName, dict[str, Any]]:
    if args.command == "search":
        arguments: dict[str, Any] = {
            "query": args.query,
            "max_results": args.max_results,
            "scope": args.scope,
        }
        if args.glob:
            arguments["file_globs"] = args.glob
        return ToolName.SEARCH_SOURCES, arguments
    if args.command == "cite":
        return ToolName.GET_CITATION, {
            "path": args.path,
            "line_start": args.line_start,
            "line_end": args.line_end,
            "reason": args.reason,
        }
    if args.command == "keyword":
        return ToolName.FILES_WITH_KEYWORD, {"keyword": args.keyword}
    if args.command == "explain":
        return ToolName.EXPLAIN_TERM, {"term": args.term}
    return ToolName.STATS, {}


def build_parser(config: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interview-sources",
        description="Citation-backed search over a docassemble reference corpus",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--corpus",
        default=config.corpus_path,
        help="Corpus base directory (default: IS_CORPUS_PATH)",
    )
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("search", help="Search docs and examples")
    p.add_argument("query", help="Search query")
    p.add_argument("--max-results", type=int, default=config.default_max_results)
    p.add_argument(
        "--scope",
        choices=[scope.value for scope in SearchScope],
        default=SearchScope.DOCS_AND_EXAMPLES.value,
    )
    p.add_argument("--glob", action="append", help="Relative path glob (repeatable)")

    p = subparsers.add_parser("cite", help="Verify a path and line range")
    p.add_argument("path", help="Path relative to the corpus base")
    p.add_argument("line_start", type=int)
    p.add_argument("line_end", type=int)
    p.add_argument("--reason", default=None)

    p = subparsers.add_parser("keyword", help="List files mentioning a keyword")
    p.add_argument("keyword")

    p = subparsers.add_parser("explain", help="Explain a term with citations")
    p.add_argument("term")

    subparsers.add_parser("stats", help="Show index statistics")
    subparsers.add_parser("serve", help="Serve JSON-RPC tools on stdin/stdout")

    return parser


def main(argv: list[str] | None = None) -> int:
    config = get_settings()
    args = build_parser(config).parse_args(argv)
    configure_logging(args.log_level)

    index = build_index(args.corpus, config)
    ctx = HandlerContext(index=index)

    if args.command == "serve":
        asyncio.run(serve(ctx, sys.stdin, sys.stdout))
        return 0

    name, arguments = _tool_arguments(args)
    try:
        result = asyncio.run(call_tool({"name": name.value, "arguments": arguments}, ctx))
    except ValidationError as e:
        logger.error(f"Invalid arguments for {name}: {e}")
        return 2

    print(result["content"][0]["text"])
    return 1 if result["isError"] else 0


if __name__ == "__main__":
    sys.exit(main())
