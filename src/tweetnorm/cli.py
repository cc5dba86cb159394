"""CLI entrypoint for tweetnorm."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from tweetnorm.config import AppConfig, load_config
from tweetnorm.core import run_pipeline
from tweetnorm.io import render, write_output
from tweetnorm.models import PipelineRequest
from tweetnorm.normalizers import DEFAULT_CHAIN, available_normalizers

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="tweetnorm",
        description="Normalize short social-media text and extract n-grams.",
    )
    subparsers = parser.add_subparsers(dest="command")

    run = subparsers.add_parser("run", help="Normalize text and extract n-grams")
    run.add_argument("text", nargs="?", default=None, help="Text to process")
    run.add_argument(
        "-i",
        "--input-file",
        default=None,
        help="Read the text from a UTF-8 file instead of the command line",
    )
    run.add_argument(
        "-n",
        "--normalizer",
        dest="normalizers",
        action="append",
        default=None,
        help=(
            "Normalizer preset, repeatable and applied in the given order "
            f"(default: {' '.join(DEFAULT_CHAIN)})"
        ),
    )
    run.add_argument(
        "-w",
        "--window-size",
        type=int,
        default=None,
        help="Number of units per n-gram (default from config)",
    )
    run.add_argument(
        "-l",
        "--level",
        default=None,
        help="Tokenization level: word or character (default from config)",
    )
    run.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output path. If omitted, prints to stdout.",
    )
    run.add_argument(
        "-f",
        "--format",
        choices=("json", "text"),
        default="json",
        help="Output format (default: json)",
    )

    subparsers.add_parser("normalizers", help="List available normalizer presets")

    serve = subparsers.add_parser("serve", help="Run the tweetnorm HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config()
    except ValueError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 2
    _configure_logging(config)

    if args.command == "run":
        return _run(args, config)

    if args.command == "normalizers":
        for name in available_normalizers():
            marker = " (default)" if name in DEFAULT_CHAIN else ""
            print(f"{name}{marker}")
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`tweetnorm serve` requires uvicorn. Install the `serve` extra first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "tweetnorm.api:app",
            host=host,
            port=port,
            workers=config.workers,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _run(args: argparse.Namespace, config: AppConfig) -> int:
    if args.input_file is not None:
        try:
            text = Path(args.input_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: cannot read {args.input_file}: {exc}", file=sys.stderr)
            return 2
    elif args.text is not None:
        text = args.text
    else:
        print("error: text or --input-file is required", file=sys.stderr)
        return 2

    try:
        request = PipelineRequest(
            text=text,
            normalizers=args.normalizers or list(DEFAULT_CHAIN),
            window_size=args.window_size if args.window_size is not None else config.window_size,
            level=args.level or config.level,
        )
        response = run_pipeline(request)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.output:
        write_output(response, args.output, args.format)
        print(f"Wrote pipeline {args.format} to {args.output}")
        return 0
    print(render(response, args.format))
    return 0


def _configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


if __name__ == "__main__":
    raise SystemExit(main())
