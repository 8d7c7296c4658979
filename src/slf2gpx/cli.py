"""Command-line entry points: ``slf2gpx -i INPUT [-o OUTPUT] [-v]`` and ``slf2gpx-serve``."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from .batch import convert_path
from .config import SERVER_HOST, SERVER_PORT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slf2gpx",
        description="Convert SLF activity logs to GPX tracks (one .gpx per .slf).",
    )
    parser.add_argument("-i", "--input", required=True, help="Input .slf file or directory of .slf files")
    parser.add_argument("-o", "--output", default=None, help="Output .gpx file, or output directory for directory input")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-file details")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    report = convert_path(args.input, args.output)
    return 1 if report.failure_count else 0


def serve(argv: list[str] | None = None) -> None:
    """Run the conversion HTTP server: ``slf2gpx-serve [--host HOST] [--port PORT] [--reload]``."""
    parser = argparse.ArgumentParser(prog="slf2gpx-serve", description="Serve SLF to GPX conversion over HTTP.")
    parser.add_argument("--host", default=SERVER_HOST)
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args(argv)
    uvicorn.run("slf2gpx.server:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    sys.exit(main())
