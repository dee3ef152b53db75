"""
Command-line entrypoint for brandgen.

- `brandgen` (or `brandgen cli`) starts the interactive terminal session.
- `brandgen serve` starts the HTTP API with uvicorn.

Logging is configured here once: INFO by default, DEBUG when `DEBUG=true`.
"""

import argparse
import logging

import uvicorn

from brandgen.llm.provider_config import DEBUG


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brandgen",
        description="Generate a brand name, tagline, and logo from a business idea.",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("cli", help="interactive terminal session (default)")

    serve = subparsers.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        uvicorn.run(
            "brandgen.api.http_api:app",
            host=args.host,
            port=args.port,
            log_level="debug" if DEBUG else "info",
        )
        return

    from brandgen.api.cli import main as run_cli

    run_cli()


if __name__ == "__main__":
    main()
