"""Command-line entry point: preload the manifest, then serve the API."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn
from loguru import logger

from core.exceptions import ManifestError
from core.logging_config import setup_logging
from core.manifest import preload
from core.settings import Settings, get_settings
from core.storage import InMemoryStorage
from services.api.main import create_app


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="In-memory Google Cloud Storage mock server")
    parser.add_argument("--host", default=defaults.host, help=f"Bind address (default: {defaults.host})")
    parser.add_argument("--port", type=int, default=defaults.port, help=f"Bind port (default: {defaults.port})")
    parser.add_argument(
        "--manifest",
        type=Path,
        default=defaults.manifest,
        help="YAML manifest of buckets and files to preload",
    )
    parser.add_argument("--log-level", default=defaults.log_level, help="Log level (default: %(default)s)")
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        defaults = get_settings()
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2

    args = build_parser(defaults).parse_args(argv)
    settings = defaults.model_copy(
        update={
            "host": args.host,
            "port": args.port,
            "manifest": args.manifest,
            "log_level": args.log_level.upper(),
        }
    )

    try:
        logger.level(settings.log_level)
    except ValueError:
        print(f"Unknown log level: {settings.log_level}", file=sys.stderr)
        return 2

    setup_logging(
        level=settings.log_level,
        json_format=settings.json_logging,
        log_file=settings.log_file,
    )

    storage = InMemoryStorage()
    if settings.manifest is not None:
        try:
            preload(storage, settings.manifest)
        except ManifestError as exc:
            logger.error("Manifest preload failed, not starting server: {message}", message=exc.message)
            return 1

    app = create_app(storage)
    logger.info("Serving GCS mock on http://{host}:{port}", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
