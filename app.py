#!/usr/bin/env python3
"""
Currency Service - Main Application Entry Point.

============================================================
SINGLE ENTRYPOINT
============================================================
Starts the FastAPI application under uvicorn.

- Configuration from environment (.env supported)
- Command-line flags override host, port and log level
- Refuses to start on invalid configuration

============================================================
USAGE
============================================================
Direct execution:
    python app.py
    python app.py --port 9000 --log-level DEBUG

Environment-based configuration:
    DATABASE_URL=sqlite:///./currency.db PRICE_FEED_READ_TIMEOUT=3 python app.py

============================================================
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

import uvicorn

from core.config import AppConfig
from core.exceptions import ConfigurationError
from core.logging_setup import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="currency-service",
        description="Currency reference data and Bitcoin price feed API",
    )
    parser.add_argument("--host", type=str, help="Bind address (default: API_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Bind port (default: API_PORT or 8080)")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Skip loading the default currency table",
    )
    return parser


def build_config(args: argparse.Namespace) -> AppConfig:
    """Merge command-line overrides into the environment config."""
    config = AppConfig.from_env()
    overrides = {}
    if args.host:
        overrides["api_host"] = args.host
    if args.port:
        overrides["api_port"] = args.port
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.no_seed:
        overrides["seed_currencies"] = False
    return dataclasses.replace(config, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = create_parser().parse_args(argv)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 2

    logger = setup_logging(config.log_level, config.log_format)
    logger.info(f"Starting on {config.api_host}:{config.api_port}")

    from api.main import create_app

    try:
        uvicorn.run(
            create_app(config),
            host=config.api_host,
            port=config.api_port,
            log_config=None,
        )
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
