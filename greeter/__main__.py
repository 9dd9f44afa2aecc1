"""Serve the greeting API."""

import argparse
import logging

import uvicorn

from greeter import CONFIG
from greeter.main import create_app

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse and return command-line arguments."""
    parser = argparse.ArgumentParser(description="Serve the greeting API")
    parser.add_argument(
        "--host",
        type=str,
        default=CONFIG.main.server.host,
        help="Interface to bind to",
    )
    parser.add_argument(
        "--port", type=int, default=CONFIG.main.server.port, help="Port to listen on"
    )

    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_arguments(argv)
    logger.info(
        f"Starting {CONFIG.main.app_name} on {args.host}:{args.port}, "
        f"route {CONFIG.main.api_prefix}/{{name}}"
    )

    # keep the logging configuration applied at package import
    uvicorn.run(create_app(), host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
