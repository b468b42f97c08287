"""Command line entry point for the API and frontend servers."""

import argparse
import sys

from config import settings
from core.logger import logger, setup_logger


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Run the hello API or its frontend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # API on the configured port (default 5000)
  python main.py api

  # Frontend on port 3000, fetching from a different API address
  WEBAPP_API_URL=http://localhost:8000/ python main.py webapp --port 3000
        """
    )

    parser.add_argument(
        "component",
        choices=["api", "webapp"],
        help="Which server to run"
    )

    parser.add_argument(
        "--host",
        type=str,
        help="Bind address (defaults to API_HOST / WEBAPP_HOST)"
    )

    parser.add_argument(
        "--port",
        type=int,
        help="Bind port (defaults to API_PORT / WEBAPP_PORT)"
    )

    return parser


def main(argv=None):
    """Main application function."""
    args = build_parser().parse_args(argv)

    setup_logger(log_level=settings.log_level, log_file=settings.log_file)

    if args.component == "api":
        from app import app
        host = args.host or settings.api_host
        port = args.port if args.port is not None else settings.api_port
    else:
        from webapp.server import app
        host = args.host or settings.webapp_host
        port = args.port if args.port is not None else settings.webapp_port

    logger.info(f"Starting {args.component} on {host}:{port}")
    app.run(host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
