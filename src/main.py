#!/usr/bin/env python3
"""Main entry point for the Zion gateway."""

import logging
import sys
from pathlib import Path
import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from config import settings

logger = logging.getLogger(__name__)


def configure_logging():
    """Configure root logging from settings."""
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def run_http_server():
    """Run the REST gateway only."""
    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "api.http_server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )


def run_combined_server():
    """Run the REST gateway with the MCP view mounted at /llm/mcp."""
    logger.info(f"Starting HTTP + MCP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "server:final_app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Zion Notion gateway")
    parser.add_argument(
        "--mode",
        choices=["http", "both"],
        default="http",
        help="Server mode to run (default: http)"
    )
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"HTTP server host (default: {settings.api_host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"HTTP server port (default: {settings.api_port})"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Update settings if provided
    if args.host:
        settings.api_host = args.host
    if args.port:
        settings.api_port = args.port

    configure_logging()

    try:
        if args.mode == "both":
            if settings.mcp_enabled:
                run_combined_server()
            else:
                logger.warning("MCP is disabled in settings, running HTTP server only")
                run_http_server()
        else:
            run_http_server()

    except KeyboardInterrupt:
        logger.info("Shutting down Zion gateway...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
