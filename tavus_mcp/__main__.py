#!/usr/bin/env python3
"""Entry point for running the Tavus MCP server."""

import asyncio
import logging
import sys

from .config import ConfigError, TavusSettings
from .http_app import run_http_server
from .server import TavusMCPServer

logger = logging.getLogger("tavus-mcp-server")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


async def main(settings: TavusSettings):
    """Main entry point - choose transport based on configuration"""
    server = TavusMCPServer(settings)
    logger.info(f"Available tools: {len(server.get_available_tools())}")

    try:
        if settings.transport == "http":
            await run_http_server(server)
        elif settings.transport == "both":
            await asyncio.gather(server.run_stdio(), run_http_server(server))
        else:  # default to stdio
            await server.run_stdio()
    finally:
        logger.info("Cleaning up Tavus MCP server")
        await server.close()


def run():
    try:
        settings = TavusSettings.from_env()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"Refusing to start: {e}")
        sys.exit(1)

    # stderr only, stdout carries the stdio transport
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT
    )

    try:
        asyncio.run(main(settings))
    except KeyboardInterrupt:
        logger.info("Tavus MCP server stopped")
    sys.exit(0)


if __name__ == "__main__":
    run()
