#!/usr/bin/env python3
"""Zion gateway with an MCP view of its routes, using FastMCP."""

import sys
import logging
from pathlib import Path
from contextlib import asynccontextmanager

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from fastapi import FastAPI
from fastmcp import FastMCP
from api.http_server import app, lifespan, VERSION
from config import settings

logger = logging.getLogger(__name__)


# 1. Convert the REST app to MCP tools
logger.info("Converting FastAPI app to MCP...")
mcp = FastMCP.from_fastapi(app, name="Zion Gateway MCP")

# 2. Create MCP's ASGI app
mcp_app = mcp.http_app(path='/mcp')


@asynccontextmanager
async def combined_lifespan(app: FastAPI):
    """Combined lifespan for the gateway and MCP."""
    async with lifespan(app):
        async with mcp_app.lifespan(app):
            yield


# 3. Create the final app with combined lifespan
final_app = FastAPI(
    title="Zion Gateway Service",
    description="Notion gateway with both HTTP API and MCP support",
    version=VERSION,
    lifespan=combined_lifespan
)

# Mount the MCP app first, the REST app catches everything else
final_app.mount("/llm", mcp_app)
final_app.mount("/", app)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        final_app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower()
    )
