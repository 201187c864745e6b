"""FastAPI HTTP server setup."""

from fastapi import FastAPI, Request, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from config import Settings, settings
from errors import GatewayError
from .dependencies import get_settings

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def configured_collections(config) -> dict:
    return {
        "subscriptions": bool(config.notion_subscriptions_db_id),
        "tasks": bool(config.notion_tasks_db_id),
        "resets": bool(config.notion_dash_reset_db_id)
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting Zion gateway...")

    if not settings.notion_api_key:
        logger.warning("NOTION_API_KEY is not set, Notion calls will fail")
    for name, configured in configured_collections(settings).items():
        if not configured:
            logger.warning(f"No Notion database configured for {name}")

    yield

    logger.info("Zion gateway shut down")


# Create FastAPI app
app = FastAPI(
    title="Zion Gateway",
    description="REST gateway over the Notion databases behind the Zion dashboard",
    version=VERSION,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    """Configuration and validation errors carry their own status and message."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors with a fixed message."""
    logger.warning(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": "Invalid request body."})


# Import and include routers
from .endpoints import router
from .chat_endpoints import router as chat_router

app.include_router(router, prefix="/api/notion")
app.include_router(chat_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Zion Gateway",
        "version": VERSION,
        "status": "running"
    }


@app.get("/health")
async def health(config: Settings = Depends(get_settings)):
    """Health check endpoint. Does not call Notion."""
    return {
        "status": "healthy",
        "collections": configured_collections(config)
    }
