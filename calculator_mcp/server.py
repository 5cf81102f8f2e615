#!/usr/bin/env python3
"""
MCP Server Entrypoint

HTTP server that exposes the calculator and weather tools over MCP.
Requests are dispatched by path to one of two framings of the same
tool registry; any other path is answered with 404.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, configure_logging, load_settings
from .registry import ToolRegistry, build_registry
from .transport import SERVER_NAME, SERVER_VERSION, McpHttpTransports

logger = logging.getLogger(__name__)


def create_app(
    registry: Optional[ToolRegistry] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the HTTP application.

    Each call creates its own MCP server and session manager, so the
    returned app can only be started once.
    """
    settings = settings or load_settings()
    registry = registry or build_registry(settings=settings)
    transports = McpHttpTransports(
        registry,
        json_response=settings.json_response,
        stateless=settings.stateless,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info(f"MCP Server starting with {len(registry)} tools")
        for name in registry.names():
            logger.info(f"  - {name}")

        async with transports.run():
            yield

        logger.info("MCP Server shutting down")

    app = FastAPI(
        title=SERVER_NAME,
        version=SERVER_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.registry = registry
    app.state.transports = transports
    app.router.routes.extend(transports.routes())
    # Exact paths only, no trailing-slash redirects
    app.router.redirect_slashes = False

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return PlainTextResponse("Not found", status_code=404)
        return await http_exception_handler(request, exc)

    return app


# ============== Main ==============


def main():
    """Run the MCP server."""
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app(settings=settings)

    logger.info(f"Starting MCP server on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
