"""FastAPI application that bridges HTTP clients to the MCP tool server."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bridge.client import ToolServerClient, ToolServerError, ToolServerNotConnectedError
from bridge.config import PROJECT_ROOT, get_cors_origins, get_tool_server_command
from bridge.routes import router

logger = logging.getLogger(__name__)


def create_app(tool_client: Optional[ToolServerClient] = None) -> FastAPI:
    """Build the bridge application.

    Args:
        tool_client: The client request handlers will use.  Defaults to one
            that spawns the configured tool server.  It is connected during
            startup, before the first request is served, and closed on
            shutdown.
    """
    if tool_client is None:
        command, args = get_tool_server_command()
        tool_client = ToolServerClient.stdio(command, args, cwd=PROJECT_ROOT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.tool_client = tool_client
        await tool_client.connect()
        try:
            yield
        finally:
            await tool_client.close()

    app = FastAPI(title="Travel Planner Bridge", version="0.1.0", lifespan=lifespan)
    app.state.tool_client = tool_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    @app.exception_handler(ToolServerNotConnectedError)
    async def not_connected(request: Request, exc: ToolServerNotConnectedError) -> JSONResponse:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"error": str(exc)})

    @app.exception_handler(ToolServerError)
    async def tool_server_failed(request: Request, exc: ToolServerError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return app
