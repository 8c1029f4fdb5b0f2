"""HTTP endpoints: call a tool, list tools, health."""

import logging

from fastapi import APIRouter, Depends, Request

from bridge.client import ToolServerClient
from bridge.models import HealthResponse, ToolCallRequest, ToolCallResponse, ToolsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def get_tool_client(request: Request) -> ToolServerClient:
    """Dependency: the tool-server client owned by the running application."""
    return request.app.state.tool_client


@router.post("/call-tool", response_model=ToolCallResponse)
async def call_tool(
    body: ToolCallRequest,
    client: ToolServerClient = Depends(get_tool_client),
) -> ToolCallResponse:
    """Forward one tool call to the tool server.

    Returns:
        The tool's output as a list of tagged parts (text or UI resource).
    """
    logger.info("Calling tool %s with args %s", body.tool, body.args)
    result = await client.call_tool(body.tool, body.args)
    logger.info("Tool %s returned %d part(s)%s", body.tool, len(result.parts),
                " (error)" if result.is_error else "")
    return result


@router.get("/tools", response_model=ToolsResponse)
async def list_tools(client: ToolServerClient = Depends(get_tool_client)) -> ToolsResponse:
    """List the tools the tool server exposes."""
    return ToolsResponse(tools=await client.list_tools())


@router.get("/health", response_model=HealthResponse)
async def health(client: ToolServerClient = Depends(get_tool_client)) -> HealthResponse:
    """Liveness plus whether the tool server connection is up."""
    return HealthResponse(status="ok", mcp_connected=client.connected)
