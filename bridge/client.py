"""Client for the MCP tool server, owned by the bridge application.

The bridge creates exactly one ToolServerClient, connects it while the
application starts up, and hands it to request handlers through a FastAPI
dependency.  Until `connect()` has finished, every call raises
ToolServerNotConnectedError.  Any other failure talking to the tool server
surfaces as ToolServerError.
"""

import logging
from contextlib import AsyncExitStack
from typing import Any, Optional

from fastmcp import Client
from fastmcp.client.transports import StdioTransport
from mcp.types import EmbeddedResource, TextContent

from bridge.models import TextPart, ToolCallResponse, ToolInfo, UIResourcePart

logger = logging.getLogger(__name__)


class ToolServerError(Exception):
    """The tool server failed to handle a request."""


class ToolServerNotConnectedError(ToolServerError):
    """A request arrived before the tool server connection was established."""

    def __init__(self):
        super().__init__("Tool server not connected")


class ToolServerClient:
    """Owns the MCP connection to the tool server.

    Args:
        transport: Anything fastmcp.Client accepts: a transport, or a
            FastMCP server instance for an in-process connection.  Use
            `ToolServerClient.stdio(...)` to spawn the server as a subprocess.
    """

    def __init__(self, transport: Any):
        self._transport = transport
        self._client: Optional[Client] = None
        self._stack: Optional[AsyncExitStack] = None

    @classmethod
    def stdio(cls, command: str, args: list[str], cwd: Optional[str] = None) -> "ToolServerClient":
        """A client that runs `command args...` and talks MCP over its stdio."""
        return cls(StdioTransport(command=command, args=args, cwd=cwd))

    @property
    def connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Open the MCP session (spawning the tool server for stdio)."""
        if self._client is not None:
            return

        logger.info("Connecting to tool server: %r", self._transport)

        stack = AsyncExitStack()
        client = Client(self._transport)
        try:
            await stack.enter_async_context(client)
        except BaseException:
            await stack.aclose()
            raise

        self._stack = stack
        self._client = client

        tools = await client.list_tools()
        logger.info("Connected to tool server. Available tools: %s",
                    ", ".join(tool.name for tool in tools))

    async def close(self) -> None:
        """Close the MCP session and stop the subprocess."""
        stack, self._stack, self._client = self._stack, None, None
        if stack is not None:
            await stack.aclose()
            logger.info("Tool server connection closed")

    async def list_tools(self) -> list[ToolInfo]:
        client = self._require_client()
        try:
            tools = await client.list_tools()
        except Exception as exc:
            raise _failure("list_tools", exc) from exc
        return [
            ToolInfo(name=tool.name, description=tool.description, input_schema=tool.inputSchema)
            for tool in tools
        ]

    async def call_tool(self, name: str, args: dict[str, Any]) -> ToolCallResponse:
        """Call one tool and convert its MCP content blocks into tagged parts."""
        client = self._require_client()
        try:
            result = await client.call_tool_mcp(name, args)
        except Exception as exc:
            raise _failure(f"call_tool {name}", exc) from exc

        parts = []
        for block in result.content:
            part = content_to_part(block)
            if part is None:
                logger.warning("Dropping unsupported content block of type %r from %s",
                               getattr(block, "type", None), name)
                continue
            parts.append(part)

        return ToolCallResponse(tool=name, is_error=bool(result.isError), parts=parts)

    def _require_client(self) -> Client:
        if self._client is None:
            raise ToolServerNotConnectedError()
        return self._client


def _failure(operation: str, exc: Exception) -> ToolServerError:
    # Transport errors such as anyio.ClosedResourceError carry no message.
    message = str(exc) or f"{type(exc).__name__} during {operation}"
    logger.error("Tool server %s failed: %s", operation, message)
    return ToolServerError(message)


def content_to_part(block) -> TextPart | UIResourcePart | None:
    """Map one MCP content block onto a bridge result part.

    Text blocks become TextPart, embedded resources become UIResourcePart.
    Other content types (images, audio, links) are not produced by the
    planner's tools and map to None.
    """
    if isinstance(block, TextContent):
        return TextPart(text=block.text)
    if isinstance(block, EmbeddedResource):
        resource = block.resource
        content = getattr(resource, "text", None)
        if content is None:
            content = getattr(resource, "blob", "")
        return UIResourcePart(
            uri=str(resource.uri),
            mime_type=resource.mimeType or "",
            content=content,
        )
    return None
