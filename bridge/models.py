"""Request/response models for the bridge API.

A tool result is a list of parts, and each part is tagged with its `kind`:

    {"kind": "text", "text": "..."}
    {"kind": "ui_resource", "uri": "ui://...", "mime_type": "text/html", "content": "..."}

Clients switch on `kind`; nothing is ever encoded inside a text field.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class TextPart(BaseModel):
    """Plain text (or JSON text) returned by a tool."""

    kind: Literal["text"] = "text"
    text: str


class UIResourcePart(BaseModel):
    """An interactive UI resource returned by a tool."""

    kind: Literal["ui_resource"] = "ui_resource"
    uri: str
    mime_type: str
    content: str


ToolResultPart = Annotated[Union[TextPart, UIResourcePart], Field(discriminator="kind")]


class ToolCallRequest(BaseModel):
    """Body of POST /call-tool."""

    tool: str
    args: dict[str, Any] = Field(default_factory=dict)


class ToolCallResponse(BaseModel):
    """Result of one tool call."""

    tool: str
    is_error: bool = False
    parts: list[ToolResultPart] = Field(default_factory=list)


class ToolInfo(BaseModel):
    name: str
    description: Optional[str] = None
    input_schema: dict[str, Any] = Field(default_factory=dict)


class ToolsResponse(BaseModel):
    tools: list[ToolInfo]


class HealthResponse(BaseModel):
    status: str
    mcp_connected: bool
