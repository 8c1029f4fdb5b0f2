# =============================================================================
# bridge/__init__.py
# =============================================================================
# HTTP front door for browser clients.
#
# Browsers can't speak MCP over stdio, so this package runs a small FastAPI
# app that spawns the tool server (tools/mcp_server.py) as a subprocess and
# translates:
#
#     POST /call-tool   →  MCP tools/call
#     GET  /tools       →  MCP tools/list
#     GET  /health      →  is the tool server connected?
#
# The bridge owns ONE ToolServerClient.  It is created with the app,
# connected before the app serves anything, and injected into handlers.
# =============================================================================
