# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP clients (the bridge, the
#   agent) and the core planning logic.  Each tool:
#     1. Calls a pure function from core/
#     2. Serializes the result (dataclasses → dicts for JSON)
#     3. Or renders it as an HTML UI resource (rendering.py)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain planning logic (that's in core/)
#   - They do NOT know who is calling them (bridge, agent, Claude Desktop)
# =============================================================================
