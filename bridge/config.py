"""Configuration for the HTTP bridge, read from the environment (.env supported)."""
import os
import sys

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_host():
    """Interface the bridge listens on."""
    return os.getenv("BRIDGE_HOST", "127.0.0.1")


def get_port():
    """Port the bridge listens on."""
    return int(os.getenv("BRIDGE_PORT", 3001))


def get_cors_origins():
    """Allowed CORS origins, from a comma-separated BRIDGE_CORS_ORIGINS."""
    raw = os.getenv("BRIDGE_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_tool_server_command():
    """Command and arguments that start the MCP tool server on stdio.

    Runs `python -m <TOOL_SERVER_MODULE>` from the project root with the
    current interpreter, so the subprocess sees the same environment.
    """
    module = os.getenv("TOOL_SERVER_MODULE", "tools.mcp_server")
    command = os.getenv("TOOL_SERVER_PYTHON", sys.executable)
    return command, ["-m", module]
