# =============================================================================
# agent/planner_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures and creates the Google ADK agent: the chat front-end that
#   receives traveler messages, decides which planner tools to call, and
#   turns their results into a conversation.
#
# HOW IT FITS TOGETHER:
#
#   ┌────────────────────────────────────────────────────────────┐
#   │                     Google ADK Agent                       │
#   │   System prompt  ──▶  LLM (via LiteLlm)  ──▶  MCPToolset     │
#   └────────────────────────────────────────────────────────────┘
#                                                     │ stdio
#                                                     ▼
#                                         ┌──────────────────────┐
#                                         │  tools/mcp_server.py │
#                                         │  search / details /  │
#                                         │  create_itinerary    │
#                                         └──────────────────────┘
#                                                     │
#                                                     ▼
#                                         ┌──────────────────────┐
#                                         │  core/ (pure Python) │
#                                         └──────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess (python -m tools.mcp_server,
#   run from the project root so `core` is importable) and talks to it over
#   stdin/stdout.  Tools are discovered automatically.
#
# MODEL:
#   Any LiteLlm model string works.  The default routes GPT-4o through
#   OpenRouter; set PLANNER_MODEL to switch (e.g. "openrouter/openai/gpt-4o-mini").
#   LiteLlm reads OPENROUTER_API_KEY from the environment.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_travel_planner_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_model_name() -> str:
    """The LiteLlm model string, from PLANNER_MODEL or the default."""
    return os.getenv("PLANNER_MODEL", DEFAULT_MODEL)


def create_agent() -> Agent:
    """Create and configure the travel planner agent.

    The agent itself has NO planning logic.  It has:
      - a system prompt (agent/prompt.py) that defines its behavior
      - a tool connection (tools/mcp_server.py) for everything it knows
      - a model (via LiteLlm) for reasoning

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,            # Same interpreter, same environment
            args=["-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
        ),
    )

    return Agent(
        name="travel_planner",
        model=LiteLlm(model=get_model_name()),
        instruction=get_travel_planner_prompt(),
        tools=[mcp_tools],
    )
