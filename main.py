# =============================================================================
# main.py  —  Entry Point for the Travel Planner chat agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/planner_agent.py), which spawns
#      the MCP tool server as a subprocess
#   2. Opens an in-memory chat session
#   3. Sends each line you type to the agent
#   4. Shows which tools the agent calls, then its final answer
#
# For the browser-facing HTTP bridge instead, run:  python -m bridge
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load .env (OPENROUTER_API_KEY, PLANNER_MODEL, ...) BEFORE creating the
# agent: LiteLlm reads its API key from the environment when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.planner_agent import create_agent

APP_NAME = "travel_planner"
USER_ID = "demo_user"


async def run_agent():
    """Run the travel planner agent as an interactive console chat."""
    print("=" * 70)
    print("  TRAVEL PLANNER")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    # InMemorySessionService keeps the conversation in RAM: fine for a demo.
    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Tell me what kind of trip you're dreaming of.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Planning...\n")
        print("-" * 70)

        # The runner yields events as the agent works: tool calls, tool
        # results and text.  We show tool calls as they happen and keep the
        # last text part as the answer.
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Planner:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
