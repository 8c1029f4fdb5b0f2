# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration: the chat
# front-end of the travel planner.
#
# ARCHITECTURAL ROLE:
#   The agent receives a traveler's message, decides which planner tools to
#   call (via MCP), and presents the results conversationally.
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the planning logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
#   It never ranks destinations or schedules days itself.
# =============================================================================
