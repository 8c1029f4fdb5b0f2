# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the travel planner: the
# destination catalog, search & ranking, and itinerary generation.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, FastAPI, Google ADK, or any
#   other framework.  Every module here is pure Python: import it in a bare
#   REPL with no network and it works.
#
# The tools/ layer wraps these functions as MCP tools and the bridge/ layer
# puts HTTP in front of those, but the planning itself happens here, where
# it can be tested without either.
# =============================================================================
