# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines ALL MCP tools the planner exposes.  Each tool is a thin wrapper
#   around a core/ function: it validates the boundary inputs, calls the
#   core, and formats the result.
#
# TWO FLAVOURS OF EVERY TOOL:
#   - <tool>      → returns a DICT: structured data plus a Markdown summary
#   - <tool>_ui   → returns an EmbeddedResource: an HTML page at a ui:// URI
#                   that a UI-capable client renders instead of text
#
#   Both flavours go through the same core call.
#
# TOOL NAMING CONVENTIONS:
#   - get_*    → Read-only retrieval (idempotent, safe to retry)
#   - search_* → Query with filters (idempotent, safe to retry)
#   - create_* → Builds a NEW itinerary, but nothing is stored, so it is
#                still idempotent and safe to retry
#
# ERRORS:
#   Tools never raise for "your input didn't match anything".  They return an
#   error dict (with the IDs that DO exist) so the agent can recover on its
#   own.  UI tools return a short text message in the same situations.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) As a subprocess of the bridge or the agent, via stdio transport
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from typing import Optional
from urllib.parse import quote

from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.destinations import get_destination, list_destination_ids
from core.itinerary import (
    DEFAULT_PACE,
    NoValidDestinationsError,
    build_itinerary,
    days_over_budget,
)
from core.models import (
    BudgetLevel,
    ClimateType,
    Destination,
    DestinationType,
    Itinerary,
    SearchCriteria,
)
from core.search import search_destinations as run_search
from tools.rendering import (
    destination_html,
    destination_markdown,
    hello_html,
    itinerary_html,
    itinerary_markdown,
    search_html,
    search_markdown,
    ui_resource,
)

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# Log lines on stdout would corrupt the JSON-RPC stream.
#
# Colours make tool calls easy to scan in a terminal:
#   CYAN   → incoming requests (tool name + parameters)
#   GREEN  → responses
#   YELLOW → intermediate status
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


def _log_ui_response(tool_name: str, path: str, html: str):
    """Wrap `html` as a UI resource, log its URI and size in GREEN, return it."""
    resource = ui_resource(path, html)
    logging.info(f"{_GREEN}  ← {tool_name} response: {resource.resource.uri} ({len(html)} bytes){_RESET}")
    return resource


# Search results are capped so one broad query can't flood the agent's
# context.  `count` still reports the full number of matches.
_MAX_SEARCH_RESULTS = 10


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("travel-planner")


# =============================================================================
# TOOL 1: hello_world / hello_world_ui
# =============================================================================
# A connectivity check.  If these work, the transport works, and a UI-capable
# client can see the difference between a text and a UI response.
# =============================================================================
@mcp.tool()
def hello_world(name: str) -> dict:
    """Return a plain-text greeting.  Useful to check the server is reachable.

    Args:
        name: Name to greet.
    """
    _log_request("hello_world", name=name)
    return _log_response("hello_world", {
        "greeting": f"Hello, {name}! This is a plain text response from the travel planner.",
    })


@mcp.tool()
def hello_world_ui(name: str):
    """Return an interactive greeting card (HTML UI resource).

    Args:
        name: Name to greet.
    """
    _log_request("hello_world_ui", name=name)
    return _log_ui_response("hello_world_ui", f"hello/{quote(name, safe='')}", hello_html(name))


# =============================================================================
# TOOL 2: search_destinations / search_destinations_ui
# =============================================================================
@mcp.tool()
def search_destinations(
    query: Optional[str] = None,
    type: Optional[DestinationType] = None,
    budget: Optional[BudgetLevel] = None,
    climate: Optional[ClimateType] = None,
    min_rating: Optional[float] = None,
) -> dict:
    """Search the destination catalog.  All filters are optional and combined with AND.

    WHEN TO CALL THIS: When the traveler hasn't picked a destination yet, or
    describes what they want ("a cheap beach somewhere warm").  Use the IDs
    from the results for get_destination_details and create_itinerary.

    Args:
        query: Free text matched (case-insensitively) against destination
               name, country and description.  e.g., "japan", "temple".
        type: One of "beach", "mountain", "city", "cultural", "adventure".
        budget: One of "low", "medium", "high".
        climate: One of "tropical", "temperate", "cold", "arid".
        min_rating: Minimum rating from 1 to 5 (e.g., 4.5).

    Returns:
        A dict with:
          - count: Total number of matches
          - criteria: The filters that were applied
          - summary: Markdown list of the matches (or a "no matches" note)
          - destinations: Up to 10 matches, most popular first.  Each has
            id, name, country, type, climate, budget_level,
            average_daily_cost, rating, popularity_score
    """
    _log_request("search_destinations", query=query, type=type, budget=budget,
                 climate=climate, min_rating=min_rating)

    criteria = SearchCriteria(query=query, type=type, budget=budget,
                              climate=climate, min_rating=min_rating)
    results = run_search(criteria)
    _log_status(f"Found {len(results)} matching destinations")

    shown = results[:_MAX_SEARCH_RESULTS]
    return _log_response("search_destinations", {
        "count": len(results),
        "criteria": {k: v for k, v in asdict(criteria).items() if v is not None},
        "summary": search_markdown(shown),
        "destinations": [_compact(dest) for dest in shown],
    })


@mcp.tool()
def search_destinations_ui(
    query: Optional[str] = None,
    type: Optional[DestinationType] = None,
    budget: Optional[BudgetLevel] = None,
    climate: Optional[ClimateType] = None,
    min_rating: Optional[float] = None,
):
    """Search the destination catalog and show the results as interactive cards.

    Takes the same filters as search_destinations.  Returns an HTML UI
    resource instead of data; use search_destinations if you need to reason
    over the results.
    """
    _log_request("search_destinations_ui", query=query, type=type, budget=budget,
                 climate=climate, min_rating=min_rating)

    results = run_search(SearchCriteria(query=query, type=type, budget=budget,
                                        climate=climate, min_rating=min_rating))
    _log_status(f"Found {len(results)} matching destinations")
    return _log_ui_response("search_destinations_ui", "search",
                            search_html(results[:_MAX_SEARCH_RESULTS]))


# =============================================================================
# TOOL 3: get_destination_details / get_destination_details_ui
# =============================================================================
@mcp.tool()
def get_destination_details(destination_id: str) -> dict:
    """Get everything the catalog knows about one destination.

    WHEN TO CALL THIS: After a search, when the traveler wants to know more
    about a specific place (attractions, best season, typical stay, airport).

    Args:
        destination_id: The destination's ID from search results (e.g., "kyoto").

    Returns:
        The full destination record plus a Markdown `summary`.
        Returns an error with the list of valid IDs if the ID is unknown.
    """
    _log_request("get_destination_details", destination_id=destination_id)

    dest = get_destination(destination_id)
    if dest is None:
        _log_status("Destination not found")
        return _log_response("get_destination_details", _not_found(destination_id))

    _log_status(f"Found {dest.name}, {dest.country}")
    return _log_response("get_destination_details", {
        **asdict(dest),
        "summary": destination_markdown(dest),
    })


@mcp.tool()
def get_destination_details_ui(destination_id: str):
    """Show one destination as an interactive detail card (HTML UI resource).

    Args:
        destination_id: The destination's ID from search results (e.g., "kyoto").
    """
    _log_request("get_destination_details_ui", destination_id=destination_id)

    dest = get_destination(destination_id)
    if dest is None:
        _log_status("Destination not found")
        return _error_text(_not_found(destination_id))

    return _log_ui_response("get_destination_details_ui", f"destination/{dest.id}",
                            destination_html(dest))


# =============================================================================
# TOOL 4: create_itinerary / create_itinerary_ui
# =============================================================================
# The only tool with real planning logic behind it (core/itinerary.py).
# The UI flavour calls exactly the same builder.
# =============================================================================
@mcp.tool()
def create_itinerary(
    destination_ids: list[str],
    duration: int,
    pace: str = DEFAULT_PACE,
    interests: Optional[list[str]] = None,
    budget_per_day: Optional[float] = None,
    start_date: Optional[str] = None,
) -> dict:
    """Create a day-by-day itinerary across one or more destinations.

    WHEN TO CALL THIS: Once the traveler has chosen destinations (by ID) and
    a trip length.  Destinations are visited in the order given; the plan
    moves on after each destination's typical stay length.

    Args:
        destination_ids: Destination IDs in visit order (e.g., ["kyoto", "bali"]).
                         Unknown IDs are skipped.
        duration: Total number of days.
        pace: "relaxed" (2 activities/day), "moderate" (3) or "packed" (4).
        interests: Traveler interests, echoed back for context.
        budget_per_day: Optional daily budget in USD.  Days that cost more
                        are listed in `budget_warning`.
        start_date: Optional first day of the trip, ISO format
                    (e.g., "2025-07-10").  Adds a date to every day.

    Returns:
        The itinerary: id, title, destinations, duration, days (each with
        activities, total_cost, date, notes), total_cost, preferences,
        created_at, plus a Markdown `summary`.
        Returns an error with the list of valid IDs if no ID is known.
    """
    _log_request("create_itinerary", destination_ids=destination_ids, duration=duration,
                 pace=pace, interests=interests, budget_per_day=budget_per_day,
                 start_date=start_date)

    planned = _plan(destination_ids, duration, pace, interests, budget_per_day, start_date)
    if isinstance(planned, dict):
        return _log_response("create_itinerary", planned)

    itinerary = planned
    result = _itinerary_dict(itinerary)
    result["summary"] = itinerary_markdown(itinerary, _names(itinerary))

    over = days_over_budget(itinerary)
    if over:
        label = "Day" if len(over) == 1 else "Days"
        verb = "exceeds" if len(over) == 1 else "exceed"
        result["budget_warning"] = (
            f"{label} {', '.join(str(d) for d in over)} {verb} your "
            f"${budget_per_day:g}/day budget."
        )
    return _log_response("create_itinerary", result)


@mcp.tool()
def create_itinerary_ui(
    destination_ids: list[str],
    duration: int,
    pace: str = DEFAULT_PACE,
    interests: Optional[list[str]] = None,
    budget_per_day: Optional[float] = None,
    start_date: Optional[str] = None,
):
    """Create an itinerary and show it as an interactive day-by-day view.

    Takes the same arguments as create_itinerary.  Returns an HTML UI
    resource instead of data.
    """
    _log_request("create_itinerary_ui", destination_ids=destination_ids, duration=duration,
                 pace=pace, interests=interests, budget_per_day=budget_per_day,
                 start_date=start_date)

    planned = _plan(destination_ids, duration, pace, interests, budget_per_day, start_date)
    if isinstance(planned, dict):
        return _error_text(planned)

    return _log_ui_response("create_itinerary_ui", f"itinerary/{planned.id}",
                            itinerary_html(planned, _names(planned)))


# =============================================================================
# Helpers
# =============================================================================

def _plan(
    destination_ids: list[str],
    duration: int,
    pace: str,
    interests: Optional[list[str]],
    budget_per_day: Optional[float],
    start_date: Optional[str],
) -> Itinerary | dict:
    """Run the itinerary builder, or return an error dict the tool can hand back."""
    parsed_start = None
    if start_date:
        try:
            parsed_start = date.fromisoformat(start_date)
        except ValueError:
            _log_status(f"Bad start_date {start_date!r}")
            return {
                "error": f"Invalid start_date '{start_date}'.",
                "hint": "Use ISO format, e.g. 2025-07-10.",
            }

    try:
        itinerary = build_itinerary(
            destination_ids,
            duration,
            pace=pace,
            interests=interests or [],
            budget_per_day=budget_per_day,
            start_date=parsed_start,
        )
    except NoValidDestinationsError:
        _log_status("No valid destinations")
        return {
            "error": "No valid destinations found.",
            "requested_ids": list(destination_ids),
            "available_ids": list_destination_ids(),
            "hint": "Use destination IDs from search_destinations.",
        }

    _log_status(f"Planned {len(itinerary.days)} days across "
                f"{len(itinerary.destinations)} destination(s), total ${itinerary.total_cost}")
    return itinerary


def _itinerary_dict(itinerary: Itinerary) -> dict:
    """asdict() with the start date turned into an ISO string for JSON."""
    result = asdict(itinerary)
    start = itinerary.preferences.start_date
    result["preferences"]["start_date"] = start.isoformat() if start else None
    return result


def _names(itinerary: Itinerary) -> dict[str, str]:
    names = {}
    for destination_id in itinerary.destinations:
        dest = get_destination(destination_id)
        if dest is not None:
            names[destination_id] = dest.name
    return names


def _compact(dest: Destination) -> dict:
    """The fields a search result needs.  Details are one get_destination_details away."""
    return {
        "id": dest.id,
        "name": dest.name,
        "country": dest.country,
        "type": dest.type,
        "climate": dest.climate,
        "budget_level": dest.budget_level,
        "average_daily_cost": dest.average_daily_cost,
        "rating": dest.rating,
        "popularity_score": dest.popularity_score,
    }


def _not_found(destination_id: str) -> dict:
    return {
        "error": f"Destination '{destination_id}' not found.",
        "available_ids": list_destination_ids(),
        "hint": "Try one of the available destination IDs listed above.",
    }


def _error_text(error: dict) -> str:
    """One-line text form of an error dict, for the UI tools."""
    text = error["error"]
    if error.get("available_ids"):
        text += f" Available destination IDs: {', '.join(error['available_ids'])}."
    if error.get("hint"):
        text += f" {error['hint']}"
    return text


def main() -> None:
    mcp.run()


# =============================================================================
# Server entry point
# =============================================================================
# When run directly, start the MCP server on stdio.
# =============================================================================
if __name__ == "__main__":
    main()
