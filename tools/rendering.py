# =============================================================================
# tools/rendering.py  —  Presentation helpers for the MCP tools
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Turns core/ results into the two shapes the tools hand back:
#     - Markdown summaries, embedded in the dicts the plain tools return
#     - Small HTML pages, wrapped as MCP EmbeddedResource for the *_ui tools
#
# UI RESULTS:
#   A UI result is its own MCP content type ("resource", mime "text/html")
#   at a ui://travel-planner/... URI.  Clients tell text and UI apart by the
#   content type.  Text blocks carry no markers.
#
# All dynamic text is HTML-escaped before it lands in a page.
# =============================================================================

from html import escape
from typing import Iterable

from mcp.types import EmbeddedResource, TextResourceContents

from core.models import Destination, Itinerary

UI_URI_PREFIX = "ui://travel-planner"
UI_MIME_TYPE = "text/html"

_STYLE = """
body { font-family: system-ui, -apple-system, sans-serif; margin: 0; padding: 20px;
       background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); min-height: 100vh; }
.card { background: white; border-radius: 12px; padding: 20px; margin: 0 auto 16px;
        box-shadow: 0 8px 16px rgba(0,0,0,0.1); max-width: 640px; }
h1, h2 { margin: 0 0 8px 0; color: #333; }
p, li { color: #555; line-height: 1.5; }
.meta { color: #888; font-size: 14px; }
.tag { display: inline-block; background: #eef; color: #447; border-radius: 4px;
       padding: 2px 8px; margin-right: 4px; font-size: 13px; }
button { background: #667eea; color: white; border: none; padding: 10px 20px;
         border-radius: 6px; font-size: 15px; cursor: pointer; }
"""


def ui_resource(path: str, html: str) -> EmbeddedResource:
    """Wrap an HTML page as an MCP embedded resource at ui://travel-planner/<path>."""
    return EmbeddedResource(
        type="resource",
        resource=TextResourceContents(
            uri=f"{UI_URI_PREFIX}/{path}",
            mimeType=UI_MIME_TYPE,
            text=html,
        ),
    )


# =============================================================================
# Markdown
# =============================================================================

def destination_markdown(dest: Destination) -> str:
    """Full Markdown description of one destination."""
    lines = [
        f"## {dest.name}, {dest.country}",
        "",
        dest.description,
        "",
        f"- **Type:** {dest.type}",
        f"- **Climate:** {dest.climate}",
        f"- **Budget:** {dest.budget_level} (~${_money(dest.average_daily_cost)}/day)",
        f"- **Rating:** {dest.rating}/5 (popularity {dest.popularity_score}/100)",
        f"- **Best time to visit:** {', '.join(dest.best_time_to_visit)}",
        f"- **Top attractions:** {', '.join(dest.top_attractions)}",
        f"- **Activities:** {', '.join(dest.activities)}",
        f"- **Typical stay:** {dest.average_stay_days} days",
        f"- **Fly into:** {dest.main_airport}",
    ]
    return "\n".join(lines)


def search_markdown(results: list[Destination]) -> str:
    """One line per destination, or a "no matches" message."""
    if not results:
        return "No destinations match your criteria. Try loosening a filter."

    lines = [f"Found {len(results)} destination(s):", ""]
    for i, dest in enumerate(results, start=1):
        lines.append(
            f"{i}. **{dest.name}**, {dest.country} ({dest.id}) — {dest.type}, "
            f"{dest.climate}, {dest.budget_level} budget, "
            f"rated {dest.rating}/5, ~${_money(dest.average_daily_cost)}/day"
        )
    return "\n".join(lines)


def itinerary_markdown(itinerary: Itinerary, names: dict[str, str]) -> str:
    """Day-by-day Markdown rendering of an itinerary.

    `names` maps destination IDs to display names.
    """
    lines = [
        f"# {itinerary.title}",
        "",
        f"Pace: {itinerary.preferences.pace} · "
        f"Estimated total: ${_money(itinerary.total_cost)}",
    ]
    if itinerary.preferences.interests:
        lines.append(f"Interests: {', '.join(itinerary.preferences.interests)}")

    for day in itinerary.days:
        heading = f"## Day {day.day} — {names.get(day.destination_id, day.destination_id)}"
        if day.date:
            heading += f" ({day.date})"
        lines += ["", heading]
        if day.notes:
            lines.append(f"_{day.notes}_")
        for activity in day.activities:
            lines.append(
                f"- **{activity.time_of_day.title()}:** {activity.name} "
                f"({activity.duration_hours}h, ~${activity.cost})"
            )
        lines.append(f"- Day cost: ${_money(day.total_cost)}")

    return "\n".join(lines)


# =============================================================================
# HTML
# =============================================================================

def hello_html(name: str) -> str:
    body = (
        '<div class="card" style="text-align:center">'
        f"<h1>Hello, {escape(name)}!</h1>"
        "<p>This greeting is an <strong>interactive UI</strong> resource "
        "served by the travel planner.</p>"
        "<button onclick=\"alert('This button is interactive!')\">Click Me!</button>"
        "</div>"
    )
    return _page(f"Hello, {name}", body)


def search_html(results: list[Destination]) -> str:
    if not results:
        body = '<div class="card"><h2>No matches</h2><p>Try loosening a filter.</p></div>'
        return _page("Destination search", body)

    cards = [
        '<div class="card">'
        f"<h2>{escape(dest.name)}, {escape(dest.country)}</h2>"
        f"<p>{escape(dest.description)}</p>"
        f"{_tags([dest.type, dest.climate, f'{dest.budget_level} budget'])}"
        f'<p class="meta">Rated {dest.rating}/5 · ~${_money(dest.average_daily_cost)}/day'
        f" · ID: {escape(dest.id)}</p>"
        "</div>"
        for dest in results
    ]
    return _page("Destination search", "".join(cards))


def destination_html(dest: Destination) -> str:
    attractions = "".join(f"<li>{escape(a)}</li>" for a in dest.top_attractions)
    body = (
        '<div class="card">'
        f"<h1>{escape(dest.name)}</h1>"
        f'<p class="meta">{escape(dest.country)} · {escape(dest.main_airport)}</p>'
        f"<p>{escape(dest.description)}</p>"
        f"{_tags([dest.type, dest.climate, f'{dest.budget_level} budget'])}"
        f"<h2>Top attractions</h2><ul>{attractions}</ul>"
        f"<h2>Things to do</h2>{_tags(dest.activities)}"
        f'<p class="meta">Best time: {escape(", ".join(dest.best_time_to_visit))} · '
        f"Typical stay: {dest.average_stay_days} days · "
        f"~${_money(dest.average_daily_cost)}/day · Rated {dest.rating}/5</p>"
        "</div>"
    )
    return _page(dest.name, body)


def itinerary_html(itinerary: Itinerary, names: dict[str, str]) -> str:
    cards = [
        '<div class="card">'
        f"<h1>{escape(itinerary.title)}</h1>"
        f'<p class="meta">Pace: {escape(itinerary.preferences.pace)} · '
        f"Estimated total: ${_money(itinerary.total_cost)}</p>"
        "</div>"
    ]
    for day in itinerary.days:
        items = "".join(
            f"<li><strong>{escape(a.time_of_day.title())}:</strong> {escape(a.name)} "
            f"({a.duration_hours}h, ~${a.cost})</li>"
            for a in day.activities
        )
        date = f" · {escape(day.date)}" if day.date else ""
        notes = f"<p><em>{escape(day.notes)}</em></p>" if day.notes else ""
        cards.append(
            '<div class="card">'
            f"<h2>Day {day.day}: {escape(names.get(day.destination_id, day.destination_id))}</h2>"
            f'<p class="meta">Day cost: ${_money(day.total_cost)}{date}</p>'
            f"{notes}<ul>{items}</ul>"
            "</div>"
        )
    return _page(itinerary.title, "".join(cards))


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        f"<title>{escape(title)}</title><style>{_STYLE}</style></head>"
        f"<body>{body}</body></html>"
    )


def _tags(labels: Iterable[str]) -> str:
    return "".join(f'<span class="tag">{escape(label)}</span>' for label in labels)


def _money(amount: float) -> str:
    # 220 → "220", 72.5 → "72.50"
    return f"{amount:.0f}" if float(amount).is_integer() else f"{amount:.2f}"
