"""Tests for the agent's system prompt."""

from datetime import date

from agent.prompt import get_travel_planner_prompt


def test_prompt_names_every_planner_tool() -> None:
    prompt = get_travel_planner_prompt()
    for tool in ("search_destinations", "get_destination_details", "create_itinerary"):
        assert tool in prompt


def test_prompt_injects_todays_date() -> None:
    assert date.today().isoformat() in get_travel_planner_prompt()
