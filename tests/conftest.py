"""Shared pytest fixtures."""

from typing import Callable

import pytest

from core.models import Destination


def _make_destination(destination_id: str = "alpha", **overrides) -> Destination:
    fields = dict(
        id=destination_id,
        name=destination_id.title(),
        country="Testland",
        type="city",
        description="A destination used in tests.",
        climate="temperate",
        budget_level="medium",
        average_daily_cost=100,
        rating=4.0,
        popularity_score=50,
        activities=("hike", "eat", "swim"),
        average_stay_days=3,
        main_airport="Test International (TST)",
    )
    fields.update(overrides)
    return Destination(**fields)


@pytest.fixture
def make_destination() -> Callable[..., Destination]:
    """Factory for Destination records with sensible defaults.

    Usage:
        dest = make_destination("alpha", average_stay_days=2)
    """
    return _make_destination
