# =============================================================================
# core/itinerary.py  —  Itinerary Generation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a list of destination IDs plus a trip length and pace into a
#   day-by-day plan.  The output is fully DETERMINISTIC: same inputs, same
#   itinerary, every time.  No randomness, no clock (unless you ask for a
#   created_at timestamp), no I/O.
#
# THE ALGORITHM (one day at a time):
#
#   1. Resolve the IDs.  Unknown IDs are dropped; if none survive we raise
#      NoValidDestinationsError.
#
#   2. Pace sets how full each day is:
#
#        pace      activities/day   hours/activity
#        relaxed         2                4
#        moderate        3                3          ← also the fallback
#        packed          4                2
#
#   3. A cursor walks the resolved destinations.  Each day:
#        - activity i takes theme destination.activities[i % len(activities)]
#        - i=0 is morning, i=1 afternoon, everything after that evening
#        - each activity costs round(average_daily_cost * 0.3)
#        - the DAY costs average_daily_cost (activity costs are not summed)
#        - day 1 gets an "arrival day" note
#
#   4. After day N, move to the next destination only when
#        N % destination.average_stay_days == 0
#      and we are not already on the last one.  Once on the last destination
#      we stay there for however many days are left.  No wraparound.
#
# WHAT DOESN'T AFFECT THE PLAN:
#   interests and budget_per_day ride along in the preferences for the
#   presentation layer.  start_date only adds a calendar date to each day.
# =============================================================================

from datetime import date, datetime, timedelta, timezone
import math
from typing import Iterable, Optional, Sequence

from core.destinations import get_destinations
from core.models import Activity, Destination, Itinerary, ItineraryDay, ItineraryPreferences

DEFAULT_PACE = "moderate"

_ACTIVITIES_PER_DAY = {"relaxed": 2, "moderate": 3, "packed": 4}
_HOURS_PER_ACTIVITY = {"relaxed": 4, "moderate": 3, "packed": 2}

# Share of the daily budget quoted as the price of a single activity.
ACTIVITY_COST_RATIO = 0.3

ARRIVAL_NOTE = "Arrival day - take it easy and settle in"

_TIME_SLOTS = ("morning", "afternoon")
_LATE_SLOT = "evening"

# The kind of activity a destination mostly offers, by destination type.
_ACTIVITY_TYPE_BY_DESTINATION = {
    "beach": "relaxation",
    "mountain": "adventure",
    "city": "sightseeing",
    "cultural": "cultural",
    "adventure": "adventure",
}


class NoValidDestinationsError(Exception):
    """Raised when none of the requested destination IDs exist in the catalog."""

    def __init__(self, destination_ids: Sequence[str]):
        self.destination_ids = list(destination_ids)
        super().__init__(
            f"None of the requested destinations were found: {self.destination_ids}"
        )


def build_itinerary(
    destination_ids: Sequence[str],
    duration: int,
    pace: str = DEFAULT_PACE,
    interests: Iterable[str] = (),
    budget_per_day: Optional[float] = None,
    start_date: Optional[date] = None,
    catalog: Optional[Sequence[Destination]] = None,
    now: Optional[datetime] = None,
) -> Itinerary:
    """Build a day-by-day itinerary across one or more destinations.

    Args:
        destination_ids: Catalog IDs in the order they should be visited.
            Unknown IDs are skipped.
        duration: Total number of days.  Zero or negative produces an empty
            plan with zero cost.
        pace: "relaxed", "moderate" or "packed".  Anything else is treated
            as "moderate".
        interests: Traveler interests, recorded on the itinerary only.
        budget_per_day: Optional daily budget, recorded on the itinerary only.
        start_date: When given, each day is stamped with its calendar date.
        catalog: Alternative catalog to resolve IDs against.
        now: Timestamp for created_at.  Defaults to the current UTC time.

    Returns:
        The complete Itinerary.

    Raises:
        NoValidDestinationsError: if no destination ID resolves.
    """
    destinations = get_destinations(destination_ids, catalog)
    if not destinations:
        raise NoValidDestinationsError(destination_ids)

    activities_per_day = _ACTIVITIES_PER_DAY.get(pace, _ACTIVITIES_PER_DAY[DEFAULT_PACE])
    hours_per_activity = _HOURS_PER_ACTIVITY.get(pace, _HOURS_PER_ACTIVITY[DEFAULT_PACE])

    days: list[ItineraryDay] = []
    total_cost = 0
    cursor = 0

    for day_num in range(1, duration + 1):
        destination = destinations[cursor]

        activities = [
            _make_activity(destination, day_num, i, hours_per_activity)
            for i in range(activities_per_day)
        ]
        day = ItineraryDay(
            day=day_num,
            destination_id=destination.id,
            activities=activities,
            total_cost=destination.average_daily_cost,
            date=_date_for_day(start_date, day_num),
            notes=ARRIVAL_NOTE if day_num == 1 else None,
        )
        days.append(day)
        total_cost += day.total_cost

        if day_num % destination.average_stay_days == 0 and cursor < len(destinations) - 1:
            cursor += 1

    resolved_ids = [dest.id for dest in destinations]
    created = now if now is not None else datetime.now(timezone.utc)

    return Itinerary(
        id=f"itinerary-{'-'.join(resolved_ids)}-{duration}d",
        title=f"{duration}-Day Trip: {' & '.join(dest.name for dest in destinations)}",
        destinations=resolved_ids,
        duration=duration,
        days=days,
        total_cost=total_cost,
        preferences=ItineraryPreferences(
            pace=pace,
            interests=list(interests),
            budget_per_day=budget_per_day,
            start_date=start_date,
        ),
        created_at=created.isoformat(),
    )


def activity_cost(destination: Destination) -> int:
    """Price of one activity: 30% of the daily cost, halves rounded up."""
    return round_half_up(destination.average_daily_cost * ACTIVITY_COST_RATIO)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (22.5 → 23).

    The built-in round() does banker's rounding (22.5 → 22), which would
    quote different activity prices than the rest of the planner.
    """
    return int(math.floor(value + 0.5))


def days_over_budget(itinerary: Itinerary) -> list[int]:
    """Day numbers whose cost exceeds the traveler's daily budget, if one was set."""
    budget = itinerary.preferences.budget_per_day
    if budget is None:
        return []
    return [day.day for day in itinerary.days if day.total_cost > budget]


def _make_activity(
    destination: Destination,
    day_num: int,
    index: int,
    hours: int,
) -> Activity:
    """Build activity number `index` (0-based) of a day at `destination`."""
    theme = destination.activities[index % len(destination.activities)]
    return Activity(
        id=f"day{day_num}-activity{index + 1}",
        name=theme,
        description=f"{theme} in {destination.name}",
        duration_hours=hours,
        type=_ACTIVITY_TYPE_BY_DESTINATION.get(destination.type, "sightseeing"),
        cost=activity_cost(destination),
        time_of_day=_TIME_SLOTS[index] if index < len(_TIME_SLOTS) else _LATE_SLOT,
    )


def _date_for_day(start_date: Optional[date], day_num: int) -> Optional[str]:
    if start_date is None:
        return None
    return (start_date + timedelta(days=day_num - 1)).isoformat()
