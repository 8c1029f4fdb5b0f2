# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the travel planner)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the planner: catalog destinations, search criteria, and the
# itineraries we generate from them.
#
# TWO KINDS OF MODEL:
#   - Reference data (Destination) is FROZEN.  The catalog is loaded once at
#     import and never changes, so its records are immutable and their
#     sequences are tuples.  Any number of concurrent callers can share them.
#   - Derived data (Activity, ItineraryDay, Itinerary) is built fresh for
#     every request and thrown away afterwards.  Nothing is persisted.
#
# The category fields (type, climate, budget level, pace, ...) are plain
# strings constrained by the Literal aliases below.  They travel over MCP as
# JSON strings, so keeping them as str means asdict() output is ready to go.
# =============================================================================

from dataclasses import dataclass, field
from typing import Literal, Optional
import datetime

DestinationType = Literal["beach", "mountain", "city", "cultural", "adventure"]
ClimateType = Literal["tropical", "temperate", "cold", "arid"]
BudgetLevel = Literal["low", "medium", "high"]
Pace = Literal["relaxed", "moderate", "packed"]
TimeOfDay = Literal["morning", "afternoon", "evening"]
ActivityType = Literal["sightseeing", "dining", "adventure", "relaxation", "cultural"]


# -----------------------------------------------------------------------------
# Destination — one entry in the reference catalog
# -----------------------------------------------------------------------------
# Everything search filters on and everything the itinerary builder needs
# lives here.  Two fields are load-bearing for the builder:
#   - activities        → indexed modulo its length, so it must be non-empty
#   - average_stay_days → used as a modulus when advancing between
#                         destinations, so it must be >= 1
# Both are checked by core.destinations.validate_catalog at import time.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Destination:
    """A travel destination from the reference catalog."""

    id: str                            # "kyoto", unique catalog key
    name: str                          # "Kyoto"
    country: str                       # "Japan"
    type: DestinationType
    description: str
    climate: ClimateType

    # --- Cost ---
    budget_level: BudgetLevel
    average_daily_cost: float          # USD per day, flat per-day cost model

    # --- Ratings & popularity ---
    rating: float                      # 1.0 – 5.0
    popularity_score: int              # 1 – 100, drives search ranking

    # --- Details ---
    best_time_to_visit: tuple[str, ...] = ()
    top_attractions: tuple[str, ...] = ()
    activities: tuple[str, ...] = ()   # Itinerary themes, cycled per day

    # --- Logistics ---
    average_stay_days: int = 3         # Days before the itinerary moves on
    main_airport: str = ""


# -----------------------------------------------------------------------------
# SearchCriteria — one search request
# -----------------------------------------------------------------------------
# Every field is optional.  None means "don't filter on this dimension", so
# SearchCriteria() with no arguments matches the whole catalog.
# -----------------------------------------------------------------------------
@dataclass
class SearchCriteria:
    """Filters for a destination search.  All filters are ANDed together."""

    query: Optional[str] = None        # Free text: name, country or description
    type: Optional[DestinationType] = None
    budget: Optional[BudgetLevel] = None
    climate: Optional[ClimateType] = None
    min_rating: Optional[float] = None


# -----------------------------------------------------------------------------
# ItineraryPreferences — how the traveler wants to travel
# -----------------------------------------------------------------------------
# Only `pace` changes the generated plan.  The rest is carried through so
# the presentation layer can talk about it:
#   - interests      → echoed back, never used for selection
#   - budget_per_day → lets tools warn about days that run over
#   - start_date     → stamps a calendar date on each day
# -----------------------------------------------------------------------------
@dataclass
class ItineraryPreferences:
    """Traveler preferences attached to an itinerary."""

    pace: str = "moderate"
    interests: list[str] = field(default_factory=list)
    budget_per_day: Optional[float] = None
    start_date: Optional[datetime.date] = None


@dataclass
class Activity:
    """One scheduled activity within an itinerary day."""

    id: str                            # "day2-activity1"
    name: str                          # Theme label from Destination.activities
    description: str
    duration_hours: int
    type: ActivityType
    cost: int                          # USD, informational line item only
    time_of_day: TimeOfDay


@dataclass
class ItineraryDay:
    """A single day of an itinerary, spent at one destination."""

    day: int                           # 1-based
    destination_id: str
    activities: list[Activity] = field(default_factory=list)
    total_cost: float = 0              # The destination's average_daily_cost
    date: Optional[str] = None         # ISO date, only when a start date is given
    notes: Optional[str] = None


# -----------------------------------------------------------------------------
# Itinerary — the builder's output
# -----------------------------------------------------------------------------
# NOTE: total_cost is the sum of the DAY totals, and a day total is the flat
# average_daily_cost of the destination.  Activity costs are NOT summed into
# either figure.
# -----------------------------------------------------------------------------
@dataclass
class Itinerary:
    """A complete day-by-day travel plan."""

    id: str
    title: str
    destinations: list[str]            # Resolved destination IDs, in visit order
    duration: int                      # Requested number of days
    days: list[ItineraryDay] = field(default_factory=list)
    total_cost: float = 0
    preferences: ItineraryPreferences = field(default_factory=ItineraryPreferences)
    created_at: str = ""               # ISO timestamp
