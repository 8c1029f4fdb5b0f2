# =============================================================================
# core/destinations.py  —  Destination Catalog (storage & lookup)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the reference list of destinations and the two lookups everything
#   else is built on:
#     - get_destination(id)    → one Destination, or None if unknown
#     - get_destinations(ids)  → every ID that resolves, in request order
#
# MOCK DATA:
#   The catalog is hardcoded below.  Callers only ever see get_destination /
#   get_destinations / list_destinations, never _CATALOG itself.
#
# LENIENT MULTI-LOOKUP:
#   get_destinations() silently drops IDs it can't resolve.  A trip request
#   for ["kyoto", "atlantis", "banff"] still plans Kyoto and Banff.  Only when
#   NOTHING resolves does the caller have a problem, and the itinerary
#   builder turns that empty list into NoValidDestinationsError.
#
# IMMUTABILITY:
#   The catalog is a tuple of frozen dataclasses, validated once at import.
#   Nothing creates, edits or deletes entries at runtime.
# =============================================================================

from typing import Iterable, Optional, Sequence

from core.models import Destination


class CatalogError(ValueError):
    """Raised when catalog data violates an invariant the planner relies on."""


# -----------------------------------------------------------------------------
# Reference catalog
# -----------------------------------------------------------------------------
# The entries are chosen to give search something to chew on: every type,
# climate and budget level is represented, and Banff and Cape Town share a
# popularity score so tie ordering is visible.
# -----------------------------------------------------------------------------
_CATALOG: tuple[Destination, ...] = (
    Destination(
        id="bali",
        name="Bali",
        country="Indonesia",
        type="beach",
        description="Tropical island paradise known for its beaches, rice terraces and temples.",
        climate="tropical",
        budget_level="low",
        average_daily_cost=60,
        rating=4.6,
        popularity_score=95,
        best_time_to_visit=("April", "May", "June", "September"),
        top_attractions=("Uluwatu Temple", "Tegallalang Rice Terraces", "Seminyak Beach"),
        activities=("Surfing lesson", "Temple visit", "Balinese cooking class", "Sunset beach walk"),
        average_stay_days=5,
        main_airport="Ngurah Rai International Airport (DPS)",
    ),
    Destination(
        id="paris",
        name="Paris",
        country="France",
        type="city",
        description="The city of light, famous for art, cafes, fashion and the Eiffel Tower.",
        climate="temperate",
        budget_level="high",
        average_daily_cost=220,
        rating=4.7,
        popularity_score=98,
        best_time_to_visit=("April", "May", "June", "September", "October"),
        top_attractions=("Eiffel Tower", "Louvre Museum", "Montmartre"),
        activities=("Museum tour", "Seine river cruise", "Cafe hopping", "Evening cabaret"),
        average_stay_days=4,
        main_airport="Charles de Gaulle Airport (CDG)",
    ),
    Destination(
        id="kyoto",
        name="Kyoto",
        country="Japan",
        type="cultural",
        description="Former imperial capital with thousands of temples, gardens and tea houses.",
        climate="temperate",
        budget_level="medium",
        average_daily_cost=150,
        rating=4.8,
        popularity_score=90,
        best_time_to_visit=("March", "April", "October", "November"),
        top_attractions=("Fushimi Inari Shrine", "Kinkaku-ji", "Arashiyama Bamboo Grove"),
        activities=("Shrine walk", "Tea ceremony", "Gion evening stroll"),
        average_stay_days=3,
        main_airport="Kansai International Airport (KIX)",
    ),
    Destination(
        id="swiss-alps",
        name="Interlaken",
        country="Switzerland",
        type="mountain",
        description="Alpine town between two lakes, gateway to the Jungfrau region.",
        climate="cold",
        budget_level="high",
        average_daily_cost=250,
        rating=4.7,
        popularity_score=85,
        best_time_to_visit=("June", "July", "August", "December", "January"),
        top_attractions=("Jungfraujoch", "Lake Brienz", "Harder Kulm"),
        activities=("Alpine hike", "Paragliding", "Lake cruise", "Fondue dinner"),
        average_stay_days=3,
        main_airport="Zurich Airport (ZRH)",
    ),
    Destination(
        id="banff",
        name="Banff",
        country="Canada",
        type="mountain",
        description="Rocky Mountain national park with turquoise lakes and glaciers.",
        climate="cold",
        budget_level="medium",
        average_daily_cost=180,
        rating=4.7,
        popularity_score=88,
        best_time_to_visit=("June", "July", "August", "September"),
        top_attractions=("Lake Louise", "Moraine Lake", "Banff Gondola"),
        activities=("Glacier hike", "Canoeing", "Hot springs soak"),
        average_stay_days=4,
        main_airport="Calgary International Airport (YYC)",
    ),
    Destination(
        id="cape-town",
        name="Cape Town",
        country="South Africa",
        type="city",
        description="Coastal city beneath Table Mountain with beaches, wineries and wildlife.",
        climate="temperate",
        budget_level="medium",
        average_daily_cost=120,
        rating=4.6,
        popularity_score=88,
        best_time_to_visit=("November", "December", "January", "February", "March"),
        top_attractions=("Table Mountain", "Cape of Good Hope", "Boulders Beach"),
        activities=("Table Mountain cable car", "Winelands tour", "Penguin colony visit", "Waterfront dinner"),
        average_stay_days=4,
        main_airport="Cape Town International Airport (CPT)",
    ),
    Destination(
        id="marrakech",
        name="Marrakech",
        country="Morocco",
        type="cultural",
        description="Ancient walled city of souks, palaces and spice-scented medinas.",
        climate="arid",
        budget_level="low",
        average_daily_cost=70,
        rating=4.4,
        popularity_score=80,
        best_time_to_visit=("March", "April", "May", "October", "November"),
        top_attractions=("Jemaa el-Fnaa", "Majorelle Garden", "Bahia Palace"),
        activities=("Souk shopping", "Hammam spa", "Desert excursion", "Rooftop dinner"),
        average_stay_days=3,
        main_airport="Marrakesh Menara Airport (RAK)",
    ),
    Destination(
        id="queenstown",
        name="Queenstown",
        country="New Zealand",
        type="adventure",
        description="Adventure capital of the world, set on Lake Wakatipu below the Remarkables.",
        climate="temperate",
        budget_level="high",
        average_daily_cost=200,
        rating=4.8,
        popularity_score=82,
        best_time_to_visit=("December", "January", "February", "June", "July"),
        top_attractions=("Milford Sound", "Skyline Gondola", "Kawarau Bridge"),
        activities=("Bungee jumping", "Jet boating", "Milford Sound cruise", "Wine tasting"),
        average_stay_days=4,
        main_airport="Queenstown Airport (ZQN)",
    ),
    Destination(
        id="cusco",
        name="Cusco",
        country="Peru",
        type="adventure",
        description="Andean city of Inca heritage and the starting point for Machu Picchu treks.",
        climate="cold",
        budget_level="low",
        average_daily_cost=55,
        rating=4.5,
        popularity_score=75,
        best_time_to_visit=("May", "June", "July", "August", "September"),
        top_attractions=("Machu Picchu", "Sacsayhuaman", "Rainbow Mountain"),
        activities=("Inca Trail trek", "Sacred Valley tour", "Market visit"),
        average_stay_days=5,
        main_airport="Alejandro Velasco Astete Airport (CUZ)",
    ),
    Destination(
        id="santorini",
        name="Santorini",
        country="Greece",
        type="beach",
        description="Volcanic island of whitewashed villages, caldera views and black sand beaches.",
        climate="arid",
        budget_level="high",
        average_daily_cost=190,
        rating=4.7,
        popularity_score=92,
        best_time_to_visit=("May", "June", "September", "October"),
        top_attractions=("Oia sunset", "Red Beach", "Akrotiri"),
        activities=("Caldera boat tour", "Winery visit", "Beach day", "Sunset dinner in Oia"),
        average_stay_days=3,
        main_airport="Santorini International Airport (JTR)",
    ),
)


def validate_catalog(destinations: Iterable[Destination]) -> None:
    """Check the invariants the search and itinerary code depend on.

    Raises:
        CatalogError: if an ID is duplicated, an entry has no activities,
            a non-positive stay length or cost, or a rating/popularity score
            outside its documented range.
    """
    seen: set[str] = set()
    for dest in destinations:
        if dest.id in seen:
            raise CatalogError(f"Duplicate destination id '{dest.id}'")
        seen.add(dest.id)

        if not dest.activities:
            raise CatalogError(f"Destination '{dest.id}' has no activities")
        if dest.average_stay_days < 1:
            raise CatalogError(
                f"Destination '{dest.id}' has average_stay_days="
                f"{dest.average_stay_days}; must be at least 1"
            )
        if dest.average_daily_cost <= 0:
            raise CatalogError(f"Destination '{dest.id}' must have a positive average_daily_cost")
        if not 1 <= dest.rating <= 5:
            raise CatalogError(f"Destination '{dest.id}' rating {dest.rating} is outside 1-5")
        if not 1 <= dest.popularity_score <= 100:
            raise CatalogError(
                f"Destination '{dest.id}' popularity_score {dest.popularity_score} is outside 1-100"
            )


# Checked once, at import.
validate_catalog(_CATALOG)


def list_destinations(catalog: Optional[Sequence[Destination]] = None) -> list[Destination]:
    """Return every destination, in catalog order."""
    return list(_CATALOG if catalog is None else catalog)


def list_destination_ids(catalog: Optional[Sequence[Destination]] = None) -> list[str]:
    """List all known destination IDs.

    Tools include this in their error responses so the agent can retry with
    an ID that actually exists.
    """
    return [dest.id for dest in list_destinations(catalog)]


def get_destination(
    destination_id: str,
    catalog: Optional[Sequence[Destination]] = None,
) -> Destination | None:
    """Look up a single destination by exact ID.

    Args:
        destination_id: The catalog key (e.g., "kyoto").  Matching is exact
            and case-sensitive.
        catalog: Alternative catalog to search.  Defaults to the built-in one.

    Returns:
        The Destination, or None if no entry has that ID.  A miss is not an
        error: callers render a friendly "not found" response instead.
    """
    for dest in _CATALOG if catalog is None else catalog:
        if dest.id == destination_id:
            return dest
    return None


def get_destinations(
    destination_ids: Iterable[str],
    catalog: Optional[Sequence[Destination]] = None,
) -> list[Destination]:
    """Resolve several IDs at once, dropping any that don't exist.

    The order of the surviving destinations follows the order of the input
    IDs.  Duplicated IDs resolve twice.  Returns an empty list when nothing
    resolves (including for an empty input).
    """
    resolved = []
    for destination_id in destination_ids:
        dest = get_destination(destination_id, catalog)
        if dest is not None:
            resolved.append(dest)
    return resolved
