# =============================================================================
# core/search.py  —  Destination Search & Ranking
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Filters the catalog by the traveler's criteria and ranks what's left by
#   popularity.
#
# FILTERING:
#   Each criterion that is set becomes one predicate, and a destination must
#   pass ALL of them (AND, never OR).  Criteria left as None are skipped, so
#   an empty SearchCriteria returns the entire catalog.
#
#   The free-text query is the only fuzzy filter: a case-insensitive
#   substring match against name, country OR description.  "japan" finds
#   Kyoto through its country; "temple" finds Bali and Kyoto through their
#   descriptions.
#
# RANKING:
#   Most popular first.  Python's sort is stable (also with reverse=True), so
#   destinations with equal popularity keep their catalog order.  Results are
#   therefore fully deterministic.
#
# An empty result is a perfectly good answer; the tool layer turns it into a
# "no matches" message.
# =============================================================================

from typing import Callable, Optional, Sequence

from core.destinations import list_destinations
from core.models import Destination, SearchCriteria


def search_destinations(
    criteria: SearchCriteria,
    catalog: Optional[Sequence[Destination]] = None,
) -> list[Destination]:
    """Find destinations matching every provided criterion, most popular first.

    Args:
        criteria: The filters to apply.  None-valued fields are ignored.
        catalog: Alternative catalog to search.  Defaults to the built-in one.

    Returns:
        Matching destinations sorted by popularity_score descending, with
        catalog order preserved among ties.  May be empty.
    """
    predicates = _build_predicates(criteria)
    matches = [
        dest for dest in list_destinations(catalog)
        if all(predicate(dest) for predicate in predicates)
    ]
    return sorted(matches, key=lambda dest: dest.popularity_score, reverse=True)


def _build_predicates(criteria: SearchCriteria) -> list[Callable[[Destination], bool]]:
    """Turn the set fields of `criteria` into a list of filter functions."""
    predicates: list[Callable[[Destination], bool]] = []

    if criteria.type is not None:
        predicates.append(lambda dest: dest.type == criteria.type)
    if criteria.budget is not None:
        predicates.append(lambda dest: dest.budget_level == criteria.budget)
    if criteria.climate is not None:
        predicates.append(lambda dest: dest.climate == criteria.climate)
    if criteria.min_rating is not None:
        predicates.append(lambda dest: dest.rating >= criteria.min_rating)
    if criteria.query is not None:
        needle = criteria.query.lower()
        predicates.append(lambda dest: _matches_query(dest, needle))

    return predicates


def _matches_query(dest: Destination, needle: str) -> bool:
    """True if the lower-cased needle appears in name, country or description."""
    return (
        needle in dest.name.lower()
        or needle in dest.country.lower()
        or needle in dest.description.lower()
    )
