"""Tests for destination search and ranking."""

import pytest

from core.destinations import list_destinations
from core.models import SearchCriteria
from core.search import search_destinations


def _ids(results) -> list[str]:
    return [dest.id for dest in results]


class TestNoFilters:
    def test_returns_whole_catalog_by_popularity(self) -> None:
        results = search_destinations(SearchCriteria())
        assert _ids(results) == [
            "paris", "bali", "santorini", "kyoto", "banff",
            "cape-town", "swiss-alps", "queenstown", "marrakech", "cusco",
        ]

    def test_same_set_as_catalog(self) -> None:
        assert sorted(_ids(search_destinations(SearchCriteria()))) == sorted(
            dest.id for dest in list_destinations()
        )

    def test_ties_keep_catalog_order(self, make_destination) -> None:
        catalog = [
            make_destination("first", popularity_score=40),
            make_destination("second", popularity_score=70),
            make_destination("third", popularity_score=40),
            make_destination("fourth", popularity_score=40),
        ]
        results = search_destinations(SearchCriteria(), catalog)
        assert _ids(results) == ["second", "first", "third", "fourth"]


class TestFilters:
    def test_type(self) -> None:
        assert _ids(search_destinations(SearchCriteria(type="mountain"))) == ["banff", "swiss-alps"]

    def test_budget(self) -> None:
        assert _ids(search_destinations(SearchCriteria(budget="low"))) == ["bali", "marrakech", "cusco"]

    def test_climate(self) -> None:
        assert _ids(search_destinations(SearchCriteria(climate="cold"))) == ["banff", "swiss-alps", "cusco"]

    def test_min_rating_is_inclusive(self) -> None:
        assert _ids(search_destinations(SearchCriteria(min_rating=4.8))) == ["kyoto", "queenstown"]

    def test_filters_combine_with_and(self) -> None:
        results = search_destinations(SearchCriteria(type="city", budget="medium"))
        assert _ids(results) == ["cape-town"]

    def test_conflicting_filters_return_empty(self) -> None:
        assert search_destinations(SearchCriteria(type="beach", climate="cold")) == []

    @pytest.mark.parametrize(
        "criteria",
        [
            SearchCriteria(type="cultural", min_rating=4.5),
            SearchCriteria(budget="high", climate="temperate"),
            SearchCriteria(query="a", budget="medium", min_rating=4.6),
        ],
    )
    def test_every_result_satisfies_every_filter(self, criteria: SearchCriteria) -> None:
        for dest in search_destinations(criteria):
            if criteria.type is not None:
                assert dest.type == criteria.type
            if criteria.budget is not None:
                assert dest.budget_level == criteria.budget
            if criteria.climate is not None:
                assert dest.climate == criteria.climate
            if criteria.min_rating is not None:
                assert dest.rating >= criteria.min_rating
            if criteria.query is not None:
                text = f"{dest.name} {dest.country} {dest.description}".lower()
                assert criteria.query.lower() in text


class TestQuery:
    def test_matches_country(self) -> None:
        assert _ids(search_destinations(SearchCriteria(query="japan"))) == ["kyoto"]

    def test_matches_description(self) -> None:
        assert _ids(search_destinations(SearchCriteria(query="temple"))) == ["bali", "kyoto"]

    def test_case_insensitive(self) -> None:
        assert _ids(search_destinations(SearchCriteria(query="PaRiS"))) == ["paris"]

    def test_matches_exactly_name_country_or_description(self) -> None:
        query = "an"
        expected = {
            dest.id for dest in list_destinations()
            if query in dest.name.lower()
            or query in dest.country.lower()
            or query in dest.description.lower()
        }
        assert set(_ids(search_destinations(SearchCriteria(query=query)))) == expected

    def test_does_not_search_other_fields(self) -> None:
        # "Fushimi Inari Shrine" is a Kyoto attraction, not in its description.
        assert search_destinations(SearchCriteria(query="fushimi")) == []

    def test_no_match(self) -> None:
        assert search_destinations(SearchCriteria(query="atlantis")) == []
