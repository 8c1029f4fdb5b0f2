"""Tests for itinerary generation."""

from datetime import date, datetime, timezone

import pytest

from core.itinerary import (
    ARRIVAL_NOTE,
    NoValidDestinationsError,
    activity_cost,
    build_itinerary,
    days_over_budget,
    round_half_up,
)


def _visits(itinerary) -> list[str]:
    return [day.destination_id for day in itinerary.days]


class TestSingleDestination:
    """One destination, stay 3, $100/day, activities hike/eat/swim, 5 days."""

    @pytest.fixture
    def itinerary(self, make_destination):
        catalog = [make_destination("solo", average_stay_days=3, average_daily_cost=100,
                                    activities=("hike", "eat", "swim"))]
        return build_itinerary(["solo"], 5, pace="moderate", catalog=catalog)

    def test_five_days_all_on_the_one_destination(self, itinerary) -> None:
        assert len(itinerary.days) == 5
        assert _visits(itinerary) == ["solo"] * 5
        assert [day.day for day in itinerary.days] == [1, 2, 3, 4, 5]

    def test_activities_cycle_through_themes(self, itinerary) -> None:
        for day in itinerary.days:
            assert [a.name for a in day.activities] == ["hike", "eat", "swim"]
            assert [a.time_of_day for a in day.activities] == ["morning", "afternoon", "evening"]
            assert all(a.duration_hours == 3 for a in day.activities)
            assert all(a.cost == 30 for a in day.activities)

    def test_costs(self, itinerary) -> None:
        assert [day.total_cost for day in itinerary.days] == [100] * 5
        assert itinerary.total_cost == 500

    def test_only_day_one_has_a_note(self, itinerary) -> None:
        assert itinerary.days[0].notes == ARRIVAL_NOTE
        assert all(day.notes is None for day in itinerary.days[1:])


class TestPace:
    @pytest.fixture
    def catalog(self, make_destination):
        return [make_destination("solo", activities=("hike", "eat", "swim"))]

    def test_relaxed(self, catalog) -> None:
        day = build_itinerary(["solo"], 1, pace="relaxed", catalog=catalog).days[0]
        assert [a.name for a in day.activities] == ["hike", "eat"]
        assert [a.time_of_day for a in day.activities] == ["morning", "afternoon"]
        assert all(a.duration_hours == 4 for a in day.activities)

    def test_packed_wraps_themes_and_stacks_evenings(self, catalog) -> None:
        day = build_itinerary(["solo"], 1, pace="packed", catalog=catalog).days[0]
        assert [a.name for a in day.activities] == ["hike", "eat", "swim", "hike"]
        assert [a.time_of_day for a in day.activities] == [
            "morning", "afternoon", "evening", "evening",
        ]
        assert all(a.duration_hours == 2 for a in day.activities)

    def test_unknown_pace_behaves_like_moderate(self, catalog) -> None:
        day = build_itinerary(["solo"], 1, pace="turbo", catalog=catalog).days[0]
        assert len(day.activities) == 3
        assert all(a.duration_hours == 3 for a in day.activities)

    def test_default_pace_is_moderate(self, catalog) -> None:
        itinerary = build_itinerary(["solo"], 1, catalog=catalog)
        assert itinerary.preferences.pace == "moderate"
        assert len(itinerary.days[0].activities) == 3

    def test_single_theme_repeats(self, make_destination) -> None:
        catalog = [make_destination("solo", activities=("nap",))]
        day = build_itinerary(["solo"], 1, pace="packed", catalog=catalog).days[0]
        assert [a.name for a in day.activities] == ["nap"] * 4


class TestCursor:
    def test_advances_when_day_is_multiple_of_stay(self, make_destination) -> None:
        catalog = [
            make_destination("a", average_stay_days=2, average_daily_cost=100),
            make_destination("b", average_stay_days=3, average_daily_cost=50),
        ]
        itinerary = build_itinerary(["a", "b"], 4, catalog=catalog)
        assert _visits(itinerary) == ["a", "a", "b", "b"]
        assert itinerary.total_cost == 300

    def test_sticks_on_last_destination_when_duration_overflows(self, make_destination) -> None:
        catalog = [
            make_destination("a", average_stay_days=1),
            make_destination("b", average_stay_days=1),
        ]
        itinerary = build_itinerary(["a", "b"], 5, catalog=catalog)
        assert _visits(itinerary) == ["a", "b", "b", "b", "b"]

    def test_no_wraparound(self, make_destination) -> None:
        catalog = [
            make_destination("a", average_stay_days=2),
            make_destination("b", average_stay_days=2),
        ]
        itinerary = build_itinerary(["a", "b"], 10, catalog=catalog)
        assert _visits(itinerary) == ["a", "a"] + ["b"] * 8

    def test_uses_absolute_day_number(self, make_destination) -> None:
        # Day 3 lands on b, and 3 % 3 == 0, so b only gets one day.
        catalog = [
            make_destination("a", average_stay_days=2),
            make_destination("b", average_stay_days=3),
            make_destination("c", average_stay_days=2),
        ]
        itinerary = build_itinerary(["a", "b", "c"], 8, catalog=catalog)
        assert _visits(itinerary) == ["a", "a", "b", "c", "c", "c", "c", "c"]

    def test_unknown_ids_are_skipped(self, make_destination) -> None:
        catalog = [make_destination("a", average_stay_days=1), make_destination("b")]
        itinerary = build_itinerary(["a", "missing", "b"], 2, catalog=catalog)
        assert itinerary.destinations == ["a", "b"]
        assert _visits(itinerary) == ["a", "b"]

    def test_total_is_sum_of_visited_daily_costs(self) -> None:
        # Kyoto ($150, stay 3) for days 1-3, then Paris ($220).
        itinerary = build_itinerary(["kyoto", "paris"], 5)
        assert _visits(itinerary) == ["kyoto", "kyoto", "kyoto", "paris", "paris"]
        assert itinerary.total_cost == 3 * 150 + 2 * 220


class TestFailures:
    @pytest.mark.parametrize("ids", [[], ["unknown", "unknown"]])
    def test_no_valid_destinations(self, ids) -> None:
        with pytest.raises(NoValidDestinationsError) as exc_info:
            build_itinerary(ids, 3)
        assert exc_info.value.destination_ids == ids

    @pytest.mark.parametrize("duration", [0, -3])
    def test_non_positive_duration_gives_empty_plan(self, duration: int) -> None:
        itinerary = build_itinerary(["bali"], duration)
        assert itinerary.days == []
        assert itinerary.total_cost == 0


class TestCosts:
    def test_day_cost_ignores_activity_costs(self, make_destination) -> None:
        catalog = [make_destination("solo", average_daily_cost=100)]
        day = build_itinerary(["solo"], 1, pace="packed", catalog=catalog).days[0]
        assert sum(a.cost for a in day.activities) == 120
        assert day.total_cost == 100

    @pytest.mark.parametrize(
        "daily, expected",
        [(100, 30), (75, 23), (55, 17), (220, 66), (150, 45)],
    )
    def test_activity_cost_is_thirty_percent_rounded_half_up(
        self, make_destination, daily: float, expected: int
    ) -> None:
        assert activity_cost(make_destination(average_daily_cost=daily)) == expected

    def test_activity_cost_independent_of_pace(self, make_destination) -> None:
        catalog = [make_destination("solo", average_daily_cost=75)]
        for pace in ("relaxed", "moderate", "packed"):
            day = build_itinerary(["solo"], 1, pace=pace, catalog=catalog).days[0]
            assert {a.cost for a in day.activities} == {23}

    @pytest.mark.parametrize("value, expected", [(2.5, 3), (22.5, 23), (2.4, 2), (0.5, 1), (3.0, 3)])
    def test_round_half_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestMetadata:
    def test_id_and_title(self) -> None:
        itinerary = build_itinerary(["kyoto", "paris"], 4)
        assert itinerary.id == "itinerary-kyoto-paris-4d"
        assert itinerary.title == "4-Day Trip: Kyoto & Paris"
        assert itinerary.duration == 4

    def test_preferences_are_carried_through(self) -> None:
        itinerary = build_itinerary(["bali"], 2, pace="relaxed",
                                    interests=["food", "surfing"], budget_per_day=80)
        assert itinerary.preferences.pace == "relaxed"
        assert itinerary.preferences.interests == ["food", "surfing"]
        assert itinerary.preferences.budget_per_day == 80

    def test_interests_do_not_change_the_plan(self) -> None:
        plain = build_itinerary(["bali", "kyoto"], 7)
        with_interests = build_itinerary(["bali", "kyoto"], 7, interests=["temples"])
        assert plain.days == with_interests.days
        assert plain.total_cost == with_interests.total_cost

    def test_start_date_stamps_each_day(self) -> None:
        itinerary = build_itinerary(["bali"], 3, start_date=date(2025, 12, 31))
        assert [day.date for day in itinerary.days] == ["2025-12-31", "2026-01-01", "2026-01-02"]

    def test_no_start_date_means_no_dates(self) -> None:
        itinerary = build_itinerary(["bali"], 2)
        assert all(day.date is None for day in itinerary.days)

    def test_created_at_uses_given_clock(self) -> None:
        now = datetime(2025, 7, 1, 12, 0, tzinfo=timezone.utc)
        itinerary = build_itinerary(["bali"], 1, now=now)
        assert itinerary.created_at == "2025-07-01T12:00:00+00:00"

    def test_activity_ids_and_types(self) -> None:
        day = build_itinerary(["kyoto"], 2).days[1]
        assert [a.id for a in day.activities] == [
            "day2-activity1", "day2-activity2", "day2-activity3",
        ]
        assert {a.type for a in day.activities} == {"cultural"}
        assert day.activities[0].description == "Shrine walk in Kyoto"

    def test_deterministic(self) -> None:
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        first = build_itinerary(["bali", "kyoto"], 9, pace="packed", now=now)
        second = build_itinerary(["bali", "kyoto"], 9, pace="packed", now=now)
        assert first == second


class TestDaysOverBudget:
    def test_lists_days_above_budget(self) -> None:
        # Kyoto $150 (days 1-3), then Paris $220.
        itinerary = build_itinerary(["kyoto", "paris"], 4, budget_per_day=150)
        assert days_over_budget(itinerary) == [4]

    def test_empty_without_budget(self) -> None:
        itinerary = build_itinerary(["paris"], 3)
        assert days_over_budget(itinerary) == []
