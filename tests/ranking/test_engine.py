"""Tests for barberbook/ranking/engine.py - rating, distance and sort order."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime

from hypothesis import given
from hypothesis import settings as hypothesis_settings
from hypothesis import strategies as st

from barberbook.appointment.models import Appointment, AppointmentStatus
from barberbook.ranking.engine import (
    RatingSummary,
    SortKey,
    aggregate_rating,
    great_circle_distance_km,
    rank_barbers,
)

NOW = datetime(2026, 1, 1, 12, tzinfo=UTC)


def make_appointment(
    barber_id: str,
    status: AppointmentStatus,
    rating: int | None = None,
) -> Appointment:
    return Appointment(
        client_id="c1",
        barber_id=barber_id,
        service_id="s1",
        date=NOW,
        status=status,
        rating=rating,
    )


@dataclass
class Barber:
    id: str


latitudes = st.floats(min_value=-90, max_value=90, allow_nan=False)
longitudes = st.floats(min_value=-180, max_value=180, allow_nan=False)


class TestAggregateRating:
    def test_excludes_scheduled_and_averages_completed(self):
        """Two completed ratings (5, 3) and one scheduled -> 4.0 over 2."""
        appointments = [
            make_appointment("b1", AppointmentStatus.completed, 5),
            make_appointment("b1", AppointmentStatus.completed, 3),
            make_appointment("b1", AppointmentStatus.scheduled),
        ]

        assert aggregate_rating(appointments, "b1") == RatingSummary(4.0, 2)

    def test_no_ratings_is_exactly_zero(self):
        appointments = [make_appointment("b1", AppointmentStatus.completed)]

        summary = aggregate_rating(appointments, "b1")

        assert summary.average == 0
        assert summary.count == 0

    def test_ignores_other_barbers(self):
        appointments = [
            make_appointment("b1", AppointmentStatus.completed, 2),
            make_appointment("b2", AppointmentStatus.completed, 5),
        ]

        assert aggregate_rating(appointments, "b1") == RatingSummary(2.0, 1)

    def test_ignores_rated_but_cancelled(self):
        appointments = [make_appointment("b1", AppointmentStatus.cancelled, 1)]

        assert aggregate_rating(appointments, "b1") == RatingSummary(0.0, 0)

    @hypothesis_settings(max_examples=50)
    @given(ratings=st.lists(st.integers(min_value=1, max_value=5), min_size=1))
    def test_average_stays_within_star_range(self, ratings):
        appointments = [
            make_appointment("b1", AppointmentStatus.completed, r) for r in ratings
        ]

        summary = aggregate_rating(appointments, "b1")

        assert summary.count == len(ratings)
        assert 1 <= summary.average <= 5


class TestGreatCircleDistance:
    def test_identical_coordinates_are_exactly_zero(self):
        assert great_circle_distance_km(40.0, -74.0, 40.0, -74.0) == 0

    def test_new_york_to_los_angeles(self):
        distance = great_circle_distance_km(40.7128, -74.0060, 34.0522, -118.2437)

        assert 3900 < distance < 3980

    def test_one_degree_of_latitude(self):
        # 60 arc minutes * 1.1515 mi * 1.609344 km
        expected = 60 * 1.1515 * 1.609344
        assert math.isclose(
            great_circle_distance_km(0, 0, 1, 0), expected, rel_tol=1e-9
        )

    @hypothesis_settings(max_examples=100)
    @given(lat1=latitudes, lon1=longitudes, lat2=latitudes, lon2=longitudes)
    def test_symmetric_and_never_nan(self, lat1, lon1, lat2, lon2):
        forward = great_circle_distance_km(lat1, lon1, lat2, lon2)
        backward = great_circle_distance_km(lat2, lon2, lat1, lon1)

        assert not math.isnan(forward)
        assert forward >= 0
        assert math.isclose(forward, backward, rel_tol=1e-9, abs_tol=1e-6)

    @hypothesis_settings(max_examples=50)
    @given(lat=latitudes, lon=longitudes)
    def test_nearly_identical_points_do_not_overshoot(self, lat, lon):
        distance = great_circle_distance_km(lat, lon, lat, lon + 1e-12)

        assert not math.isnan(distance)
        assert distance < 0.01


class TestRankBarbers:
    def test_rating_sorts_by_average_then_count(self):
        barbers = [Barber("a"), Barber("b"), Barber("c")]
        ratings = {
            "a": RatingSummary(4.0, 10),
            "b": RatingSummary(5.0, 1),
            "c": RatingSummary(4.0, 20),
        }

        ranked = rank_barbers(barbers, ratings, {}, SortKey.rating)

        assert [b.id for b in ranked] == ["b", "c", "a"]

    def test_rating_treats_missing_summary_as_unrated(self):
        barbers = [Barber("unrated"), Barber("rated")]

        ranked = rank_barbers(barbers, {"rated": RatingSummary(3.0, 1)}, {}, "rating")

        assert [b.id for b in ranked] == ["rated", "unrated"]

    def test_distance_puts_missing_distance_last(self):
        """Whatever its input position, the unlocated barber ends up last."""
        distances = {"near": 1.5, "far": 12.0, "nowhere": None}
        for order in (
            ["nowhere", "far", "near"],
            ["far", "nowhere", "near"],
            ["near", "far", "nowhere"],
        ):
            barbers = [Barber(i) for i in order]

            ranked = rank_barbers(barbers, {}, distances, SortKey.distance)

            assert [b.id for b in ranked] == ["near", "far", "nowhere"]

    def test_distance_keeps_input_order_among_missing(self):
        barbers = [Barber("x"), Barber("a"), Barber("y"), Barber("z")]
        distances = {"a": 3.0, "x": None, "y": None, "z": None}

        ranked = rank_barbers(barbers, {}, distances, SortKey.distance)

        assert [b.id for b in ranked] == ["a", "x", "y", "z"]

    def test_rating_ties_keep_input_order(self):
        barbers = [Barber("first"), Barber("second")]
        ratings = {
            "first": RatingSummary(4.5, 2),
            "second": RatingSummary(4.5, 2),
        }

        ranked = rank_barbers(barbers, ratings, {}, SortKey.rating)

        assert [b.id for b in ranked] == ["first", "second"]

    @hypothesis_settings(max_examples=50)
    @given(
        distances=st.lists(
            st.one_of(st.none(), st.floats(min_value=0, max_value=20000)),
            max_size=12,
        )
    )
    def test_distance_order_is_ascending_then_missing(self, distances):
        barbers = [Barber(str(i)) for i in range(len(distances))]
        by_id = {str(i): d for i, d in enumerate(distances)}

        ranked = rank_barbers(barbers, {}, by_id, SortKey.distance)
        ranked_distances = [by_id[b.id] for b in ranked]

        present = [d for d in ranked_distances if d is not None]
        assert present == sorted(present)
        assert ranked_distances[len(present) :] == [None] * (
            len(distances) - len(present)
        )
