"""Ranking engine.

Pure functions over store snapshots: per-barber rating aggregation,
great-circle distance and the discovery sort order. Nothing here mutates
or suspends.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar

from barberbook.appointment.models import Appointment, AppointmentStatus

# Degrees of arc -> statute miles (1 arc minute = 1.1515 mi) -> kilometers.
_ARC_MINUTES_PER_DEGREE = 60
_MILES_PER_ARC_MINUTE = 1.1515
_KM_PER_MILE = 1.609344


class SortKey(str, Enum):
    rating = "rating"
    distance = "distance"


@dataclass(frozen=True)
class RatingSummary:
    """Average star rating and the number of ratings it was computed from."""

    average: float = 0.0
    count: int = 0


class _HasId(Protocol):
    id: str


B = TypeVar("B", bound=_HasId)


def aggregate_rating(
    appointments: Iterable[Appointment], barber_id: str
) -> RatingSummary:
    """Aggregate ratings of a barber's completed and rated appointments.

    Returns an average of exactly 0 when nothing has been rated.
    """
    ratings = [
        appointment.rating
        for appointment in appointments
        if appointment.barber_id == barber_id
        and appointment.status == AppointmentStatus.completed
        and appointment.rating
    ]
    if not ratings:
        return RatingSummary(average=0.0, count=0)
    return RatingSummary(average=sum(ratings) / len(ratings), count=len(ratings))


def great_circle_distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Approximate distance in kilometers (spherical law of cosines).

    Identical coordinates short-circuit to exactly 0; the cosine is clamped
    into [-1, 1] so floating-point overshoot never reaches acos.
    """
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    rad_lat1 = math.radians(lat1)
    rad_lat2 = math.radians(lat2)
    rad_theta = math.radians(lon1 - lon2)

    cosine = math.sin(rad_lat1) * math.sin(rad_lat2) + math.cos(rad_lat1) * math.cos(
        rad_lat2
    ) * math.cos(rad_theta)
    cosine = max(-1.0, min(cosine, 1.0))

    degrees = math.degrees(math.acos(cosine))
    return degrees * _ARC_MINUTES_PER_DEGREE * _MILES_PER_ARC_MINUTE * _KM_PER_MILE


def rank_barbers(
    barbers: Sequence[B],
    ratings: Mapping[str, RatingSummary],
    distances: Mapping[str, float | None],
    sort_key: SortKey = SortKey.rating,
) -> list[B]:
    """Order barbers for discovery.

    - rating: average descending, then rating count descending
    - distance: ascending; barbers without a distance go last

    The sort is stable, so ties keep their input order.
    """
    sort_key = SortKey(sort_key)

    if sort_key == SortKey.rating:

        def rating_key(barber: B) -> tuple[float, int]:
            summary = ratings.get(barber.id, RatingSummary())
            return (-summary.average, -summary.count)

        return sorted(barbers, key=rating_key)

    def distance_key(barber: B) -> tuple[bool, float]:
        distance = distances.get(barber.id)
        if distance is None:
            return (True, 0.0)
        return (False, distance)

    return sorted(barbers, key=distance_key)
