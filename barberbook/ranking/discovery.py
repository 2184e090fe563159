"""Discovery listing: approved barbers enriched with profile, rating and distance."""

from collections.abc import Sequence
from dataclasses import dataclass

from barberbook.appointment.models import Appointment
from barberbook.barber.models import BarberProfile, Location
from barberbook.ranking.engine import (
    RatingSummary,
    SortKey,
    aggregate_rating,
    great_circle_distance_km,
    rank_barbers,
)
from barberbook.user.models import Role, User


@dataclass(frozen=True)
class BarberListing:
    user: User
    profile: BarberProfile | None
    rating: RatingSummary
    distance_km: float | None

    @property
    def id(self) -> str:
        return self.user.id


def is_listed(user: User) -> bool:
    """Only approved, unbanned barbers are discoverable."""
    return user.role == Role.barber and user.is_approved and not user.is_banned


def discover_barbers(
    users: Sequence[User],
    profiles: Sequence[BarberProfile],
    appointments: Sequence[Appointment],
    user_location: Location | None = None,
    sort_key: SortKey = SortKey.rating,
) -> list[BarberListing]:
    profiles_by_user = {profile.user_id: profile for profile in profiles}

    listings: list[BarberListing] = []
    for user in users:
        if not is_listed(user):
            continue
        profile = profiles_by_user.get(user.id)
        distance: float | None = None
        if user_location is not None and profile is not None:
            shop = profile.shop.location
            distance = great_circle_distance_km(
                user_location.lat, user_location.lng, shop.lat, shop.lng
            )
        listings.append(
            BarberListing(
                user=user,
                profile=profile,
                rating=aggregate_rating(appointments, user.id),
                distance_km=distance,
            )
        )

    return rank_barbers(
        listings,
        ratings={listing.id: listing.rating for listing in listings},
        distances={listing.id: listing.distance_km for listing in listings},
        sort_key=sort_key,
    )
