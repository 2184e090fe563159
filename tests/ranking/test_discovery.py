"""Tests for barberbook/ranking/discovery.py - discovery listing."""

from barberbook.barber.models import Location
from barberbook.ranking.discovery import discover_barbers, is_listed
from barberbook.ranking.engine import SortKey
from barberbook.store.seed import seed_appointments, seed_profiles, seed_users
from barberbook.user.models import Role, User

LOS_ANGELES = Location(lat=34.0522, lng=-118.2437)


def test_only_approved_unbanned_barbers_are_listed():
    listings = discover_barbers(seed_users(), seed_profiles(), seed_appointments())

    assert [listing.id for listing in listings] == ["barber1", "barber2"]


def test_banned_barber_is_not_listed():
    user = User(
        name="Banned", email="b@x.com", password="p", role=Role.barber, is_banned=True
    )

    assert not is_listed(user)


def test_rating_sort_uses_seed_reviews():
    listings = discover_barbers(seed_users(), seed_profiles(), seed_appointments())

    assert listings[0].rating.average == 5.0
    assert listings[1].rating.average == 4.0


def test_distances_are_absent_without_location():
    listings = discover_barbers(
        seed_users(), seed_profiles(), seed_appointments(), sort_key=SortKey.distance
    )

    assert all(listing.distance_km is None for listing in listings)
    # Stable: store order is kept.
    assert [listing.id for listing in listings] == ["barber1", "barber2"]


def test_distance_sort_from_los_angeles():
    listings = discover_barbers(
        seed_users(),
        seed_profiles(),
        seed_appointments(),
        user_location=LOS_ANGELES,
        sort_key=SortKey.distance,
    )

    assert [listing.id for listing in listings] == ["barber2", "barber1"]
    assert listings[0].distance_km == 0
    assert listings[1].distance_km > 3900


def test_barber_without_profile_sorts_last_by_distance():
    users = seed_users()
    profiles = [p for p in seed_profiles() if p.user_id != "barber2"]

    listings = discover_barbers(
        users,
        profiles,
        [],
        user_location=LOS_ANGELES,
        sort_key=SortKey.distance,
    )

    assert listings[-1].id == "barber2"
    assert listings[-1].profile is None
    assert listings[-1].distance_km is None
