"""Barber domain router.

Discovery, public profile pages and the barber's own dashboard.
"""

from fastapi import APIRouter, Query

from barberbook.appointment.schemas import AppointmentDetail
from barberbook.auth.dependencies import BarberUserDep, ClientAreaUserDep
from barberbook.barber.exceptions import BarberNotFoundError
from barberbook.barber.models import BarberProfile, Location
from barberbook.barber.schemas import (
    BarberDashboardRead,
    BarberListingRead,
    BarberPageRead,
    BarberProfileUpdate,
    RatingRead,
    ReviewRead,
)
from barberbook.core.constants import CommonResponses, Routes
from barberbook.core.deps import StoreDep
from barberbook.ranking.discovery import discover_barbers
from barberbook.ranking.engine import SortKey
from barberbook.user.models import Role

router = APIRouter(
    prefix=Routes.BARBERS.prefix,
    tags=[Routes.BARBERS.tag],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
    },
)


@router.get("", response_model=list[BarberListingRead])
async def list_barbers(
    _user: ClientAreaUserDep,
    store: StoreDep,
    sort_by: SortKey = SortKey.rating,
    lat: float | None = Query(default=None, ge=-90, le=90),
    lng: float | None = Query(default=None, ge=-180, le=180),
):
    """Approved, unbanned barbers ranked by rating or by distance.

    Distance needs both ``lat`` and ``lng``; without them every barber has
    no distance and a distance sort keeps the store order.
    """
    location: Location | None = None
    if lat is not None and lng is not None:
        location = Location(lat=lat, lng=lng)
    listings = discover_barbers(
        store.users(),
        store.barber_profiles(),
        store.appointments(),
        user_location=location,
        sort_key=sort_by,
    )
    return [BarberListingRead.from_listing(listing) for listing in listings]


@router.get("/me/dashboard", response_model=BarberDashboardRead)
async def dashboard(user: BarberUserDep, store: StoreDep):
    """The current barber's profile, rating and appointments."""
    return BarberDashboardRead(
        profile=store.get_barber_profile(user.id),
        rating=RatingRead.from_summary(store.rating_for(user.id)),
        appointments=[
            AppointmentDetail.from_appointment(appointment, store)
            for appointment in store.appointments_for_barber(user.id)
        ],
    )


@router.put("/me/profile", response_model=BarberProfile)
async def replace_profile(
    profile_update: BarberProfileUpdate, user: BarberUserDep, store: StoreDep
):
    """Replace the current barber's whole profile."""
    await store.replace_barber_profile(profile_update.to_profile(user.id))
    profile = store.get_barber_profile(user.id)
    if profile is None:
        raise BarberNotFoundError()
    return profile


@router.get(
    "/{barber_id}",
    response_model=BarberPageRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def barber_page(barber_id: str, _user: ClientAreaUserDep, store: StoreDep):
    """Public profile page. Barbers may view any barber's page.

    Approval and ban flags are not checked here; they only hide a barber
    from discovery.
    """
    barber = store.get_user(barber_id)
    profile = store.get_barber_profile(barber_id)
    if barber is None or barber.role != Role.barber or profile is None:
        raise BarberNotFoundError()

    reviews = [
        ReviewRead(
            client_name=store.client_name(appointment.client_id),
            rating=appointment.rating,
            review=appointment.review,
            date=appointment.date,
        )
        for appointment in store.appointments_for_barber(barber_id)
        if appointment.is_rated
    ]
    return BarberPageRead(
        id=barber.id,
        name=barber.name,
        profile=profile,
        rating=RatingRead.from_summary(store.rating_for(barber_id)),
        reviews=reviews,
    )
