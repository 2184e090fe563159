"""Barber domain schemas.

Discovery listings, public profile pages and the barber dashboard.
"""

from datetime import datetime

from sqlmodel import Field, SQLModel

from barberbook.appointment.schemas import AppointmentDetail
from barberbook.barber.models import BarberProfile, PortfolioItem, Service, Shop
from barberbook.ranking.discovery import BarberListing
from barberbook.ranking.engine import RatingSummary


class RatingRead(SQLModel):
    average: float
    count: int

    @classmethod
    def from_summary(cls, summary: RatingSummary) -> "RatingRead":
        return cls(average=summary.average, count=summary.count)


class BarberListingRead(SQLModel):
    id: str
    name: str
    profile: BarberProfile | None
    rating: RatingRead
    distance_km: float | None

    @classmethod
    def from_listing(cls, listing: BarberListing) -> "BarberListingRead":
        return cls(
            id=listing.user.id,
            name=listing.user.name,
            profile=listing.profile,
            rating=RatingRead.from_summary(listing.rating),
            distance_km=listing.distance_km,
        )


class ReviewRead(SQLModel):
    client_name: str
    rating: int
    review: str | None
    date: datetime


class BarberPageRead(SQLModel):
    """Public profile page of a barber."""

    id: str
    name: str
    profile: BarberProfile
    rating: RatingRead
    reviews: list[ReviewRead]


class BarberDashboardRead(SQLModel):
    profile: BarberProfile | None
    rating: RatingRead
    appointments: list[AppointmentDetail]


class BarberProfileUpdate(SQLModel):
    """Whole replacement of the current barber's profile.

    The owner comes from the session, never from the body.
    """

    bio: str
    services: list[Service] = Field(default_factory=list)
    portfolio: list[PortfolioItem] = Field(default_factory=list)
    profile_picture_url: str
    shop: Shop

    def to_profile(self, user_id: str) -> BarberProfile:
        return BarberProfile(user_id=user_id, **self.model_dump())
