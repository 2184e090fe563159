"""Barber domain models.

A BarberProfile is the one-to-one extension of a Barber user. Services
and portfolio items only change through whole-profile replacement.
"""

from enum import Enum

from sqlmodel import Field, SQLModel

DEFAULT_BIO = "New barber ready to provide great haircuts!"
DEFAULT_ADDRESS = "Please update your address"
DEFAULT_LAT = 40.7128
DEFAULT_LNG = -74.0060


class PortfolioItemType(str, Enum):
    image = "image"
    video = "video"


class Service(SQLModel):
    """Bookable offering. Price is currency-agnostic, duration in minutes."""

    id: str
    name: str
    price: float = Field(ge=0)
    duration: int = Field(gt=0)


class PortfolioItem(SQLModel):
    id: str
    type: PortfolioItemType
    url: str
    caption: str | None = None


class Location(SQLModel):
    lat: float
    lng: float


class Shop(SQLModel):
    name: str
    address: str
    location: Location


class BarberProfile(SQLModel):
    """Public profile of a barber. Order of services and portfolio is display order."""

    user_id: str
    bio: str
    services: list[Service] = Field(default_factory=list)
    portfolio: list[PortfolioItem] = Field(default_factory=list)
    profile_picture_url: str
    shop: Shop

    def find_service(self, service_id: str) -> Service | None:
        for service in self.services:
            if service.id == service_id:
                return service
        return None


def placeholder_profile(user_id: str, name: str) -> BarberProfile:
    """Build the profile created alongside a newly registered barber."""
    return BarberProfile(
        user_id=user_id,
        bio=DEFAULT_BIO,
        services=[],
        portfolio=[],
        profile_picture_url=f"https://picsum.photos/seed/{user_id}/400",
        shop=Shop(
            name=f"{name}'s Shop",
            address=DEFAULT_ADDRESS,
            location=Location(lat=DEFAULT_LAT, lng=DEFAULT_LNG),
        ),
    )
