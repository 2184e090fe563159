"""Mock data the domain store starts with."""

from datetime import UTC, datetime, timedelta

from barberbook.appointment.models import Appointment, AppointmentStatus
from barberbook.barber.models import (
    BarberProfile,
    Location,
    PortfolioItem,
    PortfolioItemType,
    Service,
    Shop,
)
from barberbook.user.models import Role, User

SEED_PASSWORD = "password"


def seed_users() -> list[User]:
    return [
        User(
            id="admin1",
            name="Admin",
            email="admin@.com",
            password=SEED_PASSWORD,
            role=Role.admin,
        ),
        User(
            id="barber1",
            name="Edward Scissorhands",
            email="edward@barberbook.com",
            password=SEED_PASSWORD,
            role=Role.barber,
        ),
        User(
            id="barber2",
            name="Sweeney Todd",
            email="sweeney@barberbook.com",
            password=SEED_PASSWORD,
            role=Role.barber,
        ),
        User(
            id="barber3",
            name="Pending Pete",
            email="pete@barberbook.com",
            password=SEED_PASSWORD,
            role=Role.barber,
            is_approved=False,
        ),
        User(
            id="client1",
            name="John Doe",
            email="john@email.com",
            password=SEED_PASSWORD,
            role=Role.client,
        ),
        User(
            id="client2",
            name="Jane Smith",
            email="jane@email.com",
            password=SEED_PASSWORD,
            role=Role.client,
            is_banned=True,
        ),
    ]


def _image(item_id: str, seed: str, caption: str) -> PortfolioItem:
    return PortfolioItem(
        id=item_id,
        type=PortfolioItemType.image,
        url=f"https://picsum.photos/seed/{seed}/400",
        caption=caption,
    )


def seed_profiles() -> list[BarberProfile]:
    return [
        BarberProfile(
            user_id="barber1",
            bio=(
                "Master of classic and modern styles. 15 years of experience "
                "creating sharp, stylish looks for discerning clients. I believe "
                "a good haircut is the best accessory."
            ),
            services=[
                Service(id="s1-1", name="Classic Cut", price=30, duration=30),
                Service(id="s1-2", name="Beard Trim", price=15, duration=15),
                Service(id="s1-3", name="Hot Towel Shave", price=40, duration=45),
            ],
            profile_picture_url="https://picsum.photos/seed/edward/400",
            shop=Shop(
                name="Edward's Edge",
                address="123 Main St, New York, NY",
                location=Location(lat=40.7128, lng=-74.0060),
            ),
            portfolio=[
                _image("p1-1", "work1", "Clean fade"),
                _image("p1-2", "work2", "Sharp beard trim"),
                _image("p1-3", "workA", "Classic Pompadour"),
                _image("p1-4", "workB", "Textured Crop"),
            ],
        ),
        BarberProfile(
            user_id="barber2",
            bio=(
                "Specializing in the closest shaves you've ever had. A true "
                "artist with a razor. Come for the shave, stay for the "
                "immaculate vibes."
            ),
            services=[
                Service(id="s2-1", name="Modern Fade", price=35, duration=40),
                Service(id="s2-2", name="The Full Works", price=60, duration=60),
            ],
            profile_picture_url="https://picsum.photos/seed/sweeney/400",
            shop=Shop(
                name="Sweeney's Cuts",
                address="456 Fleet St, Los Angeles, CA",
                location=Location(lat=34.0522, lng=-118.2437),
            ),
            portfolio=[
                _image("p2-1", "work3", "The closest shave"),
                _image("p2-2", "workC", "Precision Line-up"),
            ],
        ),
        BarberProfile(
            user_id="barber3",
            bio="Eager to start and show my skills!",
            services=[],
            profile_picture_url="https://picsum.photos/seed/pete/400",
            shop=Shop(
                name="Pete's Place",
                address="789 Pending Ave, Chicago, IL",
                location=Location(lat=41.8781, lng=-87.6298),
            ),
            portfolio=[],
        ),
    ]


def seed_appointments(now: datetime | None = None) -> list[Appointment]:
    """Appointments dated relative to ``now`` (one upcoming, two past)."""
    now = now or datetime.now(UTC)
    return [
        Appointment(
            id="appt1",
            client_id="client1",
            barber_id="barber1",
            service_id="s1-1",
            date=now + timedelta(days=2),
        ),
        Appointment(
            id="appt2",
            client_id="client1",
            barber_id="barber1",
            service_id="s1-2",
            date=now - timedelta(days=2),
            status=AppointmentStatus.completed,
            rating=5,
            review="Edward was amazing! Best haircut of my life.",
        ),
        Appointment(
            id="appt3",
            client_id="client1",
            barber_id="barber2",
            service_id="s2-1",
            date=now - timedelta(days=5),
            status=AppointmentStatus.completed,
            rating=4,
            review="Great shave, very precise.",
        ),
    ]
