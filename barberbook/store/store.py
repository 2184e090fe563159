"""Domain store.

Single owner of users, barber profiles and appointments, plus the current
session pointer and the theme preference. Every mutation goes through this
class; every query hands out deep copies.

Mutations are coroutines that sleep a simulated latency and only then read
and write their collection. Two overlapping calls therefore commit in the
order their delays expire, not in the order they were issued; nothing
queues or coalesces them.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from barberbook.appointment.exceptions import InvalidRatingError
from barberbook.appointment.models import (
    MAX_RATING,
    MIN_RATING,
    Appointment,
    AppointmentStatus,
)
from barberbook.auth.exceptions import (
    AccountBannedError,
    InvalidCredentialsError,
    PendingApprovalError,
)
from barberbook.barber.models import BarberProfile, placeholder_profile
from barberbook.db.slots import CURRENT_USER_SLOT, THEME_SLOT
from barberbook.preferences.models import THEMES, Theme, toggled
from barberbook.ranking.engine import RatingSummary, aggregate_rating
from barberbook.store.seed import seed_appointments, seed_profiles, seed_users
from barberbook.user.exceptions import EmailExistsError
from barberbook.user.models import Role, User

if TYPE_CHECKING:
    from barberbook.core.settings import Settings
    from barberbook.db.slots import SlotStore

logger = logging.getLogger(__name__)

UNKNOWN_USER = "Unknown User"
UNKNOWN_BARBER = "Unknown Barber"
UNKNOWN_CLIENT = "Unknown Client"
UNKNOWN_SERVICE = "Unknown Service"

DEFAULT_LATENCY = 0.5
DEFAULT_SHORT_LATENCY = 0.3


class StoreEvent(str, Enum):
    """Change notifications sent to subscribers after a commit."""

    session_changed = "session_changed"
    user_registered = "user_registered"
    user_moderated = "user_moderated"
    profile_replaced = "profile_replaced"
    appointment_recorded = "appointment_recorded"
    appointment_rated = "appointment_rated"
    appointment_status_changed = "appointment_status_changed"
    theme_changed = "theme_changed"


Listener = Callable[[StoreEvent], None]


class DomainStore:
    """In-memory authority over all domain collections."""

    def __init__(
        self,
        users: Iterable[User] = (),
        barber_profiles: Iterable[BarberProfile] = (),
        appointments: Iterable[Appointment] = (),
        *,
        slots: SlotStore | None = None,
        latency: float = DEFAULT_LATENCY,
        short_latency: float = DEFAULT_SHORT_LATENCY,
        default_theme: Theme = "dark",
    ):
        self._users: list[User] = [u.model_copy(deep=True) for u in users]
        self._profiles: list[BarberProfile] = [
            p.model_copy(deep=True) for p in barber_profiles
        ]
        self._appointments: list[Appointment] = [
            a.model_copy(deep=True) for a in appointments
        ]
        self._slots = slots
        self._latency = latency
        self._short_latency = short_latency
        self._current_user: User | None = None
        self._theme: Theme = default_theme
        self._listeners: list[Listener] = []

    @classmethod
    def from_settings(
        cls, settings: Settings, slots: SlotStore | None = None
    ) -> DomainStore:
        """Build the store for the running application and restore persisted slots."""
        if settings.seed_data:
            store = cls(
                seed_users(),
                seed_profiles(),
                seed_appointments(),
                slots=slots,
                latency=settings.store_latency,
                short_latency=settings.store_short_latency,
                default_theme=settings.default_theme,
            )
        else:
            store = cls(
                slots=slots,
                latency=settings.store_latency,
                short_latency=settings.store_short_latency,
                default_theme=settings.default_theme,
            )
        store.restore()
        return store

    # --- persistence ---

    def restore(self) -> None:
        """Load the session pointer and theme from their slots (startup only)."""
        if self._slots is None:
            return

        raw_user = self._slots.read(CURRENT_USER_SLOT)
        if raw_user is not None:
            try:
                self._current_user = User.model_validate_json(raw_user)
            except ValueError:
                logger.warning("Discarding unreadable session slot")
                self._slots.clear(CURRENT_USER_SLOT)
            else:
                logger.info(
                    "Session restored",
                    extra={"user_id": self._current_user.id},
                )

        raw_theme = self._slots.read(THEME_SLOT)
        if raw_theme in THEMES:
            self._theme = raw_theme  # type: ignore[assignment]

    def _set_current_user(self, user: User | None) -> None:
        self._current_user = user
        if self._slots is not None:
            if user is None:
                self._slots.clear(CURRENT_USER_SLOT)
            else:
                self._slots.write(CURRENT_USER_SLOT, user.model_dump_json())
        self._notify(StoreEvent.session_changed)

    # --- subscriptions ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    @staticmethod
    async def _simulate_latency(delay: float) -> None:
        await asyncio.sleep(delay)

    # --- session ---

    @property
    def current_user(self) -> User | None:
        if self._current_user is None:
            return None
        return self._current_user.model_copy(deep=True)

    async def authenticate(self, email: str, password: str) -> User:
        """Log in by exact email and password.

        Raises:
            InvalidCredentialsError: No user with this email/password
            AccountBannedError: User is banned (checked before approval)
            PendingApprovalError: Barber not yet approved
        """
        await self._simulate_latency(self._latency)

        user = next(
            (u for u in self._users if u.email == email and u.password == password),
            None,
        )
        if user is None:
            logger.info("Login refused: invalid credentials")
            raise InvalidCredentialsError()
        if user.is_banned:
            logger.info("Login refused: banned", extra={"user_id": user.id})
            raise AccountBannedError()
        if user.is_pending:
            logger.info("Login refused: pending approval", extra={"user_id": user.id})
            raise PendingApprovalError()

        self._set_current_user(user.model_copy(deep=True))
        logger.info(
            "User logged in", extra={"user_id": user.id, "role": user.role.value}
        )
        return user.model_copy(deep=True)

    def end_session(self) -> None:
        """Log out. Never fails, even without a session."""
        user = self._current_user
        self._set_current_user(None)
        if user is not None:
            logger.info("User logged out", extra={"user_id": user.id})

    # --- users ---

    async def register_user(
        self, name: str, email: str, password: str, role: Role
    ) -> User:
        """Create a user; barbers also get a placeholder profile.

        Barbers start unapproved. Registration does not log the user in.

        Raises:
            EmailExistsError: Email (exact, case-sensitive) already taken
        """
        role = Role(role)
        await self._simulate_latency(self._latency)

        if any(u.email == email for u in self._users):
            logger.info("Registration refused: email exists")
            raise EmailExistsError()

        user = User(
            name=name,
            email=email,
            password=password,
            role=role,
            is_banned=False,
            is_approved=role != Role.barber,
        )
        self._users.append(user)
        if role == Role.barber:
            self._profiles.append(placeholder_profile(user.id, name))

        logger.info(
            "User registered", extra={"user_id": user.id, "role": role.value}
        )
        self._notify(StoreEvent.user_registered)
        return user.model_copy(deep=True)

    async def set_user_moderation_flags(
        self,
        user_id: str,
        *,
        is_banned: bool | None = None,
        is_approved: bool | None = None,
    ) -> None:
        """Partially update ban/approval flags. Unknown ids are a silent no-op."""
        await self._simulate_latency(self._short_latency)

        updates: dict[str, bool] = {}
        if is_banned is not None:
            updates["is_banned"] = is_banned
        if is_approved is not None:
            updates["is_approved"] = is_approved

        for index, user in enumerate(self._users):
            if user.id == user_id:
                self._users[index] = user.model_copy(update=updates)
                break
        else:
            logger.debug("Moderation skipped: no user %s", user_id)
            return

        logger.info(
            "User moderated",
            extra={"user_id": user_id, "operation": sorted(updates)},
        )
        self._notify(StoreEvent.user_moderated)

    def users(self) -> list[User]:
        return [u.model_copy(deep=True) for u in self._users]

    def get_user(self, user_id: str) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user.model_copy(deep=True)
        return None

    def pending_barbers(self) -> list[User]:
        return [u.model_copy(deep=True) for u in self._users if u.is_pending]

    def moderatable_users(self) -> list[User]:
        """Every account an administrator can ban or approve (non-admins)."""
        return [u.model_copy(deep=True) for u in self._users if u.role != Role.admin]

    # --- barber profiles ---

    async def replace_barber_profile(self, profile: BarberProfile) -> None:
        """Overwrite the profile owned by ``profile.user_id``.

        Never inserts: without an existing profile this is a silent no-op.
        """
        replacement = profile.model_copy(deep=True)
        await self._simulate_latency(self._latency)

        for index, existing in enumerate(self._profiles):
            if existing.user_id == replacement.user_id:
                self._profiles[index] = replacement
                break
        else:
            logger.debug("Profile replace skipped: no profile %s", profile.user_id)
            return

        logger.info("Barber profile replaced", extra={"user_id": profile.user_id})
        self._notify(StoreEvent.profile_replaced)

    def barber_profiles(self) -> list[BarberProfile]:
        return [p.model_copy(deep=True) for p in self._profiles]

    def get_barber_profile(self, user_id: str) -> BarberProfile | None:
        for profile in self._profiles:
            if profile.user_id == user_id:
                return profile.model_copy(deep=True)
        return None

    # --- appointments ---

    async def record_appointment(
        self, client_id: str, barber_id: str, service_id: str, date: datetime
    ) -> Appointment:
        """Book an appointment with status Scheduled.

        client_id, barber_id and service_id are taken as given; no lookup
        confirms that they exist. A real system would validate them here.
        """
        await self._simulate_latency(self._latency)

        appointment = Appointment(
            client_id=client_id,
            barber_id=barber_id,
            service_id=service_id,
            date=date,
            status=AppointmentStatus.scheduled,
        )
        self._appointments.append(appointment)

        logger.info(
            "Appointment recorded",
            extra={"user_id": client_id, "operation": appointment.id},
        )
        self._notify(StoreEvent.appointment_recorded)
        return appointment.model_copy(deep=True)

    async def rate_appointment(
        self, appointment_id: str, rating: int, review: str | None
    ) -> None:
        """Attach a rating and review. Unknown ids are a silent no-op.

        The appointment's status is not checked.

        Raises:
            InvalidRatingError: Rating outside 1..5
        """
        if (
            isinstance(rating, bool)
            or not isinstance(rating, int)
            or not MIN_RATING <= rating <= MAX_RATING
        ):
            raise InvalidRatingError()

        await self._simulate_latency(self._short_latency)

        if not self._update_appointment(
            appointment_id, {"rating": rating, "review": review}
        ):
            logger.debug("Rating skipped: no appointment %s", appointment_id)
            return

        logger.info("Appointment rated", extra={"operation": appointment_id})
        self._notify(StoreEvent.appointment_rated)

    async def set_appointment_status(
        self, appointment_id: str, status: AppointmentStatus
    ) -> None:
        """Move an appointment to another status. Unknown ids are a silent no-op.

        No transition rules are enforced; this is the administrative way an
        appointment becomes Completed (and therefore ratable) or Cancelled.
        """
        status = AppointmentStatus(status)
        await self._simulate_latency(self._short_latency)

        if not self._update_appointment(appointment_id, {"status": status}):
            logger.debug("Status change skipped: no appointment %s", appointment_id)
            return

        logger.info(
            "Appointment status changed to %s",
            status.value,
            extra={"operation": appointment_id},
        )
        self._notify(StoreEvent.appointment_status_changed)

    def _update_appointment(self, appointment_id: str, updates: dict) -> bool:
        for index, appointment in enumerate(self._appointments):
            if appointment.id == appointment_id:
                self._appointments[index] = appointment.model_copy(update=updates)
                return True
        return False

    def appointments(self) -> list[Appointment]:
        return [a.model_copy(deep=True) for a in self._appointments]

    def get_appointment(self, appointment_id: str) -> Appointment | None:
        for appointment in self._appointments:
            if appointment.id == appointment_id:
                return appointment.model_copy(deep=True)
        return None

    def appointments_for_client(self, client_id: str) -> list[Appointment]:
        """A client's appointments, newest first."""
        mine = [a for a in self._appointments if a.client_id == client_id]
        mine.sort(key=lambda a: a.date, reverse=True)
        return [a.model_copy(deep=True) for a in mine]

    def appointments_for_barber(self, barber_id: str) -> list[Appointment]:
        return [
            a.model_copy(deep=True)
            for a in self._appointments
            if a.barber_id == barber_id
        ]

    def rating_for(self, barber_id: str) -> RatingSummary:
        return aggregate_rating(self._appointments, barber_id)

    # --- lookups (sentinel on miss, never raise) ---

    def resolve_user_name(self, user_id: str, fallback: str = UNKNOWN_USER) -> str:
        for user in self._users:
            if user.id == user_id:
                return user.name
        return fallback

    def barber_name(self, barber_id: str) -> str:
        return self.resolve_user_name(barber_id, UNKNOWN_BARBER)

    def client_name(self, client_id: str) -> str:
        return self.resolve_user_name(client_id, UNKNOWN_CLIENT)

    def resolve_service_name(self, barber_id: str, service_id: str) -> str:
        for profile in self._profiles:
            if profile.user_id == barber_id:
                service = profile.find_service(service_id)
                return service.name if service is not None else UNKNOWN_SERVICE
        return UNKNOWN_SERVICE

    # --- preferences ---

    @property
    def theme(self) -> Theme:
        return self._theme

    def toggle_theme(self) -> Theme:
        """Flip between light and dark and persist the choice."""
        self._theme = toggled(self._theme)
        if self._slots is not None:
            self._slots.write(THEME_SLOT, self._theme)
        self._notify(StoreEvent.theme_changed)
        return self._theme
