"""Persistence table models.

Only two named slots outlive a restart: the current user and the theme.
Domain collections are never written here.
"""

from sqlmodel import Field, SQLModel

from barberbook.core.mixins import TimestampMixin


class Slot(TimestampMixin, SQLModel, table=True):
    """A named slot holding one JSON-serialized value."""

    __tablename__: str = "slots"

    key: str = Field(primary_key=True, max_length=64)
    value: str
