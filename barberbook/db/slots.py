"""Named persistence slots.

Thin key/value shim over the ``slots`` table. Values are JSON text; callers
own (de)serialization.
"""

import logging

from sqlalchemy import Engine
from sqlmodel import Session

from barberbook.db.models import Slot

logger = logging.getLogger(__name__)

CURRENT_USER_SLOT = "currentUser"
THEME_SLOT = "theme"


class SlotStore:
    """Read, write and clear named slots."""

    def __init__(self, engine: Engine):
        self._engine = engine

    def read(self, key: str) -> str | None:
        with Session(self._engine) as session:
            slot = session.get(Slot, key)
            return slot.value if slot is not None else None

    def write(self, key: str, value: str) -> None:
        with Session(self._engine) as session:
            slot = session.get(Slot, key)
            if slot is None:
                slot = Slot(key=key, value=value)
            else:
                slot.value = value
            session.add(slot)
            session.commit()
        logger.debug("Slot written: %s", key)

    def clear(self, key: str) -> None:
        with Session(self._engine) as session:
            slot = session.get(Slot, key)
            if slot is None:
                return
            session.delete(slot)
            session.commit()
        logger.debug("Slot cleared: %s", key)
