"""
Model package.

`SQLModel.metadata` is populated only when the table models are imported;
`barberbook.db.engine.create_db_engine` imports this module before calling
`create_all`, so every `table=True` model must be imported here.
"""

# Import table models so SQLModel registers them in metadata.
from barberbook.db.models import Slot  # noqa: F401
