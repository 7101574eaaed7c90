from sqlalchemy.engine import Engine

from backend.app.db import models  # noqa: F401  registers tables on Base.metadata
from backend.app.db.base import Base
from backend.app.db.session import engine


def init_db(bind: Engine = engine) -> None:
    """Create tables in the configured database (useful for local dev without migrations)."""
    Base.metadata.create_all(bind=bind)
