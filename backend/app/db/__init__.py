from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine, get_db
from backend.app.db import models
from backend.app.db.errors import ConstraintKind, classify_integrity_error
from backend.app.db.gateway import PersistenceGateway, dialect_for

__all__ = [
    "Base",
    "ConstraintKind",
    "PersistenceGateway",
    "SessionLocal",
    "classify_integrity_error",
    "dialect_for",
    "engine",
    "get_db",
    "models",
]
