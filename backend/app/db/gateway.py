"""Executes assembled statements on a SQLAlchemy session."""
from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import List, Type, TypeVar

from sqlalchemy import Boolean, Date, DateTime, Uuid, bindparam, select, text
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import TextClause

from backend.app.core.logging import logger
from backend.app.queries.assembler import Dialect, Statement

T = TypeVar("T")

# LIMIT/OFFSET order per backend; PostgreSQL takes the statement as assembled.
_LIMIT_FIRST_BACKENDS = {"sqlite", "mysql", "mariadb"}


def dialect_for(backend_name: str) -> Dialect:
    return Dialect(paramstyle="named", offset_first=backend_name not in _LIMIT_FIRST_BACKENDS)


def _bind_type(value):
    # bool before int/date checks; datetime before date (datetime is a date subclass).
    if isinstance(value, bool):
        return Boolean()
    if isinstance(value, uuid.UUID):
        return Uuid()
    if isinstance(value, datetime):
        return DateTime(timezone=True)
    if isinstance(value, date):
        return Date()
    return None


def to_text(statement: Statement) -> TextClause:
    binds = [
        bindparam(name, value, type_=_bind_type(value))
        for name, value in statement.params().items()
    ]
    return text(statement.sql).bindparams(*binds)


class PersistenceGateway:
    """Runs ``Statement`` objects built with the named paramstyle.

    Execution errors (``SQLAlchemyError``) are not caught here; callers decide
    how to present them.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.dialect = dialect_for(session.get_bind().dialect.name)

    def fetch_all(self, statement: Statement, entity: Type[T]) -> List[T]:
        logger.debug("fetch %s: %s %r", entity.__name__, statement.sql, statement.values)
        query = select(entity).from_statement(to_text(statement))
        return list(self.session.scalars(query).all())

    def execute(self, statement: Statement) -> int:
        """Run a write statement and return the number of affected rows."""
        result = self.session.execute(to_text(statement))
        logger.debug("execute: %s %r -> %s row(s)", statement.sql, statement.values, result.rowcount)
        return result.rowcount
