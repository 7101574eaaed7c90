"""Data access for email addresses owned by people."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.app.core.logging import logger
from backend.app.db import models
from backend.app.db.gateway import PersistenceGateway
from backend.app.queries.assembler import (
    AssignmentSet,
    EmptyAssignmentSet,
    FilterSet,
    build_delete,
    build_select,
    build_update,
    predicate,
)
from backend.app.schemas.emails import CreateEmailDto, SearchEmailQueryDto, UpdateEmailDto

TABLE = models.Email.__tablename__


class EmailRepository:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.gateway = PersistenceGateway(session)

    def get_person_emails(self, owner_id: uuid.UUID) -> List[models.Email]:
        return list(
            self.session.scalars(
                select(models.Email)
                .where(models.Email.owner_id == owner_id)
                .order_by(models.Email.created_at, models.Email.id)
            ).all()
        )

    def list_emails(self, owner_id: uuid.UUID, query: SearchEmailQueryDto) -> List[models.Email]:
        filters = FilterSet(
            [
                ("is_primary = ?", query.is_primary),
                ("is_private = ?", query.is_private),
                ("is_verified = ?", query.is_verified),
            ]
        )
        statement = build_select(
            f"SELECT * FROM {TABLE}",
            filters,
            query.pagination(),
            scope=predicate("owner_id = ?", owner_id),
            order_by="created_at, id",
            dialect=self.gateway.dialect,
        )
        return self.gateway.fetch_all(statement, models.Email)

    def owner_exists(self, owner_id: uuid.UUID) -> bool:
        return self.session.get(models.Person, owner_id) is not None

    def get_email(self, owner_id: uuid.UUID, email_id: uuid.UUID) -> Optional[models.Email]:
        email = self.session.get(models.Email, email_id)
        if email is None or email.owner_id != owner_id:
            return None
        return email

    def create_email(self, owner_id: uuid.UUID, dto: CreateEmailDto) -> models.Email:
        email = models.Email(
            owner_id=owner_id,
            address=str(dto.address),
            is_private=True if dto.is_private is None else dto.is_private,
            is_primary=False if dto.is_primary is None else dto.is_primary,
        )
        self.session.add(email)
        self.session.commit()
        self.session.refresh(email)
        logger.info("Created email id=%s owner_id=%s", email.id, owner_id)
        return email

    def update_email(self, owner_id: uuid.UUID, email_id: uuid.UUID, dto: UpdateEmailDto) -> bool:
        assignments = AssignmentSet(
            [
                ("address", None if dto.address is None else str(dto.address)),
                ("is_private", dto.is_private),
                ("is_primary", dto.is_primary),
                ("is_verified", dto.is_verified),
            ]
        )
        if not assignments:
            raise EmptyAssignmentSet(TABLE)
        assignments.add("updated_at", datetime.now(timezone.utc))

        statement = build_update(
            TABLE,
            assignments,
            predicate("id = ? AND owner_id = ?", email_id, owner_id),
            dialect=self.gateway.dialect,
        )
        updated = self.gateway.execute(statement) > 0
        self.session.commit()
        return updated

    def delete_email(self, owner_id: uuid.UUID, email_id: uuid.UUID) -> bool:
        statement = build_delete(
            TABLE,
            predicate("id = ? AND owner_id = ?", email_id, owner_id),
            dialect=self.gateway.dialect,
        )
        deleted = self.gateway.execute(statement) > 0
        self.session.commit()
        return deleted
