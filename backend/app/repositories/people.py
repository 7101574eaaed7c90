"""Data access for people (users and admins share the ``people`` table)."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

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
from backend.app.repositories.emails import EmailRepository
from backend.app.schemas.common import contains
from backend.app.schemas.people import (
    CreatePersonDto,
    CreateUserDto,
    SearchPeopleQueryDto,
    UpdateAdminDto,
    UpdateUserDto,
)

TABLE = models.Person.__tablename__

# User search narrows with every supplied field; admin search matches any of them.
# TODO: confirm with product whether admin search should also use AND.
SEARCH_JOINERS: Dict[models.Role, str] = {
    models.Role.USER: "AND",
    models.Role.ADMIN: "OR",
}


def _enum_value(value):
    return None if value is None else value.value


class PersonRepository:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.gateway = PersistenceGateway(session)
        self.emails = EmailRepository(session)

    def _identity(self, role: models.Role, person_id: uuid.UUID):
        return predicate("id = ? AND role = ?", person_id, role.value)

    def get_person(self, role: models.Role, person_id: uuid.UUID) -> Optional[Tuple[models.Person, List[models.Email]]]:
        person = self.session.scalars(
            select(models.Person).where(models.Person.id == person_id, models.Person.role == role.value)
        ).first()
        if person is None:
            return None
        return person, self.emails.get_person_emails(person.id)

    def search_people(
        self,
        role: models.Role,
        query: SearchPeopleQueryDto,
        fetch_emails: bool = False,
    ) -> List[Tuple[models.Person, Optional[List[models.Email]]]]:
        filters = FilterSet(
            [
                ("firstname LIKE ?", contains(query.firstname)),
                ("lastname LIKE ?", contains(query.lastname)),
                ("LOWER(username) LIKE ?", contains(query.username, lower=True)),
            ]
        )
        statement = build_select(
            f"SELECT * FROM {TABLE}",
            filters,
            query.pagination(),
            joiner=SEARCH_JOINERS[role],
            scope=predicate("role = ?", role.value),
            order_by="created_at, id",
            dialect=self.gateway.dialect,
        )
        people = self.gateway.fetch_all(statement, models.Person)
        return [(p, self.emails.get_person_emails(p.id) if fetch_emails else None) for p in people]

    def create_person(self, role: models.Role, dto: CreatePersonDto) -> Tuple[models.Person, List[models.Email]]:
        """Insert the person and their primary (private) email in one transaction."""
        person = models.Person(
            firstname=dto.firstname,
            lastname=dto.lastname,
            username=dto.username,
            password=dto.password,
            gender=_enum_value(dto.gender),
            birthdate=dto.birthdate,
            is_profile_private=dto.is_profile_private if isinstance(dto, CreateUserDto) else False,
            role=role.value,
        )
        email = models.Email(address=str(dto.email), is_primary=True, is_private=True)
        person.emails.append(email)
        self.session.add(person)
        self.session.commit()
        self.session.refresh(person)
        self.session.refresh(email)
        logger.info("Created %s id=%s", role.value, person.id)
        return person, [email]

    def update_person(self, role: models.Role, person_id: uuid.UUID, dto: UpdateAdminDto) -> bool:
        assignments = AssignmentSet(
            [
                ("firstname", dto.firstname),
                ("lastname", dto.lastname),
                ("birthdate", dto.birthdate),
                ("gender", _enum_value(dto.gender)),
            ]
        )
        if isinstance(dto, UpdateUserDto):
            assignments.add("is_profile_private", dto.is_profile_private)
            assignments.add("biography", dto.biography)
        assignments.add("username", dto.username)
        if not assignments:
            raise EmptyAssignmentSet(TABLE)
        assignments.add("updated_at", datetime.now(timezone.utc))

        statement = build_update(TABLE, assignments, self._identity(role, person_id), dialect=self.gateway.dialect)
        updated = self.gateway.execute(statement) > 0
        self.session.commit()
        return updated

    def delete_person(self, role: models.Role, person_id: uuid.UUID) -> bool:
        # Emails go first; SQLite does not enforce ON DELETE CASCADE by default.
        owned = build_delete(
            models.Email.__tablename__,
            predicate(f"owner_id IN (SELECT id FROM {TABLE} WHERE id = ? AND role = ?)", person_id, role.value),
            dialect=self.gateway.dialect,
        )
        self.gateway.execute(owned)
        deleted = self.gateway.execute(
            build_delete(TABLE, self._identity(role, person_id), dialect=self.gateway.dialect)
        ) > 0
        self.session.commit()
        return deleted
