"""Data access for blog posts."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

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
from backend.app.schemas.common import contains
from backend.app.schemas.posts import CreatePostDto, SearchPostQueryDto, UpdatePostDto

TABLE = models.Post.__tablename__


class PostRepository:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.gateway = PersistenceGateway(session)

    def get_post(self, post_id: uuid.UUID) -> Optional[models.Post]:
        return self.session.get(models.Post, post_id)

    def search_posts(self, query: SearchPostQueryDto) -> List[models.Post]:
        # Title search is a case-insensitive "contains".
        filters = FilterSet([("LOWER(title) LIKE ?", contains(query.title, lower=True))])
        statement = build_select(
            f"SELECT * FROM {TABLE}",
            filters,
            query.pagination(),
            order_by="created_at, id",
            dialect=self.gateway.dialect,
        )
        return self.gateway.fetch_all(statement, models.Post)

    def create_post(self, dto: CreatePostDto) -> models.Post:
        post = models.Post(title=dto.title, description=dto.description)
        self.session.add(post)
        self.session.commit()
        self.session.refresh(post)
        logger.info("Created post id=%s", post.id)
        return post

    def update_post(self, post_id: uuid.UUID, dto: UpdatePostDto) -> bool:
        assignments = AssignmentSet(
            [
                ("title", dto.title),
                ("description", dto.description),
            ]
        )
        if not assignments:
            raise EmptyAssignmentSet(TABLE)
        assignments.add("updated_at", datetime.now(timezone.utc))

        statement = build_update(TABLE, assignments, predicate("id = ?", post_id), dialect=self.gateway.dialect)
        updated = self.gateway.execute(statement) > 0
        self.session.commit()
        return updated

    def delete_post(self, post_id: uuid.UUID) -> bool:
        statement = build_delete(TABLE, predicate("id = ?", post_id), dialect=self.gateway.dialect)
        deleted = self.gateway.execute(statement) > 0
        self.session.commit()
        return deleted
