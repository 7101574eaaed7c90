from fastapi import Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.repositories.emails import EmailRepository
from backend.app.repositories.people import PersonRepository
from backend.app.repositories.posts import PostRepository


def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    return PostRepository(db)


def get_person_repository(db: Session = Depends(get_db)) -> PersonRepository:
    return PersonRepository(db)


def get_email_repository(db: Session = Depends(get_db)) -> EmailRepository:
    return EmailRepository(db)
