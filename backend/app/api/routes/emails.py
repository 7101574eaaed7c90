import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from backend.app.api.deps import get_email_repository
from backend.app.repositories.emails import EmailRepository
from backend.app.schemas.common import MessageResponse
from backend.app.schemas.emails import (
    CreateEmailDto,
    EmailListResponseDto,
    EmailResponseDto,
    PersonalEmailDto,
    SearchEmailQueryDto,
    UpdateEmailDto,
)

router = APIRouter(prefix="/api/people/{owner_id}/emails", tags=["emails"])


@router.get("", response_model=EmailListResponseDto)
def get_emails(
    owner_id: uuid.UUID,
    query: Annotated[SearchEmailQueryDto, Query()],
    repo: EmailRepository = Depends(get_email_repository),
):
    emails = repo.list_emails(owner_id, query)
    return EmailListResponseDto(
        emails=[PersonalEmailDto.from_model(e) for e in emails],
        results=len(emails),
        owner_id=owner_id,
    )


@router.get("/{email_id}", response_model=EmailResponseDto)
def get_email(owner_id: uuid.UUID, email_id: uuid.UUID, repo: EmailRepository = Depends(get_email_repository)):
    email = repo.get_email(owner_id, email_id)
    if email is None:
        raise HTTPException(status_code=404, detail="Email not found")
    return EmailResponseDto(email=PersonalEmailDto.from_model(email), owner_id=owner_id)


@router.post("", status_code=201, response_model=EmailResponseDto)
def save_email(owner_id: uuid.UUID, body: CreateEmailDto, repo: EmailRepository = Depends(get_email_repository)):
    if not repo.owner_exists(owner_id):
        raise HTTPException(status_code=404, detail="Owner not found")
    email = repo.create_email(owner_id, body)
    return EmailResponseDto(status=201, email=PersonalEmailDto.from_model(email), owner_id=owner_id)


@router.patch("/{email_id}", response_model=MessageResponse)
def update_email(
    owner_id: uuid.UUID,
    email_id: uuid.UUID,
    body: UpdateEmailDto,
    repo: EmailRepository = Depends(get_email_repository),
):
    if not repo.update_email(owner_id, email_id, body):
        raise HTTPException(status_code=404, detail="Email not found")
    return MessageResponse(message="Email has been updated")


@router.delete("/{email_id}", response_model=MessageResponse)
def delete_email(owner_id: uuid.UUID, email_id: uuid.UUID, repo: EmailRepository = Depends(get_email_repository)):
    if not repo.delete_email(owner_id, email_id):
        raise HTTPException(status_code=404, detail="Email not found")
    return MessageResponse(message="Email has been deleted")
