import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from backend.app.db import models
from backend.app.schemas.common import PageQuery

_ACCEPT_BOTH_NAMES = ConfigDict(populate_by_name=True)


class CreateEmailDto(BaseModel):
    model_config = _ACCEPT_BOTH_NAMES

    address: EmailStr
    is_private: Optional[bool] = Field(None, alias="isPrivate")
    is_primary: Optional[bool] = Field(None, alias="isPrimary")


class UpdateEmailDto(BaseModel):
    model_config = _ACCEPT_BOTH_NAMES

    address: Optional[EmailStr] = None
    is_private: Optional[bool] = Field(None, alias="isPrivate")
    is_primary: Optional[bool] = Field(None, alias="isPrimary")
    is_verified: Optional[bool] = Field(None, alias="isVerified")


class SearchEmailQueryDto(PageQuery):
    is_primary: Optional[bool] = None
    is_private: Optional[bool] = None
    is_verified: Optional[bool] = None


class EmailDto(BaseModel):
    """Public view of an address; ``owner_id`` is dropped when nested under its owner."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID
    address: str
    is_primary: bool = Field(alias="isPrimary")
    owner_id: Optional[uuid.UUID] = Field(None, alias="ownerId")

    @classmethod
    def from_model(cls, email: models.Email, remove_owner_id: bool = False) -> "EmailDto":
        dto = cls.model_validate(email)
        if remove_owner_id:
            dto.owner_id = None
        return dto


class PersonalEmailDto(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID
    address: str
    is_primary: bool = Field(alias="isPrimary")
    is_private: bool = Field(alias="isPrivate")
    is_verified: bool = Field(alias="isVerified")

    @classmethod
    def from_model(cls, email: models.Email) -> "PersonalEmailDto":
        return cls.model_validate(email)


class EmailResponseDto(BaseModel):
    model_config = _ACCEPT_BOTH_NAMES

    status: int = 200
    email: PersonalEmailDto
    owner_id: uuid.UUID = Field(alias="ownerId")


class EmailListResponseDto(BaseModel):
    model_config = _ACCEPT_BOTH_NAMES

    status: int = 200
    emails: List[PersonalEmailDto]
    results: int
    owner_id: uuid.UUID = Field(alias="ownerId")
