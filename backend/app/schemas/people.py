import uuid
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from backend.app.db import models
from backend.app.schemas.common import PageQuery
from backend.app.schemas.emails import EmailDto


class CreatePersonDto(BaseModel):
    firstname: str = Field(..., min_length=1)
    lastname: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)
    gender: Optional[models.Gender] = None
    birthdate: Optional[date] = None


class CreateUserDto(CreatePersonDto):
    is_profile_private: bool = False


class CreateAdminDto(CreatePersonDto):
    pass


class UpdateAdminDto(BaseModel):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    username: Optional[str] = None
    birthdate: Optional[date] = None
    gender: Optional[models.Gender] = None


class UpdateUserDto(UpdateAdminDto):
    is_profile_private: Optional[bool] = None
    biography: Optional[str] = None


class SearchPeopleQueryDto(PageQuery):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    username: Optional[str] = None
    # Include each person's email addresses in the results.
    emails: bool = False


class PersonDto(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID
    username: str
    firstname: str
    lastname: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    emails: Optional[List[EmailDto]] = None

    @classmethod
    def from_model(cls, person: models.Person, emails: Optional[List[models.Email]] = None) -> "PersonDto":
        dto = cls(
            id=person.id,
            username=person.username,
            firstname=person.firstname,
            lastname=person.lastname,
            created_at=person.created_at,
            updated_at=person.updated_at,
        )
        if emails is not None:
            dto.emails = [EmailDto.from_model(e, remove_owner_id=True) for e in emails]
        return dto


class UserResponseDto(BaseModel):
    status: int = 200
    user: PersonDto


class UserListResponseDto(BaseModel):
    status: int = 200
    users: List[PersonDto]
    results: int


class AdminResponseDto(BaseModel):
    status: int = 200
    admin: PersonDto


class AdminListResponseDto(BaseModel):
    status: int = 200
    admins: List[PersonDto]
    results: int
