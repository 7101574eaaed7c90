import uuid
from typing import Annotated, Type

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from backend.app.api.deps import get_person_repository
from backend.app.db.models import Role
from backend.app.repositories.people import PersonRepository
from backend.app.schemas.common import MessageResponse
from backend.app.schemas.people import (
    AdminListResponseDto,
    AdminResponseDto,
    CreateAdminDto,
    CreateUserDto,
    PersonDto,
    SearchPeopleQueryDto,
    UpdateAdminDto,
    UpdateUserDto,
    UserListResponseDto,
    UserResponseDto,
)


def build_people_router(
    role: Role,
    create_dto: Type[BaseModel],
    update_dto: Type[BaseModel],
    item_response: Type[BaseModel],
    list_response: Type[BaseModel],
) -> APIRouter:
    """CRUD routes for one role; ``role.value`` names the payload keys (``user``/``users``)."""
    singular = role.value
    plural = f"{singular}s"
    title = singular.capitalize()
    router = APIRouter(prefix=f"/api/{plural}", tags=[plural])

    @router.get("", response_model=list_response, response_model_exclude_none=True)
    def search(
        query: Annotated[SearchPeopleQueryDto, Query()],
        repo: PersonRepository = Depends(get_person_repository),
    ):
        rows = repo.search_people(role, query, fetch_emails=query.emails)
        people = [PersonDto.from_model(person, owned) for person, owned in rows]
        return list_response(**{plural: people, "results": len(people)})

    @router.get("/{person_id}", response_model=item_response, response_model_exclude_none=True)
    def get_one(person_id: uuid.UUID, repo: PersonRepository = Depends(get_person_repository)):
        found = repo.get_person(role, person_id)
        if found is None:
            raise HTTPException(status_code=404, detail=f"{title} not found")
        person, owned = found
        return item_response(**{singular: PersonDto.from_model(person, owned)})

    @router.post("", status_code=201, response_model=item_response, response_model_exclude_none=True)
    def create(body: create_dto, repo: PersonRepository = Depends(get_person_repository)):
        person, owned = repo.create_person(role, body)
        return item_response(status=201, **{singular: PersonDto.from_model(person, owned)})

    @router.patch("/{person_id}", response_model=MessageResponse)
    def update(person_id: uuid.UUID, body: update_dto, repo: PersonRepository = Depends(get_person_repository)):
        if not repo.update_person(role, person_id, body):
            raise HTTPException(status_code=404, detail=f"{title} not found")
        return MessageResponse(message=f"{title} has been updated")

    @router.delete("/{person_id}", response_model=MessageResponse)
    def delete(person_id: uuid.UUID, repo: PersonRepository = Depends(get_person_repository)):
        if not repo.delete_person(role, person_id):
            raise HTTPException(status_code=404, detail=f"{title} not found")
        return MessageResponse(message=f"{title} has been deleted")

    return router


users_router = build_people_router(Role.USER, CreateUserDto, UpdateUserDto, UserResponseDto, UserListResponseDto)
admins_router = build_people_router(Role.ADMIN, CreateAdminDto, UpdateAdminDto, AdminResponseDto, AdminListResponseDto)
