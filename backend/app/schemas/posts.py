import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.db import models
from backend.app.schemas.common import PageQuery


class CreatePostDto(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class UpdatePostDto(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class SearchPostQueryDto(PageQuery):
    title: Optional[str] = None


class PostDto(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID
    title: str
    description: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_model(cls, post: models.Post) -> "PostDto":
        return cls.model_validate(post)


class PostResponseDto(BaseModel):
    status: int = 200
    post: PostDto


class PostListResponseDto(BaseModel):
    status: int = 200
    posts: List[PostDto]
    results: int

    @classmethod
    def from_models(cls, posts: List[models.Post]) -> "PostListResponseDto":
        return cls(posts=[PostDto.from_model(p) for p in posts], results=len(posts))
