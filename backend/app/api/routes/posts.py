import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from backend.app.api.deps import get_post_repository
from backend.app.repositories.posts import PostRepository
from backend.app.schemas.common import MessageResponse
from backend.app.schemas.posts import (
    CreatePostDto,
    PostDto,
    PostListResponseDto,
    PostResponseDto,
    SearchPostQueryDto,
    UpdatePostDto,
)

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=PostListResponseDto)
def get_posts(
    query: Annotated[SearchPostQueryDto, Query()],
    repo: PostRepository = Depends(get_post_repository),
):
    return PostListResponseDto.from_models(repo.search_posts(query))


@router.get("/{post_id}", response_model=PostResponseDto)
def get_post(post_id: uuid.UUID, repo: PostRepository = Depends(get_post_repository)):
    post = repo.get_post(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return PostResponseDto(post=PostDto.from_model(post))


@router.post("", status_code=201, response_model=PostResponseDto)
def save_post(body: CreatePostDto, repo: PostRepository = Depends(get_post_repository)):
    post = repo.create_post(body)
    return PostResponseDto(status=201, post=PostDto.from_model(post))


@router.patch("/{post_id}", response_model=MessageResponse)
def update_post(post_id: uuid.UUID, body: UpdatePostDto, repo: PostRepository = Depends(get_post_repository)):
    if not repo.update_post(post_id, body):
        raise HTTPException(status_code=404, detail="Post not found")
    return MessageResponse(message="Post has been updated")


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(post_id: uuid.UUID, repo: PostRepository = Depends(get_post_repository)):
    if not repo.delete_post(post_id):
        raise HTTPException(status_code=404, detail="Post not found")
    return MessageResponse(message="Post has been deleted")
