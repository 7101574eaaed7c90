import uuid

import pytest

from backend.app.db.sample_data import seed_posts
from backend.app.queries.assembler import EmptyAssignmentSet
from backend.app.repositories.posts import PostRepository
from backend.app.schemas.posts import CreatePostDto, SearchPostQueryDto, UpdatePostDto


def test_get_post_by_id(session):
    post_one = seed_posts(session)[0]
    post = PostRepository(session).get_post(post_one.id)
    assert post is not None
    assert post.id == post_one.id


def test_get_all_posts(session):
    seed_posts(session)
    posts = PostRepository(session).search_posts(SearchPostQueryDto(page=1, limit=6))
    assert len(posts) == 5


def test_get_posts_with_title_search(session):
    seed_posts(session)
    posts = PostRepository(session).search_posts(SearchPostQueryDto(page=1, limit=6, title="web"))
    assert len(posts) == 2
    assert all("web" in p.title.lower() for p in posts)


def test_get_posts_with_title_search_2(session):
    seed_posts(session)
    posts = PostRepository(session).search_posts(SearchPostQueryDto(title="ai"))
    assert len(posts) == 1


def test_get_posts_pagination(session):
    seed_posts(session)
    repo = PostRepository(session)
    first = repo.search_posts(SearchPostQueryDto(page=1, limit=2))
    second = repo.search_posts(SearchPostQueryDto(page=2, limit=2))
    third = repo.search_posts(SearchPostQueryDto(page=3, limit=2))
    assert [len(first), len(second), len(third)] == [2, 2, 1]
    ids = {p.id for p in first + second + third}
    assert len(ids) == 5


def test_save_post(session):
    dto = CreatePostDto(title="New Post", description="New Post Description")
    post = PostRepository(session).create_post(dto)
    assert post.title == dto.title
    assert post.description == dto.description
    assert post.created_at is not None


def test_delete_post(session):
    post_one = seed_posts(session)[0]
    assert PostRepository(session).delete_post(post_one.id) is True


def test_delete_post_nonexistent(session):
    post_one = seed_posts(session)[0]
    repo = PostRepository(session)
    post_id = post_one.id
    repo.delete_post(post_id)
    assert repo.delete_post(post_id) is False


def test_update_post_title_only(session):
    post_one = seed_posts(session)[0]
    repo = PostRepository(session)
    original_description = post_one.description

    assert repo.update_post(post_one.id, UpdatePostDto(title="New Title")) is True

    updated = repo.get_post(post_one.id)
    assert updated.title == "New Title"
    assert updated.description == original_description


def test_update_post_description_only(session):
    post_one = seed_posts(session)[0]
    repo = PostRepository(session)
    original_title = post_one.title

    assert repo.update_post(post_one.id, UpdatePostDto(description="New Description")) is True

    updated = repo.get_post(post_one.id)
    assert updated.description == "New Description"
    assert updated.title == original_title


def test_update_post_title_and_desc(session):
    post_one = seed_posts(session)[0]
    repo = PostRepository(session)

    assert repo.update_post(post_one.id, UpdatePostDto(title="New Title", description="New Description"))

    updated = repo.get_post(post_one.id)
    assert (updated.title, updated.description) == ("New Title", "New Description")


def test_update_post_missing_row_reports_false(session):
    assert PostRepository(session).update_post(uuid.uuid4(), UpdatePostDto(title="x")) is False


def test_update_post_without_fields_is_rejected(session):
    post_one = seed_posts(session)[0]
    with pytest.raises(EmptyAssignmentSet):
        PostRepository(session).update_post(post_one.id, UpdatePostDto())
