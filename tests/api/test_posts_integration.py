"""Workflows through the service layer with factory-generated data."""

import pytest

from storeqa.api.factories.data_factory import DataFactory
from storeqa.utils.steps import step

pytestmark = [pytest.mark.integration, pytest.mark.api]


@pytest.fixture
def post_service(api_factory):
    return api_factory.create_post_service()


async def test_create_post_with_comments(post_service):
    with step("When user creates post with 5 comments"):
        result = await post_service.create_post_with_comments(5)
    with step("Then post should be created successfully"):
        assert result.post.id is not None
        assert "Test Post Title" in result.post.title
    with step("And comments should be associated"):
        assert len(result.comments) == 5
        assert result.comments[0].post_id == result.post.id


async def test_create_update_and_verify_post(post_service):
    with step("When user creates a post and updates an existing one"):
        result = await post_service.create_update_and_verify_post()
    with step("Then the update is echoed back"):
        assert result.update_response.json()["title"] == result.updated.title
    with step("And the existing post can still be read"):
        assert result.verify_response.json()["id"] == 1


async def test_bulk_create_posts_for_user(post_service):
    user_id = 42
    with step("When user creates 10 posts"):
        result = await post_service.create_user_posts(user_id, 10)
    with step("Then all posts should be created"):
        assert len(result.posts) == 10
        assert len(result.responses) == 10
    with step("And all posts should belong to user 42"):
        assert all(post.user_id == user_id for post in result.posts)


async def test_user_posts_are_validated(post_service):
    with step("When user fetches the posts of user 1"):
        result = await post_service.get_and_validate_user_posts(1)
    with step("Then every post belongs to user 1"):
        assert result.posts
        assert result.all_belong_to_user


@pytest.mark.parametrize("user_id, kind", [(1, "standard"), (2, "premium"), (3, "admin")])
def test_post_variations(user_id, kind):
    post = DataFactory.create_post(user_id=user_id, title=f"{kind} Post")
    assert post.user_id == user_id
    assert kind in post.title
