import pytest

from storeqa.api.models import Post
from storeqa.api.validators.response_validator import ResponseValidator
from storeqa.utils.steps import step

pytestmark = [pytest.mark.acceptance, pytest.mark.api]


@pytest.fixture
def api(api_factory):
    return api_factory.create_posts_controller()


async def test_get_all_posts(api):
    with step("When user fetches all posts"):
        response = await api.get_all_posts()
    with step("Then response should be successful"):
        ResponseValidator.validate_success(response)
        ResponseValidator.validate_json(response)
    with step("And response should contain array of posts"):
        ResponseValidator.validate_array_length(response, 100)


async def test_get_single_post(api):
    with step("When user fetches post with id 1"):
        response = await api.get_post_by_id(1)
    with step("Then response should be successful"):
        ResponseValidator.validate_success(response)
    with step("And response should contain correct post data"):
        for key in ("id", "title", "body"):
            ResponseValidator.validate_body_contains_key(response, key)


async def test_get_posts_by_user(api):
    with step("When user fetches posts for user 1"):
        response = await api.get_posts_by_user(1)
    with step("Then response should be successful"):
        ResponseValidator.validate_success(response)
    with step("And all posts should belong to user 1"):
        ResponseValidator.validate_all_belong_to(response, "userId", 1)


async def test_create_post(api):
    new_post = Post(user_id=1, title="Test Post Title", body="Test post body content")

    with step("When user creates a new post"):
        response = await api.create_post(new_post)
    with step("Then response should be created (201)"):
        ResponseValidator.validate_status(response, 201)
    with step("And response should contain created post"):
        ResponseValidator.validate_body_matches(response, new_post.to_payload())
        ResponseValidator.validate_body_contains_key(response, "id")


async def test_update_post(api):
    updated_post = Post(user_id=1, title="Updated Title", body="Updated body content")

    with step("When user updates post with id 1"):
        response = await api.update_post(1, updated_post)
    with step("Then response should be successful"):
        ResponseValidator.validate_success(response)
    with step("And response should contain updated post"):
        ResponseValidator.validate_body_matches(response, {"title": updated_post.title, "body": updated_post.body})


async def test_delete_post(api):
    with step("When user deletes post with id 1"):
        response = await api.delete_post(1)
    with step("Then response should be successful"):
        ResponseValidator.validate_success(response)


async def test_get_users_and_comments(api):
    with step("When user fetches all users"):
        users = await api.get_all_users()
    with step("Then ten users are returned"):
        ResponseValidator.validate_array_length(users, 10)
    with step("And comments of post 1 all belong to it"):
        comments = await api.get_comments_by_post(1)
        ResponseValidator.validate_success(comments)
        ResponseValidator.validate_all_belong_to(comments, "postId", 1)
