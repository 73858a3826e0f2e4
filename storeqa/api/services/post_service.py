import logging
from dataclasses import dataclass, field
from typing import List

import httpx

from storeqa.api.controllers.jsonplaceholder import JsonPlaceholderController
from storeqa.api.factories.data_factory import DataFactory
from storeqa.api.models import Comment, Post
from storeqa.api.validators.response_validator import ResponseValidator


@dataclass
class PostWithComments:
    post: Post
    comments: List[Comment]
    post_response: httpx.Response
    comment_responses: List[httpx.Response] = field(default_factory=list)


@dataclass
class UpdatedPost:
    original: Post
    updated: Post
    create_response: httpx.Response
    update_response: httpx.Response
    verify_response: httpx.Response


@dataclass
class CleanupResult:
    delete_response: httpx.Response
    verify_response: httpx.Response


@dataclass
class UserPosts:
    posts: List[Post]
    responses: List[httpx.Response]


@dataclass
class ValidatedUserPosts:
    posts: List[Post]
    response: httpx.Response
    all_belong_to_user: bool


class PostService:
    """Multi-call post workflows.

    Each workflow asserts only what it needs to carry on to the next call and
    hands back both the domain values and every raw response.
    """

    def __init__(self, controller: JsonPlaceholderController):
        self.api = controller

    async def _create(self, post: Post) -> tuple[Post, httpx.Response]:
        response = await self.api.create_post(post)
        ResponseValidator.validate_status(response, 201)
        created = post.model_copy(update={"id": response.json()["id"]})
        return created, response

    async def create_post_with_comments(self, comment_count: int = 3) -> PostWithComments:
        """Create a post and build ``comment_count`` comments bound to its id.

        The mock API has no comment creation endpoint, so the comments are
        generated locally and ``comment_responses`` stays empty.
        """
        post, post_response = await self._create(DataFactory.create_post())
        comments = [DataFactory.create_comment(post.id) for _ in range(comment_count)]
        logging.debug(f"Created post {post.id} with {len(comments)} comments")
        return PostWithComments(post=post, comments=comments, post_response=post_response)

    async def create_update_and_verify_post(self, existing_id: int = 1) -> UpdatedPost:
        """Create a post, then update and re-read ``existing_id``.

        Writes are not persisted by the mock API, so the update and the read
        back target a seeded post rather than the freshly created one.
        """
        original, create_response = await self._create(DataFactory.create_post())

        updated = DataFactory.create_post(id=existing_id, user_id=original.user_id)
        update_response = await self.api.update_post(existing_id, updated)
        ResponseValidator.validate_success(update_response)
        ResponseValidator.validate_body_matches(update_response, {"title": updated.title, "body": updated.body})

        verify_response = await self.api.get_post_by_id(existing_id)
        ResponseValidator.validate_success(verify_response)

        return UpdatedPost(
            original=original,
            updated=updated,
            create_response=create_response,
            update_response=update_response,
            verify_response=verify_response,
        )

    async def cleanup_post(self, post_id: int) -> CleanupResult:
        delete_response = await self.api.delete_post(post_id)
        ResponseValidator.validate_success(delete_response)

        verify_response = await self.api.get_post_by_id(post_id)
        ResponseValidator.validate_not_found(verify_response)
        return CleanupResult(delete_response=delete_response, verify_response=verify_response)

    async def create_user_posts(self, user_id: int, count: int) -> UserPosts:
        posts, responses = [], []
        for _ in range(count):
            post, response = await self._create(DataFactory.create_post(user_id=user_id))
            posts.append(post)
            responses.append(response)
        return UserPosts(posts=posts, responses=responses)

    async def get_and_validate_user_posts(self, user_id: int) -> ValidatedUserPosts:
        response = await self.api.get_posts_by_user(user_id)
        ResponseValidator.validate_success(response)

        posts = [Post.model_validate(item) for item in response.json()]
        return ValidatedUserPosts(
            posts=posts,
            response=response,
            all_belong_to_user=all(post.user_id == user_id for post in posts),
        )
