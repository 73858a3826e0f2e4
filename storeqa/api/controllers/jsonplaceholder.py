from typing import Any, Dict, Union

import httpx

from storeqa.api.models import Post

PostPayload = Union[Post, Dict[str, Any]]


def _payload(post: PostPayload) -> Dict[str, Any]:
    return post.to_payload() if isinstance(post, Post) else post


class JsonPlaceholderController:
    """One method per JSONPlaceholder endpoint.

    Responses come back untouched so each test decides how to validate them.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def get_all_posts(self) -> httpx.Response:
        return await self.client.get("/posts")

    async def get_post_by_id(self, post_id: int) -> httpx.Response:
        return await self.client.get(f"/posts/{post_id}")

    async def get_posts_by_user(self, user_id: int) -> httpx.Response:
        return await self.client.get("/posts", params={"userId": str(user_id)})

    async def create_post(self, post: PostPayload) -> httpx.Response:
        return await self.client.post("/posts", json=_payload(post))

    async def update_post(self, post_id: int, post: PostPayload) -> httpx.Response:
        return await self.client.put(f"/posts/{post_id}", json=_payload(post))

    async def delete_post(self, post_id: int) -> httpx.Response:
        return await self.client.delete(f"/posts/{post_id}")

    async def get_all_users(self) -> httpx.Response:
        return await self.client.get("/users")

    async def get_user_by_id(self, user_id: int) -> httpx.Response:
        return await self.client.get(f"/users/{user_id}")

    async def get_comments_by_post(self, post_id: int) -> httpx.Response:
        return await self.client.get("/comments", params={"postId": str(post_id)})
