import json
import time

import httpx
import pytest

from storeqa.api import ApiFactory, LocalApiFactory, create_client
from storeqa.api.models import ChatMessage, CompletionRequest, Post

pytestmark = pytest.mark.unit

SEEDED_POSTS = [{"userId": (i // 10) + 1, "id": i, "title": f"title {i}", "body": f"body {i}"} for i in range(1, 101)]


def jsonplaceholder(request: httpx.Request) -> httpx.Response:
    """Just enough of JSONPlaceholder: seeded posts, writes echoed but not stored."""
    path = request.url.path
    if path == "/posts" and request.method == "GET":
        user_id = request.url.params.get("userId")
        posts = [p for p in SEEDED_POSTS if user_id is None or p["userId"] == int(user_id)]
        return httpx.Response(200, json=posts)
    if path == "/posts" and request.method == "POST":
        return httpx.Response(201, json={**json.loads(request.content), "id": 101})
    if path.startswith("/posts/"):
        post_id = int(path.rsplit("/", 1)[1])
        if request.method == "DELETE":
            return httpx.Response(200, json={})
        if post_id > 100:
            return httpx.Response(404, json={})
        if request.method == "PUT":
            return httpx.Response(200, json={**json.loads(request.content), "id": post_id})
        return httpx.Response(200, json=SEEDED_POSTS[post_id - 1])
    if path == "/comments":
        post_id = int(request.url.params["postId"])
        return httpx.Response(200, json=[{"postId": post_id, "id": 1, "name": "n", "email": "e@x.io", "body": "b"}])
    return httpx.Response(404, json={})


@pytest.fixture
async def api_factory():
    async with create_client("https://api.test", transport=httpx.MockTransport(jsonplaceholder)) as client:
        yield ApiFactory(client)


class TestJsonPlaceholderController:
    async def test_get_all_posts(self, api_factory):
        response = await api_factory.create_posts_controller().get_all_posts()
        assert response.status_code == 200
        assert len(response.json()) == 100

    async def test_posts_by_user_sends_user_id_query(self, api_factory):
        response = await api_factory.create_posts_controller().get_posts_by_user(2)
        assert response.request.url.params["userId"] == "2"
        assert {p["userId"] for p in response.json()} == {2}

    async def test_create_post_accepts_model_or_dict(self, api_factory):
        api = api_factory.create_posts_controller()
        response = await api.create_post(Post(user_id=1, title="t", body="b"))
        assert json.loads(response.request.content) == {"userId": 1, "title": "t", "body": "b"}

        response = await api.create_post({"userId": 1, "title": "", "body": ""})
        assert response.status_code == 201

    async def test_comments_by_post(self, api_factory):
        response = await api_factory.create_posts_controller().get_comments_by_post(3)
        assert response.request.url.params["postId"] == "3"


class TestPostService:
    async def test_create_post_with_comments(self, api_factory):
        result = await api_factory.create_post_service().create_post_with_comments(5)
        assert result.post.id == 101
        assert "Test Post Title" in result.post.title
        assert len(result.comments) == 5
        assert all(c.post_id == 101 for c in result.comments)

    async def test_create_update_and_verify(self, api_factory):
        result = await api_factory.create_post_service().create_update_and_verify_post()
        assert result.original.id == 101
        assert result.update_response.json()["title"] == result.updated.title
        assert result.verify_response.json()["id"] == 1

    async def test_create_user_posts(self, api_factory):
        result = await api_factory.create_post_service().create_user_posts(42, 10)
        assert len(result.posts) == 10
        assert len(result.responses) == 10
        assert all(p.user_id == 42 for p in result.posts)

    async def test_get_and_validate_user_posts(self, api_factory):
        result = await api_factory.create_post_service().get_and_validate_user_posts(1)
        assert len(result.posts) == 10
        assert result.all_belong_to_user

    async def test_cleanup_expects_post_gone(self, api_factory):
        result = await api_factory.create_post_service().cleanup_post(999)
        assert result.verify_response.status_code == 404

        with pytest.raises(AssertionError, match="Expected status 404, got 200"):
            await api_factory.create_post_service().cleanup_post(1)


def _completion_body(payload):
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": int(time.time()),
        "model": payload["model"],
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": f"echo: {payload['messages'][-1]['content']}"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 4, "completion_tokens": 2, "total_tokens": 6},
    }


class FakeLlmServer:
    """OpenAI-compatible handler that can answer the first N completions with 429."""

    def __init__(self, rate_limited: int = 0):
        self.rate_limited = rate_limited
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/models":
            return httpx.Response(200, json={"object": "list", "data": [{"id": "test-model", "object": "model"}]})
        payload = json.loads(request.content)
        self.requests.append(payload)
        if self.rate_limited:
            self.rate_limited -= 1
            return httpx.Response(429, json={"error": {"message": "slow down", "type": "rate_limit"}})
        return httpx.Response(200, json=_completion_body(payload))


@pytest.fixture
def llm_server():
    return FakeLlmServer()


@pytest.fixture
async def local_api_factory(llm_server):
    async with create_client("http://llm.test/v1", transport=httpx.MockTransport(llm_server)) as client:
        yield LocalApiFactory(client, "test-model")


class TestLocalLlm:
    async def test_paths_resolve_under_v1(self, local_api_factory):
        response = await local_api_factory.create_llm_controller().list_models()
        assert response.request.url.path == "/v1/models"

    async def test_request_omits_unset_parameters(self, local_api_factory, llm_server):
        request = CompletionRequest(model="test-model", messages=[ChatMessage(role="user", content="hi")])
        await local_api_factory.create_llm_controller().create_chat_completion(request)
        assert llm_server.requests == [{"model": "test-model", "messages": [{"role": "user", "content": "hi"}]}]

    async def test_ask_with_context_orders_messages(self, local_api_factory, llm_server):
        history = [ChatMessage(role="user", content="My name is Ana"), ChatMessage(role="assistant", content="Hi Ana")]
        result = await local_api_factory.create_llm_service().ask_with_context(
            history, "What is my name?", system_prompt="Be brief"
        )
        assert result.content == "echo: What is my name?"
        roles = [m["role"] for m in llm_server.requests[0]["messages"]]
        assert roles == ["system", "user", "assistant", "user"]

    async def test_batch_retries_rate_limited_prompt(self, local_api_factory, llm_server, monkeypatch):
        async def no_sleep(_):
            return None

        monkeypatch.setattr("storeqa.api.services.llm_service.asyncio.sleep", no_sleep)
        llm_server.rate_limited = 1
        result = await local_api_factory.create_llm_service().run_batch(["one", "two"])
        assert result.contents == ["echo: one", "echo: two"]
        assert result.rate_limited == 1
        assert len(llm_server.requests) == 3

    async def test_batch_fails_on_second_rate_limit(self, local_api_factory, llm_server, monkeypatch):
        async def no_sleep(_):
            return None

        monkeypatch.setattr("storeqa.api.services.llm_service.asyncio.sleep", no_sleep)
        llm_server.rate_limited = 2
        with pytest.raises(AssertionError, match="got 429"):
            await local_api_factory.create_llm_service().run_batch(["one"])

    async def test_temperature_variations(self, local_api_factory, monkeypatch):
        async def no_sleep(_):
            return None

        monkeypatch.setattr("storeqa.api.services.llm_service.asyncio.sleep", no_sleep)
        outputs = await local_api_factory.create_llm_service().run_temperature_variations(temperatures=(0.0, 1.0))
        assert [t for t, _ in outputs] == [0.0, 1.0]
