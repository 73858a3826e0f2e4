import httpx

from storeqa.api.controllers.jsonplaceholder import JsonPlaceholderController
from storeqa.api.controllers.local_llm import LocalLlmController
from storeqa.api.services.llm_service import LocalLlmService
from storeqa.api.services.post_service import PostService


class ApiFactory:
    """Controllers and services for the mock REST API, all sharing one client."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.posts_controller = JsonPlaceholderController(client)

    def create_posts_controller(self) -> JsonPlaceholderController:
        return JsonPlaceholderController(self.client)

    def create_post_service(self) -> PostService:
        return PostService(self.posts_controller)


class LocalApiFactory:
    def __init__(self, client: httpx.AsyncClient, model: str):
        self.client = client
        self.model = model
        self.llm_controller = LocalLlmController(client, model)

    def create_llm_controller(self) -> LocalLlmController:
        return LocalLlmController(self.client, self.model)

    def create_llm_service(self) -> LocalLlmService:
        return LocalLlmService(self.llm_controller)
