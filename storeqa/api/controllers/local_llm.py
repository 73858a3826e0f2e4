import logging
from typing import Any, Dict, Optional, Union

import httpx

from storeqa.api.models import CompletionRequest


class LocalLlmController:
    """Raw access to an OpenAI-compatible server (``GET /models``, ``POST /chat/completions``)."""

    def __init__(self, client: httpx.AsyncClient, model: str):
        self.client = client
        self.model = model

    async def list_models(self) -> httpx.Response:
        return await self.client.get("/models")

    async def create_chat_completion(
        self, request: Union[CompletionRequest, Dict[str, Any]], timeout: Optional[float] = None
    ) -> httpx.Response:
        """POST a completion request.

        Plain dicts are sent as-is so malformed payloads can be exercised.
        """
        payload = request.to_payload() if isinstance(request, CompletionRequest) else request
        kwargs = {"timeout": timeout} if timeout is not None else {}
        logging.debug(f"Chat completion request for model {payload.get('model')}")
        return await self.client.post("/chat/completions", json=payload, **kwargs)

    async def post_raw(self, content: str) -> httpx.Response:
        """POST an arbitrary body to the completions endpoint (invalid JSON checks)."""
        return await self.client.post(
            "/chat/completions", content=content, headers={"Content-Type": "application/json"}
        )
