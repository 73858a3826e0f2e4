import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import httpx
from openai import AsyncOpenAI

from storeqa.api.controllers.local_llm import LocalLlmController
from storeqa.api.models import ChatMessage, CompletionRequest, CompletionResponse
from storeqa.api.validators.llm_validator import LocalApiValidator
from storeqa.config import LocalLlmConfig
from storeqa.utils.log_icon import icon

RATE_LIMIT_WAIT_S = 1.0


@dataclass
class CompletionResult:
    data: CompletionResponse
    response: httpx.Response
    elapsed_ms: int

    @property
    def content(self) -> str:
        return self.data.content


@dataclass
class BatchResult:
    contents: List[str] = field(default_factory=list)
    responses: List[httpx.Response] = field(default_factory=list)
    rate_limited: int = 0


class LocalLlmService:
    def __init__(self, controller: LocalLlmController):
        self.api = controller
        self.model = controller.model

    def _request(self, messages: List[ChatMessage], **params) -> CompletionRequest:
        return CompletionRequest(model=self.model, messages=messages, **params)

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        """Send one request and return the structurally validated completion."""
        start = time.perf_counter()
        response = await self.api.create_chat_completion(request)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        data = LocalApiValidator.validate_response_structure(response)
        logging.debug(f"Completion {data.id} in {elapsed_ms}ms, usage {data.usage}")
        return CompletionResult(data=data, response=response, elapsed_ms=elapsed_ms)

    async def run_batch(
        self, prompts: Sequence[str], delay_s: float = 0.5, max_tokens: int = 50, temperature: float = 0.1
    ) -> BatchResult:
        """Ask each prompt in turn, pausing ``delay_s`` between requests.

        A rate-limited (429) prompt is retried once after a short wait; a
        second 429 fails the batch.
        """
        result = BatchResult()
        for prompt in prompts:
            request = self._request(
                [ChatMessage(role="user", content=prompt)], max_tokens=max_tokens, temperature=temperature
            )
            response = await self.api.create_chat_completion(request)
            if response.status_code == 429:
                result.rate_limited += 1
                logging.warning(f"{icon['retry']} Rate limited, retrying in {RATE_LIMIT_WAIT_S}s: {prompt}")
                await asyncio.sleep(RATE_LIMIT_WAIT_S)
                response = await self.api.create_chat_completion(request)

            data = LocalApiValidator.validate_response_structure(response)
            result.contents.append(data.content)
            result.responses.append(response)
            await asyncio.sleep(delay_s)

        logging.info(f"Batch of {len(prompts)} prompts done, {result.rate_limited} rate limited")
        return result

    async def run_temperature_variations(
        self,
        prompt: str = "Describe a sunset in one word",
        temperatures: Sequence[float] = (0.0, 0.5, 1.0),
        max_tokens: int = 15,
        delay_s: float = 0.3,
    ) -> List[Tuple[float, str]]:
        outputs = []
        for temperature in temperatures:
            request = self._request(
                [ChatMessage(role="user", content=prompt)], max_tokens=max_tokens, temperature=temperature
            )
            result = await self.complete(request)
            outputs.append((temperature, result.content))
            await asyncio.sleep(delay_s)
        return outputs

    async def ask_with_context(
        self,
        history: Sequence[ChatMessage],
        question: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 50,
        temperature: float = 0.3,
    ) -> CompletionResult:
        messages = [ChatMessage(role="system", content=system_prompt)] if system_prompt else []
        messages.extend(history)
        messages.append(ChatMessage(role="user", content=question))
        return await self.complete(self._request(messages, max_tokens=max_tokens, temperature=temperature))


class SdkCompatibilityCheck:
    """Talks to the local server through the official OpenAI SDK."""

    def __init__(self, config: LocalLlmConfig):
        self.config = config
        self.client: Optional[AsyncOpenAI] = None

    async def initialize(self):
        self.client = AsyncOpenAI(
            api_key=self.config.api_key, base_url=self.config.base_url, timeout=self.config.timeout_ms / 1000
        )
        logging.info(f"AsyncOpenAI client initialized for model {self.config.model} at {self.config.base_url}")
        return self

    async def complete_text(self, prompt: str, max_tokens: int = 50) -> str:
        if self.client is None:
            await self.initialize()
        try:
            completion = await self.client.chat.completions.create(
                model=self.config.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=0.0,
            )
        except Exception as e:
            logging.error(f"Error while calling the local server through the OpenAI SDK: {e}")
            raise
        return completion.choices[0].message.content or ""

    async def close(self):
        if self.client is not None:
            await self.client.close()
            self.client = None
