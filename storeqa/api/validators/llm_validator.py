import time
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from storeqa.api.models import CompletionResponse, ModelList
from storeqa.api.validators.response_validator import json_body
from storeqa.utils.verify import verify

DEFAULT_FINISH_REASONS = ["stop", "length", "content_filter"]


class LocalApiValidator:
    """Checks for OpenAI-compatible chat completion responses."""

    @staticmethod
    def validate_response_structure(response: httpx.Response) -> CompletionResponse:
        verify(response.status_code == 200, f"Expected status 200, got {response.status_code}: {response.text}")
        body = json_body(response)
        verify(isinstance(body, dict), f"Expected a JSON object, got {body!r}")
        verify(body.get("object") == "chat.completion", f"Unexpected object type: {body.get('object')}")
        try:
            data = CompletionResponse.model_validate(body)
        except ValidationError as e:
            raise AssertionError(f"Malformed chat completion response: {e}") from e
        verify(data.choices, "Response has no choices")
        return data

    @staticmethod
    def validate_token_usage(data: CompletionResponse):
        usage = data.usage
        verify(usage.prompt_tokens >= 0, f"Negative prompt_tokens: {usage.prompt_tokens}")
        verify(usage.completion_tokens >= 0, f"Negative completion_tokens: {usage.completion_tokens}")
        verify(usage.total_tokens >= 0, f"Negative total_tokens: {usage.total_tokens}")
        verify(
            usage.total_tokens == usage.prompt_tokens + usage.completion_tokens,
            f"total_tokens {usage.total_tokens} != prompt_tokens {usage.prompt_tokens} "
            f"+ completion_tokens {usage.completion_tokens}"
        )

    @staticmethod
    def validate_max_tokens_respected(data: CompletionResponse, max_tokens: int, tolerance: int = 5):
        """``completion_tokens`` stays within ``max_tokens`` plus a tokenizer tolerance.

        A ``length`` finish means the limit was hit, so the count must also be
        close to it from below.
        """
        completion_tokens = data.usage.completion_tokens
        verify(
            completion_tokens <= max_tokens + tolerance,
            f"completion_tokens {completion_tokens} exceeds max_tokens {max_tokens} (+{tolerance})"
        )
        if data.choices[0].finish_reason == "length":
            verify(
                completion_tokens >= max_tokens - tolerance,
                f"finish_reason is 'length' but completion_tokens {completion_tokens} "
                f"is far below max_tokens {max_tokens}"
            )

    @staticmethod
    def validate_content_not_empty(data: CompletionResponse):
        content = data.choices[0].message.content
        verify(
            content is not None and content.strip(), "Completion content is empty"
        )

    @staticmethod
    def validate_finish_reason(data: CompletionResponse, allowed_reasons: Optional[List[str]] = None):
        allowed = allowed_reasons or DEFAULT_FINISH_REASONS
        reason = data.choices[0].finish_reason
        verify(reason in allowed, f"finish_reason '{reason}' not in {allowed}")

    @staticmethod
    def validate_timestamp(data: CompletionResponse, max_age_seconds: int = 60):
        now = int(time.time())
        verify(data.created >= now - max_age_seconds, f"created {data.created} is older than {max_age_seconds}s")
        verify(data.created <= now + 5, f"created {data.created} is in the future")

    @staticmethod
    def validate_id_format(data: CompletionResponse):
        verify(isinstance(data.id, str) and data.id, f"Invalid completion id: {data.id!r}")

    @staticmethod
    def validate_model_name(data: CompletionResponse, expected_model: Optional[str] = None):
        verify(data.model, "Response has no model name")
        if expected_model:
            verify(data.model == expected_model, f"Expected model '{expected_model}', got '{data.model}'")

    @staticmethod
    def validate_complete(
        response: httpx.Response,
        max_tokens: Optional[int] = None,
        expected_model: Optional[str] = None,
        allowed_finish_reasons: Optional[List[str]] = None,
        max_age_seconds: int = 60,
    ) -> CompletionResponse:
        """Run the full battery in order; the first failing check raises.

        Args:
            response: raw chat completion response
            max_tokens: when given, check the completion length against it
            expected_model: when given, the response must name this model
            allowed_finish_reasons: when given, restrict the finish reason
            max_age_seconds: accepted age of the ``created`` timestamp

        Returns:
            CompletionResponse: the parsed response
        """
        data = LocalApiValidator.validate_response_structure(response)
        LocalApiValidator.validate_content_not_empty(data)
        LocalApiValidator.validate_token_usage(data)
        LocalApiValidator.validate_id_format(data)
        LocalApiValidator.validate_timestamp(data, max_age_seconds)
        if max_tokens is not None:
            LocalApiValidator.validate_max_tokens_respected(data, max_tokens)
        if expected_model:
            LocalApiValidator.validate_model_name(data, expected_model)
        if allowed_finish_reasons:
            LocalApiValidator.validate_finish_reason(data, allowed_finish_reasons)
        return data

    @staticmethod
    def validate_error_response(response: httpx.Response, expected_status: int) -> Dict[str, Any]:
        verify(
            response.status_code == expected_status,
            f"Expected status {expected_status}, got {response.status_code}: {response.text}",
        )
        body = json_body(response)
        error = body.get("error") if isinstance(body, dict) else None
        verify(isinstance(error, dict), f"Response has no error object: {body}")
        verify("message" in error, f"Error object has no message: {error}")
        verify("type" in error, f"Error object has no type: {error}")
        return error

    @staticmethod
    def validate_models_list(response: httpx.Response) -> ModelList:
        verify(response.status_code == 200, f"Expected status 200, got {response.status_code}: {response.text}")
        try:
            models = ModelList.model_validate(json_body(response))
        except ValidationError as e:
            raise AssertionError(f"Malformed models list: {e}") from e
        verify(models.object == "list", f"Expected object 'list', got '{models.object}'")
        verify(models.data, "Models list is empty")
        verify(models.data[0].object == "model", f"Expected object 'model', got '{models.data[0].object}'")
        return models
