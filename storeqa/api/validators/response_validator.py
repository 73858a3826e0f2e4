from typing import Any, Mapping

import httpx

from storeqa.utils.verify import verify


def matches_subset(actual: Any, expected: Any) -> bool:
    """True when ``expected`` is structurally contained in ``actual``.

    Mappings may carry extra keys; sequences must match element by element.
    """
    if isinstance(expected, Mapping):
        if not isinstance(actual, Mapping):
            return False
        return all(key in actual and matches_subset(actual[key], value) for key, value in expected.items())
    if isinstance(expected, (list, tuple)):
        if not isinstance(actual, (list, tuple)) or len(actual) != len(expected):
            return False
        return all(matches_subset(a, e) for a, e in zip(actual, expected))
    return actual == expected


def json_body(response: httpx.Response) -> Any:
    """Decoded JSON body; a body that is not JSON fails the check."""
    try:
        return response.json()
    except ValueError as e:
        raise AssertionError(f"Response body is not JSON: {response.text[:200]!r}") from e


def _target(response: httpx.Response) -> str:
    try:
        request = response.request
    except RuntimeError:
        return ""
    return f" for {request.method} {request.url}"


class ResponseValidator:
    """Assertions over an already received ``httpx.Response``.

    Every check raises AssertionError with a diagnostic message on the first
    violated condition.
    """

    @staticmethod
    def validate_status(response: httpx.Response, expected_status: int):
        verify(
            response.status_code == expected_status,
            f"Expected status {expected_status}, got {response.status_code}{_target(response)}"
        )

    @staticmethod
    def validate_success(response: httpx.Response):
        verify(
            response.is_success,
            f"Expected a 2xx status, got {response.status_code}{_target(response)}"
        )

    @staticmethod
    def validate_not_found(response: httpx.Response):
        ResponseValidator.validate_status(response, 404)

    @staticmethod
    def validate_json(response: httpx.Response):
        content_type = response.headers.get("content-type", "")
        verify("application/json" in content_type, f"Expected a JSON content type, got '{content_type}'")

    @staticmethod
    def validate_body_contains_key(response: httpx.Response, key: str):
        body = json_body(response)
        verify(isinstance(body, dict) and key in body, f"Response body has no '{key}' property: {body}")

    @staticmethod
    def validate_body_matches(response: httpx.Response, expected: Mapping[str, Any]):
        body = json_body(response)
        verify(matches_subset(body, expected), f"Response body {body} does not match {dict(expected)}")

    @staticmethod
    def validate_array_length(response: httpx.Response, expected_length: int):
        body = json_body(response)
        verify(isinstance(body, list), f"Expected a JSON array, got {type(body).__name__}")
        verify(len(body) == expected_length, f"Expected {expected_length} items, got {len(body)}")

    @staticmethod
    def validate_all_belong_to(response: httpx.Response, key: str, value: Any):
        body = json_body(response)
        verify(isinstance(body, list), f"Expected a JSON array, got {type(body).__name__}")
        strays = [item for item in body if item.get(key) != value]
        verify(not strays, f"{len(strays)} of {len(body)} items have {key} != {value}: {strays[:3]}")
