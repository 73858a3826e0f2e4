import logging
from typing import Dict, Optional

import httpx

from storeqa.config import ApiConfig, LocalLlmConfig


def create_client(
    base_url: str,
    headers: Optional[Dict[str, str]] = None,
    timeout_ms: int = 30000,
    log_requests: bool = False,
    log_responses: bool = False,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Build the shared HTTP handle for one API target.

    Args:
        base_url: root every relative request path is resolved against
        headers: default headers sent with every request
        timeout_ms: per-request timeout in milliseconds
        log_requests: log method, URL and body of every outgoing request
        log_responses: log status and body of every response
        transport: optional transport override (e.g. httpx.MockTransport in unit tests)

    Returns:
        httpx.AsyncClient: caller owns it and must close it
    """

    async def log_request(request: httpx.Request):
        body = request.content.decode("utf-8", errors="replace") if request.content else ""
        logging.info(f"API request: {request.method} {request.url} {body}".rstrip())

    async def log_response(response: httpx.Response):
        await response.aread()
        request = response.request
        logging.info(f"API response: {request.method} {request.url} -> {response.status_code} {response.text}")

    event_hooks = {"request": [], "response": []}
    if log_requests:
        event_hooks["request"].append(log_request)
    if log_responses:
        event_hooks["response"].append(log_response)

    return httpx.AsyncClient(
        base_url=base_url,
        headers=headers,
        timeout=timeout_ms / 1000,
        event_hooks=event_hooks,
        transport=transport,
    )


def create_api_client(config: ApiConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return create_client(
        config.base_url,
        headers=config.headers,
        timeout_ms=config.timeout_ms,
        log_requests=config.log_requests,
        log_responses=config.log_responses,
        transport=transport,
    )


def create_llm_client(
    config: LocalLlmConfig, transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    return create_client(
        config.base_url,
        headers={"Content-Type": "application/json", "Authorization": f"Bearer {config.api_key}"},
        timeout_ms=config.timeout_ms,
        transport=transport,
    )
