from typing import Protocol, Sequence, Union


class RetryStrategy(Protocol):
    max_attempts: int

    def should_retry(self, error: Union[BaseException, str], attempt: int) -> bool: ...

    def get_delay(self, attempt: int) -> int: ...


def _message(error: Union[BaseException, str]) -> str:
    return error if isinstance(error, str) else f"{type(error).__name__}: {error}"


def _mentions_any(error: Union[BaseException, str], keywords: Sequence[str]) -> bool:
    text = _message(error).lower()
    return any(keyword.lower() in text for keyword in keywords)


class AggressiveRetryStrategy:
    """CI policy: up to 3 retries on network, timeout or navigation failures.

    ``attempt`` counts the retries already made, so the delays run 1s, 2s, 4s.
    """

    max_attempts = 3
    keywords = ("net::", "timeout", "ECONNREFUSED", "ETIMEDOUT", "Failed to load", "Navigation")

    def should_retry(self, error: Union[BaseException, str], attempt: int) -> bool:
        if attempt >= self.max_attempts:
            return False
        return _mentions_any(error, self.keywords)

    def get_delay(self, attempt: int) -> int:
        return 2**attempt * 1000


class ConservativeRetryStrategy:
    """Local policy: a single retry, only for timeouts and refused connections."""

    max_attempts = 1
    keywords = ("timeout", "ECONNREFUSED", "ETIMEDOUT")

    def should_retry(self, error: Union[BaseException, str], attempt: int) -> bool:
        if attempt >= self.max_attempts:
            return False
        return _mentions_any(error, self.keywords)

    def get_delay(self, attempt: int) -> int:
        return 500


def select_retry_strategy(is_ci: bool) -> RetryStrategy:
    return AggressiveRetryStrategy() if is_ci else ConservativeRetryStrategy()
