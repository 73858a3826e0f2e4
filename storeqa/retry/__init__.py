from .plugin import RetryPlugin, failure_message, resolve_strategy
from .strategy import AggressiveRetryStrategy, ConservativeRetryStrategy, RetryStrategy, select_retry_strategy

__all__ = [
    "AggressiveRetryStrategy",
    "ConservativeRetryStrategy",
    "RetryPlugin",
    "RetryStrategy",
    "failure_message",
    "resolve_strategy",
    "select_retry_strategy",
]
