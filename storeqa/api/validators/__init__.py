from .llm_validator import LocalApiValidator
from .response_validator import ResponseValidator, json_body, matches_subset

__all__ = ["LocalApiValidator", "ResponseValidator", "json_body", "matches_subset"]
