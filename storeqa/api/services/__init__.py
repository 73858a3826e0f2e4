from .llm_service import BatchResult, CompletionResult, LocalLlmService, SdkCompatibilityCheck
from .post_service import CleanupResult, PostService, PostWithComments, UpdatedPost, UserPosts, ValidatedUserPosts

__all__ = [
    "BatchResult",
    "CleanupResult",
    "CompletionResult",
    "LocalLlmService",
    "PostService",
    "PostWithComments",
    "SdkCompatibilityCheck",
    "UpdatedPost",
    "UserPosts",
    "ValidatedUserPosts",
]
