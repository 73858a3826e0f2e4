from .jsonplaceholder import JsonPlaceholderController
from .local_llm import LocalLlmController

__all__ = ["JsonPlaceholderController", "LocalLlmController"]
