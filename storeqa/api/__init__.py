from .client import create_api_client, create_client, create_llm_client
from .factory import ApiFactory, LocalApiFactory

__all__ = ["ApiFactory", "LocalApiFactory", "create_api_client", "create_client", "create_llm_client"]
