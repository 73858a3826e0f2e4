from .data_factory import DataFactory, generate_id
from .llm_data_factory import LocalApiDataFactory

__all__ = ["DataFactory", "LocalApiDataFactory", "generate_id"]
