from storeqa.config import ApiConfig, LocalLlmConfig, Settings, UiConfig

__all__ = ["Settings", "UiConfig", "ApiConfig", "LocalLlmConfig"]
