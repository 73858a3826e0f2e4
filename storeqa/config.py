import os
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

FALSY_VALUES = ("", "0", "false", "no", "off")


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in FALSY_VALUES


def env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


class Viewport(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = 1920
    height: int = 1080


class UiConfig(BaseModel):
    """Settings for the storefront UI suites."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "https://www.demoblaze.com/"
    is_ci: bool = False
    headless: bool = True
    ws_endpoint: Optional[str] = None
    language: str = "en-US"
    viewport: Viewport = Field(default_factory=Viewport)
    expect_timeout_ms: int = 5000
    trace_on_retry: bool = True
    screenshot_on_failure: bool = True
    video_on_failure: bool = True

    def browser_config(self) -> Dict:
        """Dict form consumed by Driver / BrowserSession."""
        return {
            "headless": self.headless,
            "viewport": {"width": self.viewport.width, "height": self.viewport.height},
            "language": self.language,
            "base_url": self.base_url,
            "ws_endpoint": self.ws_endpoint,
        }


class ApiConfig(BaseModel):
    """Settings for the public mock REST API suites."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "https://jsonplaceholder.typicode.com"
    timeout_ms: int = 30000
    log_requests: bool = False
    log_responses: bool = False

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }


class LocalLlmConfig(BaseModel):
    """Settings for the OpenAI-compatible server running on the local network."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "http://localhost:1234/v1"
    model: str = "zai-org/glm-4.7-flash"
    api_key: str = "lm-studio"
    timeout_ms: int = 60000


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    ui: UiConfig = Field(default_factory=UiConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    llm: LocalLlmConfig = Field(default_factory=LocalLlmConfig)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **ui_overrides) -> "Settings":
        """Build the run configuration from the environment.

        Args:
            env_file: optional path of a .env file, loaded without overriding
                variables that are already set
            ui_overrides: UiConfig fields taking precedence over the environment
                (e.g. values coming from command line options)

        Returns:
            Settings: frozen configuration shared by every component of the run
        """
        load_dotenv(env_file)

        ui_values = {
            "base_url": os.getenv("BASE_URL") or UiConfig.model_fields["base_url"].default,
            "is_ci": env_bool("CI"),
            "headless": env_bool("HEADLESS", True),
            "ws_endpoint": os.getenv("PW_WS_ENDPOINT") or None,
        }
        ui_values.update({k: v for k, v in ui_overrides.items() if v is not None})

        api = ApiConfig(
            base_url=os.getenv("API_BASE_URL") or ApiConfig.model_fields["base_url"].default,
            timeout_ms=env_int("API_TIMEOUT", 30000),
            log_requests=os.getenv("LOG_API_REQUESTS") == "true",
            log_responses=os.getenv("LOG_API_RESPONSES") == "true",
        )
        llm = LocalLlmConfig(
            base_url=os.getenv("LOCAL_LLM_BASE_URL") or LocalLlmConfig.model_fields["base_url"].default,
            model=os.getenv("LOCAL_LLM_MODEL") or LocalLlmConfig.model_fields["model"].default,
            api_key=os.getenv("LOCAL_LLM_API_KEY") or LocalLlmConfig.model_fields["api_key"].default,
            timeout_ms=env_int("LOCAL_LLM_TIMEOUT", 60000),
        )
        return cls(ui=UiConfig(**ui_values), api=api, llm=llm)
