from .config import DEFAULT_CONFIG
from .driver import Driver
from .session import BrowserSession

__all__ = ["DEFAULT_CONFIG", "Driver", "BrowserSession"]
