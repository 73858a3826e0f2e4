import asyncio
import logging
import os
import uuid
from typing import Any, Dict, Optional

from playwright.async_api import BrowserContext, Page

from storeqa.browser.config import DEFAULT_CONFIG

# Browser creation is delegated to Driver to ensure a single entry-point.
from storeqa.browser.driver import Driver


class BrowserSession:
    """Browser session owned by exactly one test."""

    def __init__(self, session_id: str = None, browser_config: Dict[str, Any] = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.browser_config = {**DEFAULT_CONFIG, **(browser_config or {})}
        self.driver: Optional[Driver] = None
        self._is_closed = False
        self._tracing = False
        self._lock = asyncio.Lock()

    async def initialize(self):
        """Initialize browser session."""
        async with self._lock:
            if self._is_closed:
                raise RuntimeError("Browser session is closed")

            logging.debug(f"Initializing browser session {self.session_id} with config: {self.browser_config}")

            try:
                self.driver = await Driver.getInstance(browser_config=self.browser_config)
                logging.debug(f"Browser session {self.session_id} initialized successfully via Driver")
            except Exception as e:
                logging.error(f"Failed to initialize browser session {self.session_id}: {e}")
                await self._cleanup()
                raise
        return self

    async def navigate_to(self, url: str = "", **kwargs):
        """Navigate to URL; relative URLs resolve against the configured base_url."""
        page = self.get_page()

        logging.info(f"Session {self.session_id} navigating to: {url or self.browser_config.get('base_url')}")
        kwargs.setdefault("timeout", 60000)
        kwargs.setdefault("wait_until", "domcontentloaded")
        await page.goto(url, **kwargs)

    def get_page(self) -> Page:
        """Return current page via Driver."""
        if self._is_closed or not self.driver:
            raise RuntimeError("Browser session not initialized or closed")
        return self.driver.get_page()

    def get_context(self) -> BrowserContext:
        if self._is_closed or not self.driver:
            raise RuntimeError("Browser session not initialized or closed")
        return self.driver.get_context()

    def is_closed(self) -> bool:
        """Check if session is closed."""
        return self._is_closed

    async def start_tracing(self):
        await self.get_context().tracing.start(screenshots=True, snapshots=True, sources=True)
        self._tracing = True

    async def save_trace(self, path: str) -> Optional[str]:
        """Stop tracing and write the archive to ``path``; no-op when tracing is off."""
        if not self._tracing:
            return None
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        await self.get_context().tracing.stop(path=path)
        self._tracing = False
        logging.info(f"Trace saved: {path}")
        return path

    async def screenshot(self, path: str) -> str:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        await self.get_page().screenshot(path=path, full_page=True)
        logging.info(f"Screenshot saved: {path}")
        return path

    async def video_path(self) -> Optional[str]:
        """Path of the page video; the file is complete only after close()."""
        page = self.get_page()
        if page.video is None:
            return None
        return str(await page.video.path())

    async def _cleanup(self):
        """Internal cleanup method."""
        try:
            if self.driver and not self.driver.is_closed():
                await self.driver.close_browser()
        except Exception as e:
            logging.error(f"Error during cleanup: {e}")
        finally:
            self.driver = None

    async def close(self):
        """Close browser session."""
        async with self._lock:
            if self._is_closed:
                return

            logging.debug(f"Closing browser session {self.session_id}")
            self._is_closed = True
            await self._cleanup()
            logging.debug(f"Browser session {self.session_id} closed")

    async def __aenter__(self):
        """Async context manager entry."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
