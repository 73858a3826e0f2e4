import logging

from playwright.async_api import async_playwright


class Driver:
    @staticmethod
    async def getInstance(browser_config, *args, **kwargs):
        """Returns a new Driver with a started browser, context and page.

        Args:
            browser_config (dict): Browser configuration options, see create_browser.
        """
        logging.debug(f"Driver.getInstance called with browser_config: {browser_config}")

        driver = Driver(browser_config=browser_config)
        await driver.create_browser(browser_config=browser_config)
        return driver

    def __init__(self, browser_config=None, *args, **kwargs):
        self._is_closed = False
        self.page = None
        self.browser = None
        self.context = None
        self.playwright = None
        self.config = browser_config

    def is_closed(self):
        """Check if the browser instance is closed."""
        return getattr(self, "_is_closed", True)

    async def create_browser(self, browser_config):
        """Creates a new browser instance and sets up the page.

        Args:
            browser_config (dict): Browser configuration containing:
                - headless (bool): Whether to run browser in headless mode
                - viewport (dict): Browser viewport width and height
                - language (str): Browser locale
                - base_url (str): Base URL that relative page.goto() calls resolve against
                - ws_endpoint (str): Connect to a remote browser instead of launching one
                - record_video_dir (str): Record a video of every page into this folder

        Returns:
            Page: the page opened in the new context
        """
        try:
            self.playwright = await async_playwright().start()
            viewport = browser_config["viewport"]

            if browser_config.get("ws_endpoint"):
                logging.info(f"Connecting to remote browser at {browser_config['ws_endpoint']}")
                self.browser = await self.playwright.chromium.connect(browser_config["ws_endpoint"])
            else:
                self.browser = await self.playwright.chromium.launch(
                    headless=browser_config["headless"],
                    args=[
                        "--disable-dev-shm-usage",  # Mitigate shared memory issues in Docker
                        "--no-sandbox",
                        "--disable-setuid-sandbox",
                        "--disable-gpu",
                        "--force-device-scale-factor=1",
                        f'--window-size={viewport["width"]},{viewport["height"]}',
                    ],
                )

            context_options = {
                "viewport": {"width": viewport["width"], "height": viewport["height"]},
                "device_scale_factor": 1,
                "is_mobile": False,
                "locale": browser_config["language"],
            }
            if browser_config.get("base_url"):
                context_options["base_url"] = browser_config["base_url"]
            if browser_config.get("record_video_dir"):
                context_options["record_video_dir"] = browser_config["record_video_dir"]
                context_options["record_video_size"] = {"width": viewport["width"], "height": viewport["height"]}

            self.context = await self.browser.new_context(**context_options)
            self.page = await self.context.new_page()
            self.config = browser_config

            logging.debug(f"Browser instance created successfully with config: {browser_config}")
            return self.page

        except Exception as e:
            logging.error("Failed to create browser instance.", exc_info=True)
            raise e

    def get_context(self):
        return self.context

    def get_page(self):
        """Returns the current page instance.

        Returns:
            Page: The current page instance.
        """
        return self.page

    async def close_browser(self):
        """Closes the context (flushing videos), the browser and stops Playwright."""
        try:
            if not self.is_closed():
                await self.context.close()
                await self.browser.close()
                await self.playwright.stop()
                self._is_closed = True
                logging.debug("Browser instance closed successfully.")
        except Exception as e:
            logging.error("Failed to close browser instance.", exc_info=True)
            raise e
