import logging
import os
import re

import pytest
import pytest_asyncio
from playwright.async_api import expect

from storeqa.api import ApiFactory, LocalApiFactory, create_api_client, create_llm_client
from storeqa.api.services.llm_service import SdkCompatibilityCheck
from storeqa.browser.session import BrowserSession
from storeqa.config import Settings
from storeqa.reporting.plugin import ReportPlugin, add_artifact
from storeqa.retry.plugin import STRATEGY_CHOICES, RetryPlugin, resolve_strategy
from storeqa.ui.actions.factory import ActionFactory
from storeqa.utils.get_log import GetLog
from storeqa.utils.log_icon import icon
from storeqa.utils.preflight import is_reachable

SETTINGS_KEY = pytest.StashKey[Settings]()

MARKERS = {
    "regression": "full storefront regression suite",
    "acceptance": "API acceptance checks",
    "integration": "multi-call API workflows",
    "negative": "error and rejection paths",
    "positive": "happy paths",
    "demo": "local LLM demo scenarios (needs the local server)",
    "local": "local LLM checks (needs the local server)",
    "api": "HTTP API tests",
    "order": "cart and checkout scenarios",
    "monitor": "monitor products",
    "phones": "phone products",
    "accessibility": "accessibility checks",
    "performance": "browser performance measurements",
    "unit": "offline tests of the library itself",
}

LOCAL_MARKERS = ("local", "demo")


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("storeqa")
    group.addoption("--base-url", action="store", default=None, help="Storefront URL (overrides BASE_URL)")
    group.addoption(
        "--project",
        action="store",
        choices=("chromium", "local-api", "all"),
        default="all",
        help="chromium: storefront and public API tests, local-api: local LLM tests only",
    )
    group.addoption(
        "--retry-strategy",
        action="store",
        choices=STRATEGY_CHOICES,
        default="auto",
        help="auto picks aggressive in CI and conservative locally",
    )
    group.addoption("--headed", action="store_true", default=False, help="Show the browser window")


def pytest_configure(config: pytest.Config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")

    GetLog.get_log()

    settings = Settings.from_env(
        base_url=config.getoption("--base-url"),
        headless=False if config.getoption("--headed") else None,
    )
    config.stash[SETTINGS_KEY] = settings
    expect.set_options(timeout=settings.ui.expect_timeout_ms)

    strategy = resolve_strategy(config.getoption("--retry-strategy"), settings.ui.is_ci)
    config.pluginmanager.register(RetryPlugin(strategy), "storeqa-retry")
    config.pluginmanager.register(ReportPlugin(), "storeqa-report")
    logging.info(
        f"{icon['running']} Storefront {settings.ui.base_url}, "
        f"retry strategy {type(strategy).__name__ if strategy else 'off'}"
    )


def _is_local(item: pytest.Item) -> bool:
    return any(item.get_closest_marker(name) for name in LOCAL_MARKERS)


def pytest_collection_modifyitems(config: pytest.Config, items):
    project = config.getoption("--project")
    if project != "all":
        keep_local = project == "local-api"
        selected = [item for item in items if _is_local(item) == keep_local]
        deselected = [item for item in items if _is_local(item) != keep_local]
        if deselected:
            config.hook.pytest_deselected(items=deselected)
            items[:] = selected

    local_items = [item for item in items if _is_local(item)]
    if not local_items:
        return
    llm = config.stash[SETTINGS_KEY].llm
    if not is_reachable(f"{llm.base_url.rstrip('/')}/models", timeout=3):
        skip = pytest.mark.skip(reason=f"Local LLM server not reachable at {llm.base_url}")
        for item in local_items:
            item.add_marker(skip)


@pytest.fixture
def settings(request) -> Settings:
    return request.config.stash[SETTINGS_KEY]


def _artifact_dir(item: pytest.Item) -> str:
    name = re.sub(r"[^\w.-]+", "_", item.nodeid).strip("_")
    return os.path.join("reports", "artifacts", f"{name}-run{getattr(item, 'execution_count', 1)}")


@pytest_asyncio.fixture
async def browser_session(request, settings: Settings):
    """One browser per test, closed afterwards.

    A failed run keeps a screenshot and the page video; runs after the first
    are traced as well.
    """
    item = request.node
    ui = settings.ui
    artifact_dir = _artifact_dir(item)
    browser_config = ui.browser_config()
    if ui.video_on_failure and not ui.ws_endpoint:
        browser_config["record_video_dir"] = os.path.join(artifact_dir, "video")

    session = BrowserSession(browser_config=browser_config)
    await session.initialize()
    if ui.trace_on_retry and getattr(item, "execution_count", 1) > 1:
        await session.start_tracing()

    yield session

    report = getattr(item, "rep_call", None)
    failed = report is not None and report.failed
    video = None
    try:
        if failed and ui.screenshot_on_failure:
            add_artifact(item, "screenshot", await session.screenshot(os.path.join(artifact_dir, "failure.png")))
        trace = await session.save_trace(os.path.join(artifact_dir, "trace.zip"))
        if trace and failed:
            add_artifact(item, "trace", trace)
        video = await session.video_path()
    finally:
        await session.close()

    if video and os.path.exists(video):
        if failed:
            add_artifact(item, "video", video)
        else:
            os.remove(video)


@pytest_asyncio.fixture
async def page(browser_session: BrowserSession):
    await browser_session.navigate_to(browser_session.browser_config["base_url"])
    return browser_session.get_page()


@pytest.fixture
def action_factory(page) -> ActionFactory:
    return ActionFactory(page)


@pytest_asyncio.fixture
async def api_client(settings: Settings):
    async with create_api_client(settings.api) as client:
        yield client


@pytest.fixture
def api_factory(api_client) -> ApiFactory:
    return ApiFactory(api_client)


@pytest_asyncio.fixture
async def llm_client(settings: Settings):
    async with create_llm_client(settings.llm) as client:
        yield client


@pytest.fixture
def local_api_factory(llm_client, settings: Settings) -> LocalApiFactory:
    return LocalApiFactory(llm_client, settings.llm.model)


@pytest_asyncio.fixture
async def sdk_check(settings: Settings):
    check = SdkCompatibilityCheck(settings.llm)
    await check.initialize()
    yield check
    await check.close()
