#!/usr/bin/env python3
import argparse
import asyncio
import os
import sys

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from storeqa.config import Settings
from storeqa.retry.plugin import STRATEGY_CHOICES
from storeqa.utils.preflight import is_reachable

PROJECT_CHOICES = ("chromium", "local-api", "all")


async def check_playwright_browsers_async(ws_endpoint=None):
    try:
        async with async_playwright() as p:
            if ws_endpoint:
                browser = await p.chromium.connect(ws_endpoint)
            else:
                browser = await p.chromium.launch(headless=True)
            await browser.close()
        print("✅ Playwright browsers available (Async API startup successful)")
        return True
    except PlaywrightError as e:
        print(f"⚠️ Playwright browsers unavailable (Async API failed): {e}")
        return False


def tags_to_marker_expression(tags):
    """``regression,negative`` -> ``regression or negative``; a full expression passes through."""
    if not tags:
        return None
    if any(op in f" {tags} " for op in (" and ", " or ", " not ", "(")):
        return tags
    names = [t.strip().lstrip("@") for t in tags.split(",") if t.strip()]
    return " or ".join(names)


def build_pytest_args(args):
    pytest_args = [args.path, "--project", args.project, "--retry-strategy", args.retry_strategy]
    if args.base_url:
        pytest_args += ["--base-url", args.base_url]
    expression = tags_to_marker_expression(args.tag)
    if expression:
        pytest_args += ["-m", expression]
    if args.junitxml:
        pytest_args.append(f"--junitxml={args.junitxml}")
    return pytest_args + args.pytest_args


def parse_args():
    parser = argparse.ArgumentParser(description="storeqa test entry point")
    parser.add_argument("path", nargs="?", default="tests", help="Test directory or file (default: tests)")
    parser.add_argument("--tag", "-t", help="Comma separated tags (regression,negative) or a marker expression")
    parser.add_argument("--project", "-p", choices=PROJECT_CHOICES, default="all")
    parser.add_argument("--base-url", help="Storefront URL, overrides BASE_URL")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--retry-strategy", choices=STRATEGY_CHOICES, default="auto")
    parser.add_argument("--junitxml", help="JUnit XML path (default reports/results.xml)")
    parser.add_argument("--env-file", help=".env file to load before reading the configuration")
    parser.add_argument("--skip-browser-check", action="store_true")
    parser.add_argument("pytest_args", nargs=argparse.REMAINDER, help="Extra arguments after -- go to pytest")
    args = parser.parse_args()
    if args.pytest_args and args.pytest_args[0] == "--":
        args.pytest_args = args.pytest_args[1:]
    return args


def main():
    args = parse_args()
    if args.headed:
        os.environ["HEADLESS"] = "false"

    settings = Settings.from_env(args.env_file, base_url=args.base_url)
    print(f"🏃 Runtime environment: {'CI' if settings.ui.is_ci else 'Local environment'}")
    print(f"🌐 Storefront: {settings.ui.base_url}")

    if args.project in ("chromium", "all") and not args.skip_browser_check:
        print("🔍 Checking Playwright browsers...")
        ok = asyncio.run(check_playwright_browsers_async(settings.ui.ws_endpoint))
        if not ok:
            print("Please manually run: `playwright install chromium` to install browser binaries, then retry.", file=sys.stderr)
            sys.exit(1)

        for url in (settings.ui.base_url, settings.api.base_url):
            if not is_reachable(url):
                print(f"⚠️ {url} is not reachable, tests against it will fail")

    if args.project in ("local-api", "all") and not is_reachable(f"{settings.llm.base_url.rstrip('/')}/models"):
        print(f"⚠️ Local LLM server {settings.llm.base_url} is not reachable, local tests will be skipped")

    pytest_args = build_pytest_args(args)
    print(f"⚙️ pytest {' '.join(pytest_args)}")
    sys.exit(pytest.main(pytest_args))


if __name__ == "__main__":
    main()
