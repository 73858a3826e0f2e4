import asyncio
import logging

import requests


def check_page_status(url: str, timeout: float = 5.0) -> int:
    """Return the HTTP status of ``url``; raises requests.RequestException when unreachable."""
    response = requests.get(url, timeout=timeout)
    logging.debug(f"Preflight {url} returned status {response.status_code}")
    return response.status_code


def is_reachable(url: str, timeout: float = 5.0) -> bool:
    try:
        check_page_status(url, timeout=timeout)
    except requests.RequestException as e:
        logging.warning(f"Target {url} is not reachable: {e}")
        return False
    return True


async def is_reachable_async(url: str, timeout: float = 5.0) -> bool:
    """Same probe as is_reachable, run in a thread to avoid blocking the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, is_reachable, url, timeout)
