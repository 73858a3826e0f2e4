import logging
import time
from typing import Optional

import pytest
from _pytest.runner import runtestprotocol

from storeqa.retry.strategy import (
    AggressiveRetryStrategy,
    ConservativeRetryStrategy,
    RetryStrategy,
    select_retry_strategy,
)
from storeqa.utils.log_icon import icon

STRATEGY_CHOICES = ("auto", "aggressive", "conservative", "off")


def resolve_strategy(name: str, is_ci: bool) -> Optional[RetryStrategy]:
    """Map the ``--retry-strategy`` option to a policy; ``off`` disables retries."""
    if name == "auto":
        return select_retry_strategy(is_ci)
    if name == "aggressive":
        return AggressiveRetryStrategy()
    if name == "conservative":
        return ConservativeRetryStrategy()
    if name == "off":
        return None
    raise ValueError(f"Unknown retry strategy: {name}")


def failure_message(report) -> str:
    """The exception line of a failed report, without traceback or test source."""
    reprcrash = getattr(report.longrepr, "reprcrash", None)
    if reprcrash is not None:
        return reprcrash.message
    return str(report.longrepr)


class RetryPlugin:
    """Re-runs a failed test while the retry strategy allows it.

    Interim failures are reported with a ``rerun`` outcome so that only the
    last run decides the result. ``item.execution_count`` holds the number of
    the current run (1 for the first).
    """

    def __init__(self, strategy: Optional[RetryStrategy]):
        self.strategy = strategy

    @pytest.hookimpl(tryfirst=True)
    def pytest_runtest_protocol(self, item: pytest.Item, nextitem: Optional[pytest.Item]):
        if self.strategy is None:
            item.execution_count = 1
            return None

        item.ihook.pytest_runtest_logstart(nodeid=item.nodeid, location=item.location)
        item.execution_count = 0
        attempt = 0
        while True:
            item.execution_count += 1
            reports = runtestprotocol(item, nextitem=nextitem, log=False)
            failure = next((r for r in reports if r.failed), None)

            if failure is None or not self.strategy.should_retry(failure_message(failure), attempt):
                for report in reports:
                    item.ihook.pytest_runtest_logreport(report=report)
                break

            for report in reports:
                if report.failed:
                    report.outcome = "rerun"
                item.ihook.pytest_runtest_logreport(report=report)

            delay_ms = self.strategy.get_delay(attempt)
            attempt += 1
            logging.warning(
                f"{icon['retry']} {item.nodeid} failed, retry {attempt}/{self.strategy.max_attempts} in {delay_ms}ms"
            )
            time.sleep(delay_ms / 1000)

        item.ihook.pytest_runtest_logfinish(nodeid=item.nodeid, location=item.location)
        return True

    def pytest_report_teststatus(self, report):
        if report.outcome == "rerun":
            return "rerun", "R", ("RERUN", {"yellow": True})
        return None
