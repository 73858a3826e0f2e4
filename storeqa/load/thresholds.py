import logging
from dataclasses import dataclass
from typing import List, Optional

from storeqa.utils.log_icon import icon


@dataclass(frozen=True)
class Thresholds:
    """Pass/fail gates for a load run; unset gates are not checked."""

    p95_ms: Optional[float] = None
    max_failure_ratio: Optional[float] = None
    min_requests: Optional[int] = None


def check_thresholds(total, thresholds: Thresholds) -> List[str]:
    """Compare aggregated locust stats (``environment.stats.total``) against the gates.

    Returns:
        List[str]: one message per breached gate, empty when the run passed
    """
    breaches = []
    if thresholds.p95_ms is not None:
        p95 = total.get_response_time_percentile(0.95) or 0
        if p95 >= thresholds.p95_ms:
            breaches.append(f"p95 response time {p95}ms >= {thresholds.p95_ms}ms")
    if thresholds.max_failure_ratio is not None and total.fail_ratio >= thresholds.max_failure_ratio:
        breaches.append(f"failure ratio {total.fail_ratio:.2%} >= {thresholds.max_failure_ratio:.2%}")
    if thresholds.min_requests is not None and total.num_requests <= thresholds.min_requests:
        breaches.append(f"request count {total.num_requests} <= {thresholds.min_requests}")
    return breaches


def enforce_thresholds(environment, thresholds: Thresholds) -> List[str]:
    """Set a non-zero exit code on ``environment`` when any gate is breached."""
    breaches = check_thresholds(environment.stats.total, thresholds)
    for breach in breaches:
        logging.error(f"{icon['cross']} Threshold breached: {breach}")
    if breaches:
        environment.process_exit_code = 1
    else:
        logging.info(f"{icon['check']} All thresholds met")
    return breaches
