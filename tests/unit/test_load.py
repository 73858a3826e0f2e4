from types import SimpleNamespace

import pytest

from storeqa.load import (
    Thresholds,
    check_thresholds,
    constant_user_count,
    enforce_thresholds,
    has_json_key,
    parse_duration,
    run_checks,
    stage_user_count,
    total_duration,
)

pytestmark = pytest.mark.unit

SPIKE = [("10s", 100), ("1m", 100), ("10s", 1400), ("3m", 1400), ("10s", 100), ("3m", 100), ("10s", 0)]


@pytest.mark.parametrize(
    "value, seconds",
    [("30s", 30), ("1m", 60), ("2h", 7200), ("1h30m", 5400), ("1.5m", 90), ("45", 45), (12, 12)],
)
def test_parse_duration(value, seconds):
    assert parse_duration(value) == seconds


@pytest.mark.parametrize("value", ["", "ten seconds", "5d", "1m garbage"])
def test_parse_duration_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_duration(value)


def test_stages_ramp_linearly():
    stages = [("10s", 100), ("10s", 100), ("10s", 0)]
    assert total_duration(stages) == 30
    assert stage_user_count(stages, 0) == (0, 10)
    assert stage_user_count(stages, 5) == (50, 10)
    assert stage_user_count(stages, 15) == (100, 1)
    assert stage_user_count(stages, 25) == (50, 10)
    assert stage_user_count(stages, 30) is None


def test_spike_profile_peaks():
    users, _ = stage_user_count(SPIKE, 10 + 60 + 10 + 30)
    assert users == 1400
    assert stage_user_count(SPIKE, total_duration(SPIKE)) is None


def test_constant_profile():
    assert constant_user_count(10, "30s", 0) == (10, 10)
    assert constant_user_count(10, "30s", 29.9) == (10, 10)
    assert constant_user_count(10, "30s", 30) is None


def _stats(p95=200, fail_ratio=0.0, num_requests=100):
    return SimpleNamespace(
        get_response_time_percentile=lambda percent: p95,
        fail_ratio=fail_ratio,
        num_requests=num_requests,
    )


def test_thresholds_pass():
    assert check_thresholds(_stats(), Thresholds(p95_ms=500, max_failure_ratio=0.01, min_requests=50)) == []


def test_thresholds_report_each_breach():
    breaches = check_thresholds(
        _stats(p95=800, fail_ratio=0.05, num_requests=20),
        Thresholds(p95_ms=500, max_failure_ratio=0.01, min_requests=50),
    )
    assert len(breaches) == 3
    assert breaches[0].startswith("p95 response time 800ms")


def test_unset_thresholds_are_skipped():
    assert check_thresholds(_stats(p95=10_000, fail_ratio=1.0, num_requests=0), Thresholds()) == []


def test_enforce_sets_exit_code():
    environment = SimpleNamespace(stats=SimpleNamespace(total=_stats(p95=900)), process_exit_code=None)
    enforce_thresholds(environment, Thresholds(p95_ms=500))
    assert environment.process_exit_code == 1

    environment = SimpleNamespace(stats=SimpleNamespace(total=_stats()), process_exit_code=None)
    enforce_thresholds(environment, Thresholds(p95_ms=500))
    assert environment.process_exit_code is None


CHECKS = {
    "status is 200": lambda r: r.status_code == 200,
    "has fact": lambda r: has_json_key(r, "fact"),
}


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body
        self.outcome = None

    def json(self):
        if self.body is None:
            raise ValueError("not JSON")
        return self.body

    def success(self):
        self.outcome = "success"

    def failure(self, message):
        self.outcome = message


def test_run_checks_marks_success():
    response = FakeResponse(body={"fact": "Cats sleep a lot"})
    assert run_checks(response, CHECKS)
    assert response.outcome == "success"


def test_run_checks_names_failed_checks():
    response = FakeResponse(status_code=500)
    ok = run_checks(response, CHECKS)
    assert not ok
    assert response.outcome == "failed checks: status is 200, has fact"
