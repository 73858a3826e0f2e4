"""Quality gate run: fails (exit code 1) when p95 >= 500ms, failures >= 1% or <= 50 requests."""

from locust import HttpUser, constant, events, task

from storeqa.load.checks import has_json_key, run_checks
from storeqa.load.shapes import ConstantShape
from storeqa.load.thresholds import Thresholds, enforce_thresholds

THRESHOLDS = Thresholds(p95_ms=500, max_failure_ratio=0.01, min_requests=50)


class ThresholdUser(HttpUser):
    host = "https://catfact.ninja"
    wait_time = constant(1)

    @task
    def get_fact(self):
        with self.client.get("/fact", name="GET /fact", catch_response=True) as response:
            run_checks(
                response,
                {
                    "status is 200": lambda r: r.status_code == 200,
                    "response time < 500ms": lambda r: r.elapsed.total_seconds() < 0.5,
                    "response has fact": lambda r: has_json_key(r, "fact"),
                },
            )


class ThresholdShape(ConstantShape):
    users = 10
    duration = "30s"


@events.quitting.add_listener
def on_quitting(environment, **kwargs):
    enforce_thresholds(environment, THRESHOLDS)
