"""Latency sampling across several endpoints of the facts API: 5 users for 20s."""

import logging
import random

from locust import HttpUser, constant, task

from storeqa.load.checks import has_json_key, run_checks
from storeqa.load.shapes import ConstantShape

ENDPOINTS = ["/fact", "/facts", "/facts?max_length=100"]
MAX_RESPONSE_MS = 500


class EndpointLatencyUser(HttpUser):
    host = "https://catfact.ninja"
    wait_time = constant(1)

    @task
    def random_endpoint(self):
        endpoint = random.choice(ENDPOINTS)
        with self.client.get(endpoint, name=f"GET {endpoint}", catch_response=True) as response:
            elapsed_ms = response.elapsed.total_seconds() * 1000
            run_checks(
                response,
                {
                    "status is 200": lambda r: r.status_code == 200,
                    f"response time < {MAX_RESPONSE_MS}ms": lambda r: elapsed_ms < MAX_RESPONSE_MS,
                    "response has data": lambda r: has_json_key(r, "fact", "data"),
                },
            )
        logging.info(f"Endpoint: {endpoint}, Duration: {elapsed_ms:.0f}ms")


class EndpointLatencyShape(ConstantShape):
    users = 5
    duration = "20s"
