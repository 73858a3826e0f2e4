"""Gradual ramp from 100 to 500 users to find the breaking point."""

from locust import HttpUser, constant, task

from storeqa.load.shapes import StagesShape


class StressUser(HttpUser):
    host = "http://test.k6.io"
    wait_time = constant(1)

    @task
    def home(self):
        self.client.get("/", name="GET /")


class StressShape(StagesShape):
    stages = [
        ("2m", 100),
        ("5m", 200),
        ("2m", 300),
        ("5m", 400),
        ("2m", 500),
        ("5m", 0),
    ]
