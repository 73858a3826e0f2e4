"""Sudden jumps in traffic: 100 users, a spike to 500, back to 100, then down to 0."""

from locust import HttpUser, constant, task

from storeqa.load.shapes import StagesShape


class SpikeUser(HttpUser):
    host = "http://test.k6.io"
    wait_time = constant(1)

    @task
    def home(self):
        self.client.get("/", name="GET /")


class SpikeShape(StagesShape):
    stages = [
        ("10s", 100),
        ("1m", 100),
        ("10s", 500),
        ("3m", 500),
        ("10s", 100),
        ("3m", 100),
        ("10s", 0),
    ]
