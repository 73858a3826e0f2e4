"""Sustained load for an hour to surface slow degradation: 50 users for 60m."""

from locust import HttpUser, constant, task

from storeqa.load.shapes import ConstantShape


class SoakUser(HttpUser):
    host = "http://test.k6.io"
    wait_time = constant(1)

    @task
    def home(self):
        self.client.get("/", name="GET /")


class SoakShape(ConstantShape):
    users = 50
    duration = "60m"
