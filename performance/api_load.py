"""Steady load on a public facts API: 10 users for 30s.

    locust -f performance/api_load.py --headless
"""

from locust import HttpUser, constant, task

from storeqa.load.shapes import ConstantShape


class FactApiUser(HttpUser):
    host = "https://catfact.ninja"
    wait_time = constant(1)

    @task
    def get_fact(self):
        self.client.get("/fact", name="GET /fact")


class ApiLoadShape(ConstantShape):
    users = 10
    duration = "30s"
