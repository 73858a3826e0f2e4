"""Each virtual user walks home -> about -> contact: 10 users for 30s."""

import logging
import uuid

from locust import HttpUser, SequentialTaskSet, constant, task

from storeqa.load.checks import run_checks
from storeqa.load.shapes import ConstantShape


def page_loaded(response) -> bool:
    return response.status_code == 200


class VisitorJourney(SequentialTaskSet):
    def on_start(self):
        self.session_id = f"session_{uuid.uuid4().hex[:8]}"

    def _visit(self, path: str, check_name: str):
        with self.client.get(path, name=f"GET {path}", catch_response=True) as response:
            run_checks(response, {check_name: page_loaded})

    @task
    def home(self):
        self._visit("/", "home page loaded")

    @task
    def about(self):
        self._visit("/about.php", "about page loaded")

    @task
    def contact(self):
        self._visit("/contact.php", "contact page loaded")
        logging.info(f"User journey completed for {self.session_id}")


class JourneyUser(HttpUser):
    host = "http://test.k6.io"
    wait_time = constant(1)
    tasks = [VisitorJourney]


class JourneyShape(ConstantShape):
    users = 10
    duration = "30s"
