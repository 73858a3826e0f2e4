"""Locust load shapes; import only from locustfiles, locust patches the process on import."""

from typing import Sequence

from locust import LoadTestShape

from storeqa.load.profile import Duration, Stage, constant_user_count, stage_user_count


class StagesShape(LoadTestShape):
    """k6-style stages: linear ramps between user targets, stopping after the last stage."""

    abstract = True
    stages: Sequence[Stage] = ()

    def tick(self):
        return stage_user_count(self.stages, self.get_run_time())


class ConstantShape(LoadTestShape):
    """A fixed number of users for a fixed time."""

    abstract = True
    users: int = 1
    duration: Duration = "30s"

    def tick(self):
        return constant_user_count(self.users, self.duration, self.get_run_time())
