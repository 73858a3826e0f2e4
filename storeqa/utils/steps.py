import logging
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from typing import List, Optional

from storeqa.utils.log_icon import icon


@dataclass
class Step:
    description: str
    status: str = "running"
    duration_ms: int = 0
    error: Optional[str] = None


@dataclass
class StepRecorder:
    """Collects the Given/When/Then steps of one test run."""

    steps: List[Step] = field(default_factory=list)

    @property
    def failed_step(self) -> Optional[Step]:
        for s in self.steps:
            if s.status == "failed":
                return s
        return None

    def to_list(self) -> List[dict]:
        return [asdict(s) for s in self.steps]


# One test runs at a time per worker process
_current_recorder: Optional[StepRecorder] = None


def bind_recorder(recorder: Optional[StepRecorder]) -> None:
    """Route the steps of the running test into ``recorder``."""
    global _current_recorder
    _current_recorder = recorder


def current_recorder() -> Optional[StepRecorder]:
    return _current_recorder


@contextmanager
def step(description: str):
    """Mark a block of a test as one named step.

    Works around awaits as well, e.g.::

        with step("When user opens the cart"):
            await home_actions.select_menu_option(MenuOptions.CART)
    """
    recorder = current_recorder()
    current = Step(description=description)
    if recorder is not None:
        recorder.steps.append(current)

    logging.info(f"{icon['step']} {description}")
    start = time.perf_counter()
    try:
        yield current
    except BaseException as e:
        current.status = "failed"
        current.error = f"{type(e).__name__}: {e}"
        logging.error(f"{icon['cross']} Step failed: {description} - {current.error}")
        raise
    else:
        current.status = "passed"
    finally:
        current.duration_ms = int((time.perf_counter() - start) * 1000)
