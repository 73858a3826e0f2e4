from .get_log import GetLog
from .log_icon import icon
from .steps import Step, StepRecorder, bind_recorder, current_recorder, step
from .verify import verify

__all__ = ["GetLog", "icon", "Step", "StepRecorder", "bind_recorder", "current_recorder", "step", "verify"]
