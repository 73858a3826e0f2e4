import math
import re
from typing import Optional, Sequence, Tuple, Union

Duration = Union[int, float, str]
Stage = Tuple[Duration, int]

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(h|m|s)")
_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}


def parse_duration(value: Duration) -> float:
    """Seconds in a duration such as ``30s``, ``1m``, ``1h30m`` or a bare number of seconds."""
    if isinstance(value, (int, float)):
        return float(value)
    text = value.strip().lower()
    if re.fullmatch(r"\d+(?:\.\d+)?", text):
        return float(text)
    parts = _DURATION_PART.findall(text)
    if not parts or "".join(n + u for n, u in parts) != text:
        raise ValueError(f"Invalid duration: {value!r}")
    return sum(float(number) * _UNIT_SECONDS[unit] for number, unit in parts)


def total_duration(stages: Sequence[Stage]) -> float:
    return sum(parse_duration(duration) for duration, _ in stages)


def stage_user_count(stages: Sequence[Stage], run_time: float) -> Optional[Tuple[int, float]]:
    """Users and spawn rate ``run_time`` seconds into a staged run.

    Each stage ramps linearly from the previous target (0 for the first) to
    its own target. Returns None once every stage has elapsed.
    """
    elapsed = 0.0
    previous = 0
    for duration, target in stages:
        seconds = parse_duration(duration)
        if seconds > 0 and run_time < elapsed + seconds:
            progress = (run_time - elapsed) / seconds
            users = round(previous + (target - previous) * progress)
            spawn_rate = max(1, math.ceil(abs(target - previous) / seconds))
            return users, spawn_rate
        elapsed += seconds
        previous = target
    return None


def constant_user_count(users: int, duration: Duration, run_time: float) -> Optional[Tuple[int, float]]:
    if run_time >= parse_duration(duration):
        return None
    return users, max(1, users)
