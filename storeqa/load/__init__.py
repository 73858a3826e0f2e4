from .checks import has_json_key, run_checks
from .profile import constant_user_count, parse_duration, stage_user_count, total_duration
from .thresholds import Thresholds, check_thresholds, enforce_thresholds

__all__ = [
    "Thresholds",
    "check_thresholds",
    "constant_user_count",
    "enforce_thresholds",
    "has_json_key",
    "parse_duration",
    "run_checks",
    "stage_user_count",
    "total_duration",
]
