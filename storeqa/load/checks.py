from typing import Callable, Dict


def run_checks(response, checks: Dict[str, Callable]) -> bool:
    """Evaluate named checks on a ``catch_response`` locust response.

    The response is marked failed with the names of the checks that did not
    hold; a check raising an error counts as failed.
    """
    failed = []
    for name, check in checks.items():
        try:
            ok = check(response)
        except Exception:
            ok = False
        if not ok:
            failed.append(name)

    if failed:
        response.failure(f"failed checks: {', '.join(failed)}")
        return False
    response.success()
    return True


def has_json_key(response, *keys: str) -> bool:
    body = response.json()
    return isinstance(body, dict) and any(key in body for key in keys)
