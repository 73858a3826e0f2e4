def verify(condition, message: str):
    """Raise AssertionError with ``message`` when ``condition`` is falsy.

    Unlike the ``assert`` statement this check survives ``python -O``.
    """
    if not condition:
        raise AssertionError(message)
