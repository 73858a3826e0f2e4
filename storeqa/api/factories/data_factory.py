import threading
import time
from datetime import datetime, timezone
from typing import List

from storeqa.api.models import Comment, Post, User

_counter = 0
_counter_lock = threading.Lock()


def generate_id() -> int:
    """Unique id for this process: wall-clock milliseconds followed by a counter.

    The counter never repeats, so two calls in the same millisecond still differ.
    """
    global _counter
    with _counter_lock:
        _counter += 1
        count = _counter
    return int(f"{int(time.time() * 1000)}{count}")


class DataFactory:
    """Valid-by-default API payloads with unique values; keyword overrides win."""

    @staticmethod
    def create_post(**overrides) -> Post:
        uid = generate_id()
        values = {
            "user_id": 1,
            "title": f"Test Post Title {uid}",
            "body": (
                f"This is a test post body generated at {datetime.now(timezone.utc).isoformat()}. "
                "It contains sample content for testing purposes."
            ),
        }
        values.update(overrides)
        return Post(**values)

    @staticmethod
    def create_posts(count: int, **overrides) -> List[Post]:
        """``count`` posts; without a user_id override they are spread over users 1..count."""
        posts = []
        for i in range(count):
            values = dict(overrides)
            values.setdefault("user_id", i + 1)
            posts.append(DataFactory.create_post(**values))
        return posts

    @staticmethod
    def create_user(**overrides) -> User:
        uid = generate_id()
        values = {
            "name": f"Test User {uid}",
            "username": f"testuser_{uid}",
            "email": f"test_{uid}@example.com",
            "phone": f"555-0{uid % 1000:03d}-{uid % 10000:04d}",
            "website": f"test{uid}.com",
        }
        values.update(overrides)
        return User(**values)

    @staticmethod
    def create_comment(post_id: int, **overrides) -> Comment:
        uid = generate_id()
        values = {
            "post_id": post_id,
            "name": f"Commenter {uid}",
            "email": f"commenter_{uid}@test.com",
            "body": f"This is a test comment {uid}. Great post!",
        }
        values.update(overrides)
        return Comment(**values)

    @staticmethod
    def create_invalid_post(kind: str) -> Post:
        if kind == "empty":
            return Post(user_id=1, title="", body="")
        if kind == "long_title":
            return Post(user_id=1, title="A" * 300, body="Valid body")
        if kind == "missing_body":
            return Post(user_id=1, title="Title without body", body="")
        raise ValueError(f"Unknown invalid post kind: {kind}")

    @staticmethod
    def unique_username(prefix: str = "user") -> str:
        return f"{prefix}_{generate_id()}"
