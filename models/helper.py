import random
import string
from datetime import datetime, timezone
from typing import Callable, Optional


def id_generator(prefix: str, length: int) -> Callable[[], str]:
    """Return a factory producing ids like `task_Ab3dE9xYz1`."""
    alphabet = string.ascii_letters + string.digits

    def generate() -> str:
        return f"{prefix}_{''.join(random.choices(alphabet, k=length))}"

    return generate


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
