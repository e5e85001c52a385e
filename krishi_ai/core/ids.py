from itertools import count
from typing import Protocol
from uuid import uuid4


class IdGenerator(Protocol):
    def __call__(self) -> str: ...


def uuid_id_generator() -> str:
    return uuid4().hex


class CounterIdGenerator:
    """Monotonic ids such as ``tip-1``, ``tip-2``; used where output must be reproducible."""

    def __init__(self, prefix: str, start: int = 1) -> None:
        self.prefix = prefix
        self._counter = count(start)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"
