from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Protocol


class Key(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    UP = 3


class InputSource(Protocol):
    def is_held(self, key: Key) -> bool: ...


class HeldKeys:
    """InputSource backed by a fixed set of keys."""

    def __init__(self, keys: Iterable[Key] = ()) -> None:
        self.keys = frozenset(keys)

    def is_held(self, key: Key) -> bool:
        return key in self.keys


NO_KEYS = HeldKeys()
