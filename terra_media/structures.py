"""The battle queue and the path stack used during the journey."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


@dataclass
class Enemy:
    """An opponent waiting to fight."""

    name: str
    health: int
    strength: int


class BattleQueue:
    """First-in, first-out queue of enemies."""

    def __init__(self) -> None:
        self._enemies: deque[Enemy] = deque()

    def push(self, enemy: Enemy) -> None:
        self._enemies.append(enemy)

    def pop(self) -> Enemy:
        """Remove and return the oldest enemy; IndexError when empty."""
        if not self._enemies:
            raise IndexError("battle queue is empty")
        return self._enemies.popleft()

    def __len__(self) -> int:
        return len(self._enemies)

    def __bool__(self) -> bool:
        return bool(self._enemies)

    def clear(self) -> None:
        self._enemies.clear()


class PathStack:
    """Last-in, first-out stack of visited locations."""

    def __init__(self) -> None:
        self._locations: list[Any] = []

    def push(self, location: Any) -> None:
        self._locations.append(location)

    def pop(self) -> Any:
        """Remove and return the most recent location; IndexError when empty."""
        if not self._locations:
            raise IndexError("path stack is empty")
        return self._locations.pop()

    def __len__(self) -> int:
        return len(self._locations)

    def __bool__(self) -> bool:
        return bool(self._locations)

    def clear(self) -> None:
        self._locations.clear()