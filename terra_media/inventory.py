"""Frodo's inventory: a collection of items ordered by name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Item:
    """An item that can be carried and used."""

    name: str
    description: str
    value: int


def _sort_key(item: Item) -> bytes:
    # Byte-wise ordering, the same order a plain C string comparison gives.
    return item.name.encode("utf-8")


class Inventory:
    """Items keyed by name; a name is stored at most once."""

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}

    def insert(self, name: str, description: str, value: int) -> Item:
        """Add an item and return it; an existing item of that name is kept."""
        existing = self._items.get(name)
        if existing is not None:
            return existing
        item = Item(name, description, value)
        self._items[name] = item
        return item

    def find(self, name: str) -> Item | None:
        """Return the item with exactly this name, or None."""
        return self._items.get(name)

    def __iter__(self) -> Iterator[Item]:
        return iter(sorted(self._items.values(), key=_sort_key))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def listing(self) -> str:
        """Return one line per item, in alphabetical order."""
        return "".join(
            f"-> {item.name}: {item.description} (Valor: {item.value})\n"
            for item in self
        )

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()