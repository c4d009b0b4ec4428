"""The map of Middle-earth: locations linked as a binary tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from terra_media.inventory import Item


@dataclass(eq=False)
class Location:
    """A place in the world, with up to two onward paths."""

    name: str
    description: str
    difficulty: int
    has_ring: bool = False
    has_enemy: bool = False
    item: Item | None = None
    left: Location | None = None
    right: Location | None = None

    @property
    def has_item(self) -> bool:
        return self.item is not None

    def walk(self) -> Iterator[Location]:
        """Yield this location and every one reachable from it, pre-order."""
        pending: list[Location] = [self]
        while pending:
            node = pending.pop()
            yield node
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)


def create_world() -> Location:
    """Build a fresh world and return its starting location."""
    vila = Location(
        "Vila dos Hobbits",
        "Um lugar pacífico onde sua jornada começa.",
        difficulty=1,
    )
    floresta = Location(
        "Floresta de Fangorn",
        "Uma floresta antiga e misteriosa. Cuidado com os Ents!",
        difficulty=4,
        has_enemy=True,
        item=Item("POCAO DE CURA", "Restaura 20 pontos de saúde", 20),
    )
    moria = Location(
        "Minas de Moria",
        "Um reino subterrâneo abandonado. Escuro e perigoso.",
        difficulty=7,
        has_enemy=True,
        item=Item("ESPADA ELFICA", "Aumenta força em 15 pontos", 15),
    )
    rohan = Location(
        "Rohan",
        "A terra dos cavaleiros. Pode encontrar aliados aqui.",
        difficulty=3,
    )
    gondor = Location(
        "Gondor",
        "O reino dos homens. Um lugar de refúgio.",
        difficulty=2,
        has_ring=True,
        item=Item(
            "ARMADURA DE MITHRIL", "Aumenta resistência em 25 pontos", 25
        ),
    )
    mordor = Location(
        "Mordor",
        "A terra do mal. O destino final de sua jornada.",
        difficulty=10,
        has_enemy=True,
    )

    vila.left = floresta
    vila.right = rohan
    floresta.left = moria
    moria.right = mordor
    rohan.left = gondor
    return vila


_MAP_ROWS = (
    ("Vila dos Hobbits",
     " >>> FLORESTA - [VILA] - ROHAN \n",
     " FLORESTA - VILA - ROHAN \n"),
    ("Floresta de Fangorn",
     " >>>  MORIA - [FLORESTA] - X \n",
     " MORIA - FLORESTA - X \n"),
    ("Minas de Moria",
     " >>>  X - [MORIA] - MORDOR \n",
     " X - MORIA - MORDOR \n"),
    ("Rohan",
     " >>>  GONDOR - [ROHAN] - X \n",
     " GONDOR - ROHAN - X \n"),
    ("Gondor",
     " >>>  X - [GONDOR] - X \n",
     " X - GONDOR - X \n"),
    ("Mordor",
     " >>>  X - [MORDOR] - X \n",
     " X - MORDOR - X \n"),
)


def render_map(current_name: str) -> str:
    """Return the map text with the current location highlighted."""
    rows = (
        highlighted if name == current_name else plain
        for name, highlighted, plain in _MAP_ROWS
    )
    return "\n======= MAPA =======\n" + "".join(rows)