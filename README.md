# terra_media

A short terminal role-playing game. Frodo starts in the Hobbit village,
has to find the ring in Gondor, and then carry it to Mordor to destroy it.
Along the way he explores locations, picks up items, and fights orcs.
The game's text is in Portuguese.

## Installing

```
pip install .
```

## Playing

```
terra-media
```

The command takes no options. Each turn shows the current mission, the
number of steps taken, and a map with the current location highlighted.
The main menu offers:

- `1` explore the current location (pick up an item, fight an enemy, find the ring)
- `2` move left
- `3` move right
- `4` go back to the previous location
- `5` show Frodo's status and inventory
- `6` open the inventory (list items or use one by name)
- `0` quit

Once Frodo is in Mordor holding the ring, pressing `1` destroys it and wins
the game. If his health drops to zero or below, the journey ends. The game
also ends when input runs out.

### The map

```
            Vila dos Hobbits
           /                \
  Floresta de Fangorn      Rohan
        /                   /
  Minas de Moria         Gondor
        \
       Mordor
```

Fangorn, Moria and Mordor each hold an orc whose health and strength grow
with the location's difficulty. Fangorn holds a healing potion, Moria an
elven sword, and Gondor a mithril armour along with the ring.

### Battles

Each fight offers four actions: attack, defend (which uses up 10 points of
resistance), use an item by name, or flee. In battle, an item whose name
contains `POCAO` restores health, `ESPADA` raises strength and `ARMADURA`
raises resistance. Items stay in the inventory after use.

The inventory menu (`6`) matches the lower-case words `pocao`, `espada` and
`armadura` instead, so the upper-case items found in the world report being
used there but change no stats.

## Using it from Python

`terra_media.game.Game` reads lines and writes text through two callables,
which defaults to `input` and `sys.stdout.write`. `Game.run()` plays until
the game ends and returns `"won"`, `"defeated"` or `"quit"`:

```python
from terra_media.game import Game

moves = iter(["3", "3", "0"])
output = []
outcome = Game(read_line=lambda: next(moves), write=output.append).run()
print("".join(output))
print(outcome)  # "quit"
```

A reader signals the end of input by raising `EOFError`, as `input` does.
Single actions are also available on a `Game`: `explore()`, `battle()`,
`move_left()`, `move_right()`, `go_back()` and `inventory_menu()`; its
`frodo` attribute is a `Frodo` with `status_text()`, `has_won()` and
`apply_item(item, keywords)`.

Other pieces can be used on their own:

- `terra_media.world.create_world()` builds the map and returns its starting
  `Location`; `Location.walk()` yields every location reachable from it, and
  `render_map(current_name)` returns the map text.
- `terra_media.inventory.Inventory` keeps `Item`s keyed by name, iterates
  them in name order, and `listing()` returns one line per item.
- `terra_media.structures` provides `BattleQueue` (first in, first out, of
  `Enemy`) and `PathStack` (last in, first out); popping an empty one raises
  `IndexError`.

## What it does not do

There is no saving or loading: a game lives only as long as the process.

## Running the tests

```
pip install .[test]
pytest
```