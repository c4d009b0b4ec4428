import pytest

from terra_media.inventory import Inventory, Item


@pytest.fixture
def full_inventory():
    inv = Inventory()
    inv.insert("POCAO DE CURA", "Restaura 20 pontos de saúde", 20)
    inv.insert("ARMADURA DE MITHRIL", "Aumenta resistência em 25 pontos", 25)
    inv.insert("ESPADA ELFICA", "Aumenta força em 15 pontos", 15)
    return inv


def test_empty_inventory_is_falsy():
    inv = Inventory()
    assert not inv
    assert len(inv) == 0
    assert inv.listing() == ""


def test_insert_then_find_returns_item():
    inv = Inventory()
    inv.insert("ESPADA ELFICA", "Aumenta força em 15 pontos", 15)
    assert inv.find("ESPADA ELFICA") == Item(
        "ESPADA ELFICA", "Aumenta força em 15 pontos", 15
    )


def test_find_missing_returns_none(full_inventory):
    assert full_inventory.find("ANEL") is None


def test_find_is_case_sensitive(full_inventory):
    assert full_inventory.find("pocao de cura") is None


def test_duplicate_insert_keeps_first(full_inventory):
    kept = full_inventory.insert("POCAO DE CURA", "outra", 1)
    assert kept.description == "Restaura 20 pontos de saúde"
    assert len(full_inventory) == 3


def test_iteration_is_alphabetical(full_inventory):
    names = [item.name for item in full_inventory]
    assert names == sorted(names)
    assert names[0] == "ARMADURA DE MITHRIL"


def test_listing_format(full_inventory):
    lines = full_inventory.listing().splitlines()
    assert lines[0] == (
        "-> ARMADURA DE MITHRIL: Aumenta resistência em 25 pontos (Valor: 25)"
    )
    assert len(lines) == len(full_inventory)


def test_clear_empties(full_inventory):
    full_inventory.clear()
    assert not full_inventory
    assert full_inventory.find("ESPADA ELFICA") is None