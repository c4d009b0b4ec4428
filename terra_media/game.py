"""Frodo's journey: the hero, the exploration and battle rules, and the menu loop."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Sequence

from terra_media.inventory import Inventory, Item
from terra_media.structures import BattleQueue, Enemy, PathStack
from terra_media.world import Location, create_world, render_map

_BATTLE_KEYWORDS = ("POCAO", "ESPADA", "ARMADURA")
_MENU_KEYWORDS = ("pocao", "espada", "armadura")
_STATS = ("health", "strength", "resistance")


@dataclass
class Frodo:
    """The hero: his stats, position, items and whether he carries the Ring."""

    location: Location
    health: int = 100
    resistance: int = 80
    strength: int = 50
    inventory: Inventory = field(default_factory=Inventory)
    has_ring: bool = False

    def status_text(self) -> str:
        """Return the status screen, inventory included."""
        text = (
            "\n=== STATUS DE FRODO ===\n"
            f"VIDA: {self.health}\n"
            f"FORCA: {self.strength}\n"
            f"RESISTENCIA: {self.resistance}\n"
            f"LOCAL: {self.location.name}\n"
            "\n=== INVENTÁRIO ===\n"
        )
        if not self.inventory:
            return text + "nenhum item, pobre!\n"
        return text + self.inventory.listing()

    def has_won(self) -> bool:
        """True when Frodo stands in Mordor carrying the Ring."""
        return self.location.name == "Mordor" and self.has_ring

    def apply_item(self, item: Item, keywords: Sequence[str]) -> str | None:
        """Apply an item's effect.

        ``keywords`` holds the substrings that mark a health, strength and
        resistance item, in that order. Returns the stat raised, or None.
        """
        for keyword, stat in zip(keywords, _STATS):
            if keyword in item.name:
                setattr(self, stat, getattr(self, stat) + item.value)
                return stat
        return None


class Game:
    """An interactive session driven by a line reader and a text writer."""

    def __init__(
        self,
        read_line: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
    ) -> None:
        self._read_line = read_line if read_line is not None else input
        self._write = write if write is not None else sys.stdout.write
        self.world = create_world()
        self.frodo = Frodo(location=self.world)
        self.battles = BattleQueue()
        self.path = PathStack()
        self.steps = 0
        self.outcome: str | None = None

    # -- input helpers -------------------------------------------------

    def _next_nonblank(self) -> str:
        while True:
            line = self._read_line()
            if line.strip():
                return line

    def _read_choice(self) -> int | None:
        token = self._next_nonblank().split()[0]
        try:
            return int(token)
        except ValueError:
            return None

    def _read_text(self) -> str:
        return self._next_nonblank().lstrip().rstrip("\r\n")

    # -- exploration and battle ---------------------------------------

    def explore(self) -> None:
        """Explore the current location: item, enemy and the Ring."""
        frodo = self.frodo
        here = frodo.location
        self._write(f"\n=== EXPLORANDO {here.name} ===\n{here.description}\n")

        if here.item is not None:
            found = here.item
            self._write(f"\n !!! VC ENCONTROU: {found.name} ({found.description})\n")
            self._write("deseja coletar? ([1]-Sim / [2]-Não): ")
            if self._read_choice() == 1:
                frodo.inventory.insert(found.name, found.description, found.value)
                self._write(f"{found.name} foi adicionado ao seu inventario!\n")
                here.item = None

        if here.has_enemy:
            self._write("\n\n !!!!!!!! ALERTA: um inimigo aparece!\n")
            self.battles.push(
                Enemy("ORC", here.difficulty * 15, here.difficulty * 5)
            )
            self.battle()
        else:
            self._write("\nO local esta seguro. Nenhum inimigo encontrado.\n")

        if not frodo.has_ring and here.has_ring:
            self._write(
                "\n {!!!!!} \nPARABENS!! Vc encontrou o ANEL DOS SENHORES DOS ANEIS!\n"
            )
            self._write(
                "agr vc deve leva-lo até o MONTE DA PERDICAO para DESTRUIR ELE\n"
            )
            frodo.has_ring = True

    def battle(self) -> None:
        """Fight every queued enemy until the queue empties, Frodo falls or flees."""
        frodo = self.frodo
        while frodo.health > 0 and self.battles:
            enemy = self.battles.pop()
            self._write(f"\n >> BATALHA CONTRA {enemy.name} << \n")
            self._write(f"VIDA DO INIMIGO: {enemy.health} | FORCA: {enemy.strength}\n")

            while True:
                self._write(
                    "\n[1] Atacar\n[2] Defender\n[3] Usar item\n"
                    "[4] Tentar fugir\nEscolha: "
                )
                choice = self._read_choice()
                if choice == 1:
                    self._write(f"\n{{!}} FRODO ataca o {enemy.name}!\n")
                    enemy.health -= frodo.strength
                    if enemy.health > 0:
                        self._write(f"{{!}} {enemy.name} contra-ataca!\n")
                        frodo.health -= enemy.strength // 2
                elif choice == 2:
                    self._write("\n{!} FRODO se defende!\n")
                    frodo.resistance -= 10
                    if frodo.resistance > 0:
                        self._write("{!} vc reduz o dano recebido.\n")
                        frodo.health -= enemy.strength // 4
                    else:
                        self._write("{!} sua RESISTENCIA esta baixa!\n")
                        frodo.health -= enemy.strength // 2
                elif choice == 3:
                    self._use_item_in_battle()
                elif choice == 4:
                    self._write("{!} frodo fugiu!\n")
                    return
                else:
                    self._write("\nERRO FATAL: opcao invalida!\n")

                self._write(frodo.status_text())
                if enemy.health > 0:
                    self._write(f"\n{enemy.name}: vida {enemy.health}\n")
                if enemy.health <= 0 or frodo.health <= 0:
                    break

            if enemy.health <= 0:
                self._write(f"\n\n>>>>>> {enemy.name} foi derrotado!\n\n")

    def _use_item_in_battle(self) -> None:
        frodo = self.frodo
        if not frodo.inventory:
            self._write("\n{!} vc N tem itens, POBRE!\n")
            return
        self._write("\n{!} itens disponiveis:\n")
        self._write(frodo.inventory.listing())
        self._write("{!} DIGITE o nome do item que deseja usar: ")
        item = frodo.inventory.find(self._read_text())
        if item is None:
            self._write("\n{!} item n encontrado!\n")
            return
        self._write(f"\n{{!}} usando {item.name}...\n")
        stat = frodo.apply_item(item, _BATTLE_KEYWORDS)
        messages = {
            "health": "{!} VIDA aumentada em %d pontos!\n",
            "strength": "{!} FORCA aumentada em %d pontos!\n",
            "resistance": "{!} RESISTENCIA aumentada em %d pontos!\n",
        }
        if stat is not None:
            self._write(messages[stat] % item.value)
        self._write("{!} item consumido.\n")

    # -- movement ------------------------------------------------------

    def _move(self, target: Location | None, blocked: str) -> bool:
        if target is None:
            self._write(blocked)
            return False
        self.path.push(self.frodo.location)
        self.frodo.location = target
        self._write(f"\n {{ ! }} VC SE MOVEU PARA: {target.name}\n")
        return True

    def move_left(self) -> bool:
        """Take the left path; False when there is none."""
        return self._move(
            self.frodo.location.left, "\n { ! } N TEM CAMINHO PRA ESQUERDA! \n"
        )

    def move_right(self) -> bool:
        """Take the right path; False when there is none."""
        return self._move(
            self.frodo.location.right, "\n { ! } N TEM CAMINHO PRA DIREITA! \n"
        )

    def go_back(self) -> bool:
        """Return to the previous location; False when there is none."""
        if not self.path:
            self._write("\n { ! } N HÁ LUGARES PRA VOLTAR!\n")
            return False
        self.frodo.location = self.path.pop()
        self._write(f"\n {{ ! }} VC VOLTOU PARA: {self.frodo.location.name}\n")
        return True

    # -- menus ---------------------------------------------------------

    def inventory_menu(self) -> None:
        """Run the inventory sub-menu until the player goes back."""
        frodo = self.frodo
        while True:
            self._write(
                "\n==== INVENTARIO:\n[1] listar todos os itens\n"
                "[2] usar um item\n[3] voltar\n\n INSIRA SUA ESCOLHA: "
            )
            choice = self._read_choice()
            if choice == 1:
                self._write("\n\n\n=== SEUS ITENS ===\n")
                if not frodo.inventory:
                    self._write("vc nn possui itens ainda!\n")
                else:
                    self._write(frodo.inventory.listing())
            elif choice == 2:
                self._write("\n\n")
                if not frodo.inventory:
                    self._write("\nseu inventário esta vazio!\n")
                else:
                    self._use_item_from_menu()
            elif choice == 3:
                self._write("\n\n\nretornando ao menu principal...\n")
                return
            else:
                self._write("\nERRO FATAL! tente novamente.\n")

    def _use_item_from_menu(self) -> None:
        frodo = self.frodo
        self._write("\n=== USAR ITEM ===\n")
        self._write(frodo.inventory.listing())
        self._write("digite o nome do item que deseja usar: ")
        item = frodo.inventory.find(self._read_text())
        if item is None:
            self._write("\nitem não encontrado no inventário!\n")
            return
        self._write(f"\nUsando {item.name}...\n")
        stat = frodo.apply_item(item, _MENU_KEYWORDS)
        messages = {
            "health": "+%d pontos de saude!\n",
            "strength": "+%d pontos de forca!\n",
            "resistance": "+%d pontos de resistencia!\n",
        }
        if stat is not None:
            self._write(messages[stat] % item.value)
        self._write("item usado com sucesso!\n")

    # -- main loop -----------------------------------------------------

    def _intro(self) -> None:
        self._write("\n========================================\n")
        self._write("- SUPER SENHORES DOS ANÉIS -\n")
        self._write("========================================\n")
        self._write(
            "\nFRODO, meu bom rapaz, vc deve levar o ANEL (que esta em gondor) "
            "ate o MONTE DA PERDICAO (que fica em mordor) para destrui-lo!\n"
        )
        self._write(
            f"sua jornada começa na {self.frodo.location.name}. BOA SORTE!\n"
        )

    def _header(self) -> None:
        rule = "______________________________________________________"
        self._write(rule + "\n")
        if self.frodo.has_ring:
            self._write(
                "{MISSAO ATUAL}: VC TEM O ANEL, va ate o MONTE DA PERDICAO (mordor)!"
            )
        else:
            self._write("{MISSAO ATUAL}: vc NN possui o anel ainda, encontre-o!")
        self._write(f"\n{{ETAPAS PERCORRIDAS}}: {self.steps}\n{rule}\n")
        self._write(render_map(self.frodo.location.name))

    def _turn(self) -> bool:
        """Play one turn; False when the game is over."""
        frodo = self.frodo
        self._header()
        self._write("\n\n")
        if frodo.has_won():
            self._write(
                "\n { !!! } CHEGOU A HORA. APERTE 1 PARA QUEBRAR O ANEL. { !!! } "
            )
        else:
            self._write(
                "\n==== MENU PRINCIPAL:\n[1] EXPLORAR local atual\n"
                "[2] MOVER pra ESQUERDA ( <- ) \n[3] MOVER pra DIREITA ( -> ) \n"
                "[4] VOLTAR pro local anterior\n[5] STATUS de Frodo \n"
                "[6] Inventario\n[0] finalizar programa\n\n INSIRA SUA ESCOLHA: "
            )
        choice = self._read_choice()
        self.steps += 1
        self._write("\n\n")

        running = True
        if choice == 1:
            if frodo.has_won():
                self._write("\n {!!} FRODO ENTAO DESTROI O ANEL E VENCE.")
                self._write("\n parabens!")
                self.outcome = "won"
                running = False
            else:
                self.explore()
        elif choice == 2:
            self.move_left()
        elif choice == 3:
            self.move_right()
        elif choice == 4:
            self.go_back()
        elif choice == 5:
            self._write(frodo.status_text())
        elif choice == 6:
            self.inventory_menu()
        elif choice == 0:
            self._write("\n { ! } ENCERRANDO jogo...\n")
            self.outcome = "quit"
            running = False
        else:
            self._write(
                "\n { ! } ERRO FATAL: opcao nao encontrada, tente novamente.\n"
            )

        if frodo.health <= 0:
            self._write("\n {!!} FRODO FOI DERROTADO! A jornada termina aqui...\n")
            self.outcome = "defeated"
            running = False
        return running

    def run(self) -> str:
        """Play until victory, defeat, quitting or end of input; return the outcome."""
        self._intro()
        try:
            while self._turn():
                pass
        except EOFError:
            if self.outcome is None:
                self.outcome = "quit"
        self.battles.clear()
        self.path.clear()
        self.frodo.inventory.clear()
        self._write("\n\n\nOBRIGADO por JOGAR!!\n")
        return self.outcome or "quit"


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive game on the terminal."""
    Game().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())