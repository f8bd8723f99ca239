"""Per-session mutable game state."""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass, field
from typing import NamedTuple

from castle_logic.world import START_ROOM


class SecretKey(NamedTuple):
    room_id: str
    keyword: str

    def __str__(self) -> str:
        return f"{self.room_id}_{self.keyword}"


@dataclass
class GameState:
    current_room: str = START_ROOM
    inventory: list[str] = field(default_factory=list)
    moves: int = 0
    room_states: dict[str, list[str]] = field(default_factory=dict)
    secrets_found: dict[SecretKey, bool] = field(default_factory=dict)
    opened_rooms: set[str] = field(default_factory=set)
    lamp_lit: bool = False
    game_won: bool = False
    dragon_dialogue: int = 0
    dragon_friendly: bool = False
    dragon_gift_given: bool = False
    start_time: float = field(default_factory=time.time)

    @property
    def vault_open(self) -> bool:
        return "vault" in self.opened_rooms

    def has(self, item: str) -> bool:
        return item in self.inventory

    def add_item(self, item: str) -> None:
        if item not in self.inventory:
            self.inventory.append(item)

    def remove_item(self, item: str) -> None:
        if item in self.inventory:
            self.inventory.remove(item)

    def snapshot(self) -> "GameState":
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return {
            "current_room": self.current_room,
            "inventory": list(self.inventory),
            "moves": self.moves,
            "room_states": {rid: list(items) for rid, items in self.room_states.items()},
            "secrets_found": sorted(str(key) for key in self.secrets_found),
            "lamp_lit": self.lamp_lit,
            "game_won": self.game_won,
            "vault_open": self.vault_open,
            "dragon_dialogue": self.dragon_dialogue,
            "dragon_friendly": self.dragon_friendly,
        }


def new_session(start_room: str = START_ROOM) -> GameState:
    return GameState(current_room=start_room)
