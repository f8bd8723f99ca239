"""Read-only registry of rooms and items, validated when it is built."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from castle_logic.world import ITEMS, ROOMS, START_ROOM

logger = logging.getLogger(__name__)


class WorldDataError(ValueError):
    """Raised when world data has dangling references or inconsistent locks."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid world data:\n  " + "\n  ".join(problems))


@dataclass(frozen=True)
class Secret:
    description: str
    gives: str | None = None
    opens_room: str | None = None
    one_time: bool = True


@dataclass(frozen=True)
class Item:
    name: str
    description: str
    takeable: bool
    is_light: bool = False
    is_goal: bool = False


@dataclass(frozen=True)
class Room:
    id: str
    name: str
    description: str
    exits: Mapping[str, str] = field(default_factory=dict)
    items: tuple[str, ...] = ()
    dark: bool = False
    description_lit: str | None = None
    locked: bool = False
    locked_message: str | None = None
    key_required: str | None = None
    secrets: Mapping[str, Secret] = field(default_factory=dict)
    has_dragon: bool = False
    dragon_state: str | None = None
    is_victory: bool = False


def _room_from_dict(room_id: str, data: dict) -> Room:
    secrets = {
        keyword: Secret(
            description=s["description"],
            gives=s.get("gives"),
            opens_room=s.get("opens_room"),
            one_time=s.get("one_time", True),
        )
        for keyword, s in (data.get("secrets") or {}).items()
    }
    return Room(
        id=room_id,
        name=data["name"],
        description=data["description"],
        exits=MappingProxyType(dict(data.get("exits") or {})),
        items=tuple(data.get("items") or ()),
        dark=bool(data.get("dark", False)),
        description_lit=data.get("description_lit"),
        locked=bool(data.get("locked", False)),
        locked_message=data.get("locked_message"),
        key_required=data.get("key_required"),
        secrets=MappingProxyType(secrets),
        has_dragon=bool(data.get("has_dragon", False)),
        dragon_state=data.get("dragon_state"),
        is_victory=bool(data.get("is_victory", False)),
    )


def _item_from_dict(name: str, data: dict) -> Item:
    return Item(
        name=name,
        description=data["description"],
        takeable=bool(data.get("takeable", False)),
        is_light=bool(data.get("is_light", False)),
        is_goal=bool(data.get("is_goal", False)),
    )


def _shape_problems(rooms, items) -> list[str]:
    """Structural problems that would stop raw room/item dicts from being built at all."""
    problems = []
    if not isinstance(rooms, dict):
        problems.append("rooms: expected a mapping of room id to room")
        rooms = {}
    if not isinstance(items, dict):
        problems.append("items: expected a mapping of item name to item")
        items = {}

    for room_id, data in rooms.items():
        if not isinstance(data, dict):
            problems.append(f"{room_id}: expected a mapping")
            continue
        for key in ("name", "description"):
            if key not in data:
                problems.append(f"{room_id}: missing '{key}'")
        for key in ("exits", "secrets"):
            if not isinstance(data.get(key) or {}, dict):
                problems.append(f"{room_id}: '{key}' must be a mapping")
        if not isinstance(data.get("items") or [], list):
            problems.append(f"{room_id}: 'items' must be a list")
        secrets = data.get("secrets") or {}
        if isinstance(secrets, dict):
            for keyword, secret in secrets.items():
                if not isinstance(secret, dict) or "description" not in secret:
                    problems.append(f"{room_id}: secret '{keyword}' needs a description")

    for name, data in items.items():
        if not isinstance(data, dict):
            problems.append(f"item '{name}': expected a mapping")
        elif "description" not in data:
            problems.append(f"item '{name}': missing 'description'")
    return problems


class World:
    """All rooms and items of one game, addressable by key.

    A World never changes after construction, so a single instance can back
    any number of sessions.
    """

    def __init__(self, rooms: dict[str, Room], items: dict[str, Item], start_room: str = START_ROOM):
        self._rooms = MappingProxyType(dict(rooms))
        self._items = MappingProxyType(dict(items))
        self.start_room = start_room
        self.validate()

    @classmethod
    def from_dicts(cls, rooms: dict, items: dict, start_room: str = START_ROOM) -> "World":
        problems = _shape_problems(rooms, items)
        if problems:
            raise WorldDataError(problems)
        return cls(
            {rid: _room_from_dict(rid, r) for rid, r in rooms.items()},
            {name: _item_from_dict(name, i) for name, i in items.items()},
            start_room,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "World":
        """Load a world file with top-level ``rooms``, ``items`` and optional ``start_room``."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise WorldDataError([f"{path}: expected a mapping at the top level"])
        world = cls.from_dicts(
            data.get("rooms") or {},
            data.get("items") or {},
            data.get("start_room", START_ROOM),
        )
        logger.info("Loaded world from %s: %d rooms, %d items", path, len(world._rooms), len(world._items))
        return world

    def get_room(self, room_id: str) -> Room | None:
        return self._rooms.get(room_id)

    def get_item(self, name: str) -> Item | None:
        return self._items.get(name)

    def all_room_ids(self) -> list[str]:
        return list(self._rooms)

    def all_item_names(self) -> list[str]:
        return list(self._items)

    def total_secrets(self) -> int:
        return sum(len(room.secrets) for room in self._rooms.values())

    def hidden_rooms(self) -> dict[str, tuple[str, str]]:
        """Map each room that a secret opens to the (room id, keyword) of that secret."""
        hidden = {}
        for room in self._rooms.values():
            for keyword, secret in room.secrets.items():
                if secret.opens_room:
                    hidden[secret.opens_room] = (room.id, keyword)
        return hidden

    def goal_items(self) -> list[str]:
        return [name for name, item in self._items.items() if item.is_goal]

    def light_sources(self) -> list[str]:
        return [name for name, item in self._items.items() if item.is_light]

    def validate(self) -> None:
        problems = []

        if self.start_room not in self._rooms:
            problems.append(f"start room '{self.start_room}' does not exist")

        for room in self._rooms.values():
            for direction, target in room.exits.items():
                if target not in self._rooms:
                    problems.append(f"{room.id}: exit {direction} points to unknown room '{target}'")

            for item in room.items:
                if item not in self._items:
                    problems.append(f"{room.id}: contains unknown item '{item}'")

            if room.locked != bool(room.key_required) or room.locked != bool(room.locked_message):
                problems.append(f"{room.id}: locked rooms need both key_required and locked_message")
            if room.key_required and room.key_required not in self._items:
                problems.append(f"{room.id}: key '{room.key_required}' is not an item")

            for keyword, secret in room.secrets.items():
                if secret.gives and secret.gives not in self._items:
                    problems.append(f"{room.id}: secret '{keyword}' gives unknown item '{secret.gives}'")
                if secret.opens_room and secret.opens_room not in self._rooms:
                    problems.append(f"{room.id}: secret '{keyword}' opens unknown room '{secret.opens_room}'")

        if problems:
            raise WorldDataError(problems)


@lru_cache(maxsize=1)
def default_world() -> World:
    """The built-in MysticCastle world."""
    return World.from_dicts(ROOMS, ITEMS, START_ROOM)
