from __future__ import annotations

from pathlib import Path

import pytest

from castle_logic.registry import World, WorldDataError
from castle_logic.world import ITEMS, ROOMS


def test_every_reference_resolves(world: World) -> None:
    for room_id in world.all_room_ids():
        room = world.get_room(room_id)
        for direction, target in room.exits.items():
            assert world.get_room(target) is not None, f"{room_id} {direction} -> {target}"
        if room.key_required:
            assert world.get_item(room.key_required) is not None
        for secret in room.secrets.values():
            if secret.gives:
                assert world.get_item(secret.gives) is not None


def test_locked_rooms_have_key_and_message(world: World) -> None:
    for room_id in world.all_room_ids():
        room = world.get_room(room_id)
        assert room.locked == bool(room.key_required) == bool(room.locked_message)


def test_lookups_return_none_when_missing(world: World) -> None:
    assert world.get_room("fake-room") is None
    assert world.get_item("fake item") is None
    assert world.get_room("entrance").name == "Castle Entrance"


def test_listings(world: World) -> None:
    assert "entrance" in world.all_room_ids()
    assert "courtyard" in world.all_room_ids()
    assert "brass lamp" in world.all_item_names()
    assert "crown of whispers" in world.all_item_names()
    assert world.total_secrets() == 2
    assert world.hidden_rooms() == {"vault": ("bedroom", "wardrobe")}


def test_room_data_is_read_only(world: World) -> None:
    room = world.get_room("courtyard")
    with pytest.raises(TypeError):
        room.exits["down"] = "cellar"
    assert isinstance(room.items, tuple)


def test_dangling_exit_is_rejected() -> None:
    rooms = {"a": {"name": "A", "description": "a", "exits": {"north": "nowhere"}}}
    with pytest.raises(WorldDataError) as err:
        World.from_dicts(rooms, {}, start_room="a")
    assert "nowhere" in str(err.value)


def test_all_problems_are_reported() -> None:
    rooms = {
        "a": {
            "name": "A",
            "description": "a",
            "locked": True,
            "key_required": "ghost key",
            "secrets": {"crack": {"description": "x", "gives": "ghost coin"}},
        },
        "b": {"name": "B", "description": "b", "locked_message": "Nope."},
    }
    with pytest.raises(WorldDataError) as err:
        World.from_dicts(rooms, {}, start_room="missing")
    problems = err.value.problems
    assert any("start room" in p for p in problems)
    assert any("ghost key" in p for p in problems)
    assert any("ghost coin" in p for p in problems)
    assert any(p.startswith("a: locked rooms") for p in problems)
    assert any(p.startswith("b: locked rooms") for p in problems)


def test_from_yaml(tmp_path: Path) -> None:
    world_file = tmp_path / "hut.yaml"
    world_file.write_text(
        """
start_room: hut
rooms:
  hut:
    name: Hut
    description: A small hut.
    exits: {out: yard}
    items: [stick]
  yard:
    name: Yard
    description: A muddy yard.
    exits: {north: hut}
items:
  stick:
    description: A stick.
    takeable: true
""",
        encoding="utf-8",
    )
    world = World.from_yaml(world_file)
    assert world.start_room == "hut"
    assert world.get_room("hut").items == ("stick",)
    assert world.get_item("stick").takeable


def test_from_yaml_rejects_non_mapping(tmp_path: Path) -> None:
    world_file = tmp_path / "bad.yaml"
    world_file.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(WorldDataError):
        World.from_yaml(world_file)


def test_builtin_definitions_are_untouched_by_loading() -> None:
    assert ROOMS["courtyard"]["items"] == ["rusty key"]
    assert ITEMS["crown of whispers"]["is_goal"] is True


def test_malformed_entries_are_reported_not_crashed() -> None:
    rooms = {
        "a": {"description": "no name"},
        "b": "just a string",
        "c": {"name": "C", "description": "c", "exits": ["north"], "secrets": {"crack": "oops"}},
    }
    items = {"stick": {"takeable": True}, "stone": None}
    with pytest.raises(WorldDataError) as err:
        World.from_dicts(rooms, items, start_room="a")
    problems = err.value.problems
    assert "a: missing 'name'" in problems
    assert "b: expected a mapping" in problems
    assert "c: 'exits' must be a mapping" in problems
    assert "c: secret 'crack' needs a description" in problems
    assert "item 'stick': missing 'description'" in problems
    assert "item 'stone': expected a mapping" in problems


def test_from_yaml_missing_field(tmp_path: Path) -> None:
    world_file = tmp_path / "nameless.yaml"
    world_file.write_text("start_room: a\nrooms:\n  a: {description: a}\n", encoding="utf-8")
    with pytest.raises(WorldDataError, match="missing 'name'"):
        World.from_yaml(world_file)
