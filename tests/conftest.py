from __future__ import annotations

import pytest

from castle_logic.engine import GameEngine
from castle_logic.registry import World, default_world
from castle_logic.state import GameState, new_session


@pytest.fixture()
def world() -> World:
    return default_world()


@pytest.fixture()
def state() -> GameState:
    return new_session()


@pytest.fixture()
def engine() -> GameEngine:
    return GameEngine()


def play(engine: GameEngine, *commands: str) -> str:
    """Run commands in order and return the text of the last one."""
    text = ""
    for command in commands:
        text = engine.execute(command)
    return text
