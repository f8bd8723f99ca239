"""Rule engine: queries and state transitions over World + GameState.

Every function here reports its result as a value (``Access``, ``Outcome``,
``DragonLine`` or a None sentinel). Nothing raises at play time.
"""

from __future__ import annotations

import logging
import time
from typing import NamedTuple

from castle_logic.registry import World, default_world
from castle_logic.state import GameState, SecretKey
from castle_logic.world import DRAGON_DIALOGUES, DRAGON_GIFT, FRIENDLY_DIALOGUE_INDEX

logger = logging.getLogger(__name__)

NO_SUCH_ROOM = "That room doesn't exist."
NOTHING_NEW = "You've already searched there. Nothing new here."


class Access(NamedTuple):
    accessible: bool
    message: str | None = None
    unlocked: bool = False
    key: str | None = None


class Outcome(NamedTuple):
    ok: bool
    message: str


class DragonLine(NamedTuple):
    text: str
    becomes_friendly: bool


# -- visibility & access --

def can_see(room_id: str, state: GameState, world: World | None = None) -> bool:
    world = world or default_world()
    room = world.get_room(room_id)
    if room is None or not room.dark:
        return True
    return state.lamp_lit and any(state.has(light) for light in world.light_sources())


def check_access(room_id: str, state: GameState, world: World | None = None) -> Access:
    world = world or default_world()
    room = world.get_room(room_id)
    if room is None:
        return Access(False, NO_SUCH_ROOM)

    if room_id in world.hidden_rooms() and room_id not in state.opened_rooms:
        return Access(False, "You can't find a way in.")

    if not room.locked:
        return Access(True)

    if state.has(room.key_required):
        return Access(True, unlocked=True, key=room.key_required)
    return Access(False, room.locked_message)


# -- containers --

def room_items(room_id: str, state: GameState, world: World | None = None) -> list[str]:
    if room_id in state.room_states:
        return list(state.room_states[room_id])
    world = world or default_world()
    room = world.get_room(room_id)
    return list(room.items) if room else []


def set_room_items(room_id: str, items: list[str], state: GameState) -> None:
    state.room_states[room_id] = list(items)


def exit_room(direction: str, room_id: str, world: World | None = None) -> str | None:
    world = world or default_world()
    room = world.get_room(room_id)
    if room is None:
        return None
    return room.exits.get(direction)


# -- item predicates --

def is_valid_item(name: str, world: World | None = None) -> bool:
    return (world or default_world()).get_item(name) is not None


def is_takeable(name: str, world: World | None = None) -> bool:
    item = (world or default_world()).get_item(name)
    return item.takeable if item else False


def is_light_source(name: str, world: World | None = None) -> bool:
    item = (world or default_world()).get_item(name)
    return item.is_light if item else False


def is_goal_item(name: str, world: World | None = None) -> bool:
    item = (world or default_world()).get_item(name)
    return item.is_goal if item else False


def item_description(name: str, world: World | None = None) -> str | None:
    item = (world or default_world()).get_item(name)
    return item.description if item else None


def room_description(room_id: str, state: GameState, world: World | None = None) -> str:
    world = world or default_world()
    room = world.get_room(room_id)
    if room.dark and room.description_lit and can_see(room_id, state, world):
        return room.description_lit
    return room.description


# -- movement, secrets, victory --

def move(direction: str, state: GameState, world: World | None = None) -> Outcome:
    world = world or default_world()
    target = exit_room(direction, state.current_room, world)

    if target is None:
        # Rooms opened by a secret here are entered by name.
        opener = world.hidden_rooms().get(direction)
        if opener and opener[0] == state.current_room and direction in state.opened_rooms:
            target = direction

    if target is None:
        return Outcome(False, f"You can't go {direction} from here.")

    access = check_access(target, state, world)
    if not access.accessible:
        return Outcome(False, access.message)

    logger.debug("move %s -> %s (%s)", state.current_room, target, direction)
    state.current_room = target
    state.moves += 1

    room = world.get_room(target)
    message = f"You enter {room.name}."
    if access.unlocked:
        message = f"You unlock the way with the {access.key}. " + message
    check_victory(state, world)
    return Outcome(True, message)


def find_secret(keyword: str, room_id: str, world: World | None = None):
    """Return the room's secret for ``keyword``, or None."""
    world = world or default_world()
    room = world.get_room(room_id)
    if room is None:
        return None
    return room.secrets.get(keyword)


def trigger_secret(keyword: str, state: GameState, world: World | None = None) -> Outcome | None:
    """Reveal a secret in the current room. None when there is no such secret."""
    world = world or default_world()
    secret = find_secret(keyword, state.current_room, world)
    if secret is None:
        return None

    key = SecretKey(state.current_room, keyword)
    if secret.one_time and state.secrets_found.get(key):
        return Outcome(False, NOTHING_NEW)

    state.secrets_found[key] = True
    if secret.gives:
        state.add_item(secret.gives)
    if secret.opens_room:
        state.opened_rooms.add(secret.opens_room)
    logger.debug("secret %s found (gives=%s, opens=%s)", key, secret.gives, secret.opens_room)
    return Outcome(True, secret.description)


def check_victory(state: GameState, world: World | None = None) -> bool:
    """Set game_won when a goal item is held in a victory room. True only on the winning turn."""
    if state.game_won:
        return False
    world = world or default_world()
    room = world.get_room(state.current_room)
    if room is None or not room.is_victory:
        return False
    if not any(state.has(goal) for goal in world.goal_items()):
        return False
    state.game_won = True
    logger.info("game won after %d moves", state.moves)
    return True


# -- inventory transfers --

def take_item(name: str, state: GameState, world: World | None = None) -> Outcome:
    world = world or default_world()
    here = room_items(state.current_room, state, world)

    if not can_see(state.current_room, state, world):
        return Outcome(False, "It's too dark to find anything in here.")
    if state.has(name):
        return Outcome(False, f"You already have the {name}.")
    if name not in here:
        return Outcome(False, f"There's no {name} here.")
    if not is_takeable(name, world):
        return Outcome(False, f"You can't take the {name}.")

    room = world.get_room(state.current_room)
    if room.has_dragon and not state.dragon_friendly:
        return Outcome(False, "Vermithrax's golden eye narrows. 'Touch my hoard, thief, and burn.'")

    here.remove(name)
    set_room_items(state.current_room, here, state)
    state.add_item(name)
    check_victory(state, world)
    return Outcome(True, f"You take the {name}.")


def drop_item(name: str, state: GameState, world: World | None = None) -> Outcome:
    if not state.has(name):
        return Outcome(False, f"You don't have a {name}.")
    here = room_items(state.current_room, state, world)
    here.append(name)
    set_room_items(state.current_room, here, state)
    state.remove_item(name)
    return Outcome(True, f"You drop the {name}.")


def light_lamp(name: str, state: GameState, world: World | None = None) -> Outcome:
    if not is_light_source(name, world):
        return Outcome(False, f"You can't light the {name}.")
    if state.lamp_lit:
        return Outcome(False, f"The {name} is already lit.")
    state.lamp_lit = True
    return Outcome(True, f"You light the {name}. A warm glow pushes back the shadows.")


# -- dragon --

def dragon_dialogue(state: GameState) -> DragonLine:
    index = min(state.dragon_dialogue, len(DRAGON_DIALOGUES) - 1)
    return DragonLine(DRAGON_DIALOGUES[index], state.dragon_dialogue == FRIENDLY_DIALOGUE_INDEX)


def talk_to_dragon(state: GameState) -> DragonLine:
    line = dragon_dialogue(state)
    if line.becomes_friendly and not state.dragon_friendly:
        state.dragon_friendly = True
        logger.debug("dragon became friendly")
    state.dragon_dialogue = min(state.dragon_dialogue + 1, len(DRAGON_DIALOGUES) - 1)
    return line


def offer_to_dragon(name: str, state: GameState, world: World | None = None) -> Outcome:
    if not state.has(name):
        return Outcome(False, f"You don't have a {name}.")
    if not state.dragon_friendly:
        return Outcome(False, "Vermithrax sniffs at your offering and looks away. 'Bribes bore me. Talk to me first.'")
    if state.dragon_gift_given:
        return Outcome(False, "'You have given enough, little friend,' Vermithrax rumbles. 'Keep it.'")

    state.remove_item(name)
    state.add_item(DRAGON_GIFT)
    state.dragon_gift_given = True
    return Outcome(
        True,
        f"Vermithrax accepts the {name} with surprising gentleness. In return he "
        f"breaks off a {DRAGON_GIFT} and nudges it toward you.",
    )


# -- statistics --

def stats(state: GameState, world: World | None = None, now: float | None = None) -> dict:
    world = world or default_world()
    elapsed = (time.time() if now is None else now) - state.start_time
    return {
        "moves": state.moves,
        "inventoryCount": len(state.inventory),
        "secretsFound": len(state.secrets_found),
        "totalSecrets": world.total_secrets(),
        "hasWon": state.game_won,
        "hasCrown": any(state.has(goal) for goal in world.goal_items()),
        "dragonFriendly": state.dragon_friendly,
        "minutesPlayed": int(elapsed // 60),
    }
