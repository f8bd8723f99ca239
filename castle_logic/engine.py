"""Session driver: parses one command per turn and narrates the result. No I/O."""

import logging
from collections import OrderedDict

from castle_logic import rules
from castle_logic.parser import is_known_verb, parse, strip_article
from castle_logic.registry import World, default_world
from castle_logic.state import GameState, new_session

logger = logging.getLogger(__name__)

class GameEngine:
    def __init__(self, world: World | None = None):
        self.world = world or default_world()
        self.state: GameState = new_session(self.world.start_room)
        self._saved: GameState | None = None

    def execute(self, command: str) -> str:
        """Parse and execute a command. Returns narrative text."""
        parsed = parse(command)
        if parsed is None:
            return "Say something. Type 'help' for commands."

        dispatch = {
            "look": self._look,
            "go": self._go,
            "take": self._take,
            "drop": self._drop,
            "use": self._use,
            "read": self._read,
            "talk": self._talk,
            "offer": self._offer,
            "inventory": self._inventory,
            "help": self._help,
            "save": self._save,
            "load": self._load,
        }

        handler = dispatch.get(parsed.verb)
        if handler is None or not is_known_verb(parsed.verb):
            return "I don't understand that command."

        logger.debug("execute %r -> %s %r", command, parsed.verb, parsed.noun)

        was_won = self.state.game_won
        text = handler(parsed.noun)
        rules.check_victory(self.state, self.world)
        if self.state.game_won and not was_won:
            text += self._victory_text()
        return text

    def is_won(self) -> bool:
        return self.state.game_won

    def status(self) -> dict:
        status = self.state.to_dict()
        status["won"] = self.is_won()
        return status

    def stats(self) -> dict:
        return rules.stats(self.state, self.world)

    # -- command handlers --

    def _look(self, target: str) -> str:
        if not target or target == "around":
            return self._describe_room()

        if target.startswith("at "):
            target = strip_article(target[3:])

        if not rules.can_see(self.state.current_room, self.state, self.world):
            return "It's too dark to see anything."

        outcome = rules.trigger_secret(target, self.state, self.world)
        if outcome is not None:
            return outcome.message

        here = rules.room_items(self.state.current_room, self.state, self.world)
        if self.state.has(target) or target in here:
            return rules.item_description(target, self.world)

        return f"You don't see any {target} here."

    def _describe_room(self) -> str:
        room = self.world.get_room(self.state.current_room)
        lines = [room.name, "", rules.room_description(room.id, self.state, self.world)]

        if not rules.can_see(room.id, self.state, self.world):
            return "\n".join(lines)

        items = rules.room_items(room.id, self.state, self.world)
        if items:
            lines.append("")
            lines.append("You see: " + ", ".join(items) + ".")
        lines.append("Exits: " + (", ".join(room.exits) or "none") + ".")
        return "\n".join(lines)

    def _go(self, direction: str) -> str:
        if not direction:
            return "Go where?"

        outcome = rules.move(direction, self.state, self.world)
        if not outcome.ok:
            return outcome.message
        return outcome.message + "\n\n" + self._describe_room()

    def _take(self, item_name: str) -> str:
        if not item_name:
            return "Take what?"
        return rules.take_item(item_name, self.state, self.world).message

    def _drop(self, item_name: str) -> str:
        if not item_name:
            return "Drop what?"
        return rules.drop_item(item_name, self.state, self.world).message

    def _use(self, item_name: str) -> str:
        if not item_name:
            return "Use what?"

        # "open wardrobe" and friends reach secrets through the use alias
        if rules.find_secret(item_name, self.state.current_room, self.world) is not None:
            if not rules.can_see(self.state.current_room, self.state, self.world):
                return "It's too dark to see anything."
            return self._spend_turn(rules.trigger_secret(item_name, self.state, self.world))

        if not self.state.has(item_name):
            return f"You don't have a {item_name}."

        if rules.is_light_source(item_name, self.world):
            return self._spend_turn(rules.light_lamp(item_name, self.state, self.world))

        room = self.world.get_room(self.state.current_room)
        if room.has_dragon:
            return self._offer(item_name)

        return f"You can't figure out how to use the {item_name} here."

    def _read(self, item_name: str) -> str:
        if not item_name:
            return "Read what?"
        if not self.state.has(item_name):
            return f"You don't have a {item_name}."
        return rules.item_description(item_name, self.world)

    def _talk(self, target: str) -> str:
        room = self.world.get_room(self.state.current_room)
        if not room.has_dragon:
            return "You talk to yourself. Nobody answers."

        line = rules.talk_to_dragon(self.state)
        self.state.moves += 1
        if line.becomes_friendly:
            return line.text + "\n\nVermithrax now regards you as a friend."
        return line.text

    def _offer(self, item_name: str) -> str:
        if not item_name:
            return "Offer what?"
        room = self.world.get_room(self.state.current_room)
        if not room.has_dragon:
            return "There's no one here to accept it."
        return self._spend_turn(rules.offer_to_dragon(item_name, self.state, self.world))

    def _spend_turn(self, outcome: rules.Outcome) -> str:
        """Count a use, talk or offer turn as a move, but only when it did something."""
        if outcome.ok:
            self.state.moves += 1
        return outcome.message

    def _inventory(self, _arg: str) -> str:
        if not self.state.inventory:
            return "You aren't carrying anything."
        return "You are carrying: " + ", ".join(self.state.inventory) + "."

    def _save(self, _arg: str) -> str:
        self._saved = self.state.snapshot()
        return "Game saved."

    def _load(self, _arg: str) -> str:
        if self._saved is None:
            return "There is no saved game."
        self.state = self._saved.snapshot()
        return "Game loaded.\n\n" + self._describe_room()

    def _help(self, _arg: str) -> str:
        return (
            "Commands:\n"
            "  look [thing]    - Examine your surroundings, an item, or a hidden spot\n"
            "  go <direction>  - Move (north, south, east, west, up, down, out)\n"
            "  take <item>     - Pick up an item\n"
            "  drop <item>     - Put an item down\n"
            "  use <item>      - Use an item\n"
            "  read <item>     - Read an item you carry\n"
            "  talk            - Talk to whoever is here\n"
            "  offer <item>    - Offer an item as a gift\n"
            "  inventory       - Check what you're carrying\n"
            "  save / load     - Keep or restore a snapshot of this game\n"
            "  help            - Show this message"
        )

    def _victory_text(self) -> str:
        return (
            "\n\n*** YOU WIN ***\n"
            f"Completed in {self.state.moves} moves."
        )


class SessionManager:
    """Independent GameEngine per session id, all sharing one World.

    At most ``max_sessions`` games are kept; the least recently used one is
    dropped to make room for a new session.
    """

    def __init__(self, world: World | None = None, max_sessions: int = 256):
        self.world = world or default_world()
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, GameEngine] = OrderedDict()

    def get(self, session_id: str) -> GameEngine:
        engine = self._sessions.get(session_id)
        if engine is not None:
            self._sessions.move_to_end(session_id)
            return engine

        while len(self._sessions) >= self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("evicted idle session %s", evicted)
        engine = GameEngine(self.world)
        self._sessions[session_id] = engine
        logger.info("new session %s", session_id)
        return engine

    def reset(self, session_id: str) -> GameEngine:
        self._sessions.pop(session_id, None)
        return self.get(session_id)

    def __len__(self) -> int:
        return len(self._sessions)
