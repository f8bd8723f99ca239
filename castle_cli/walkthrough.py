#!/usr/bin/env python3
"""Walkthrough runner: replays a YAML list of commands against a fresh game and records the transcript."""

import argparse
import json
import os
import sys
from dataclasses import replace
from datetime import datetime

import yaml

from castle_logic.config import configure_logging, load_settings, load_world
from castle_logic.engine import GameEngine
from castle_logic.registry import WorldDataError


class Logger:
    """Tees output to both stdout and a log file, flushing after every write."""

    def __init__(self, log_dir: str, label: str):
        os.makedirs(log_dir, exist_ok=True)
        safe = label.replace(" ", "_").replace("/", "_")
        self.path = os.path.join(log_dir, f"{safe}.log")
        self.f = open(self.path, "w", encoding="utf-8")

    def log(self, msg: str = ""):
        print(msg)
        self.f.write(msg + "\n")
        self.f.flush()

    def close(self):
        self.f.close()


def load_script(script_file: str) -> list[str]:
    """Read commands from a YAML file: either a bare list or a mapping with a ``commands`` list."""
    with open(script_file, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if isinstance(data, dict):
        data = data.get("commands")
    if not isinstance(data, list):
        raise ValueError(f"{script_file}: expected a list of commands")
    return [str(c) for c in data]


def run_walkthrough(commands: list[str], engine: GameEngine, log: Logger | None = None) -> dict:
    """Play every command in order. Stops early once the game is won."""
    emit = log.log if log else (lambda msg="": None)

    emit(engine.execute("look"))
    emit()

    turns = 0
    for command in commands:
        turns += 1
        emit(f"[Turn {turns}] > {command}")
        emit(engine.execute(command))
        emit()
        if engine.is_won():
            break

    return {
        "turns": turns,
        "won": engine.is_won(),
        "room": engine.state.current_room,
        "stats": engine.stats(),
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replay a scripted playthrough of MysticCastle")
    parser.add_argument("script", help="Path to a YAML walkthrough script")
    parser.add_argument("--world", default=None, help="Path to a YAML world file (defaults to the built-in castle)")
    parser.add_argument("--log-dir", default=None, help="Directory for transcript logs")
    parser.add_argument("--json", action="store_true", help="Print the final result as JSON")
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)
    if args.world:
        settings = replace(settings, world_file=args.world)

    if args.log_dir is None:
        args.log_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs")

    if not os.path.isfile(args.script):
        print(f"ERROR: Walkthrough script not found: {args.script}")
        return 1

    try:
        commands = load_script(args.script)
        world = load_world(settings)
    except (OSError, ValueError, WorldDataError, yaml.YAMLError) as e:
        print(f"ERROR: {e}")
        return 1

    label = os.path.splitext(os.path.basename(args.script))[0]
    log = Logger(args.log_dir, f"{label}_{datetime.now():%Y%m%d_%H%M%S}")
    try:
        result = run_walkthrough(commands, GameEngine(world), log)
    finally:
        log.close()

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        won = "YES" if result["won"] else "NO"
        s = result["stats"]
        print(f"{'='*60}")
        print(f"  Won: {won}   Turns: {result['turns']}   Moves: {s['moves']}")
        print(f"  Secrets: {s['secretsFound']}/{s['totalSecrets']}   Dragon friendly: {s['dragonFriendly']}")
        print(f"  Transcript: {log.path}")
        print(f"{'='*60}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
