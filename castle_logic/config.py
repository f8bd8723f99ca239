"""Runtime settings read from the environment (and a project-root .env file)."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from castle_logic.registry import World, default_world

# Load .env from project root
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))


@dataclass(frozen=True)
class Settings:
    app_name: str = "mysticcastle"
    world_file: str | None = None
    log_level: str = "WARNING"
    max_sessions: int = 256


def load_settings() -> Settings:
    return Settings(
        app_name=os.environ.get("MYSTICCASTLE_APP_NAME", "mysticcastle"),
        world_file=os.environ.get("MYSTICCASTLE_WORLD") or None,
        log_level=os.environ.get("MYSTICCASTLE_LOG_LEVEL", "WARNING").upper(),
        max_sessions=int(os.environ.get("MYSTICCASTLE_MAX_SESSIONS", "256")),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_world(settings: Settings) -> World:
    """The world named by settings, or the built-in castle."""
    if settings.world_file:
        return World.from_yaml(settings.world_file)
    return default_world()
