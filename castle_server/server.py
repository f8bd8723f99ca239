#!/usr/bin/env python3
"""MCP server for the MysticCastle text adventure."""

import sys
import os
from datetime import datetime, timezone

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mcp.server.fastmcp import FastMCP
from castle_logic.config import configure_logging, load_settings, load_world
from castle_logic.engine import SessionManager

settings = load_settings()
configure_logging(settings.log_level)

mcp = FastMCP("MysticCastle")
sessions = SessionManager(load_world(settings), max_sessions=settings.max_sessions)


@mcp.tool()
def look(target: str = "", session: str = "default") -> str:
    """Look around the current room, or examine an item or a suspicious spot (e.g. 'loose stone')."""
    return sessions.get(session).execute(f"look {target}")


@mcp.tool()
def go(direction: str, session: str = "default") -> str:
    """Move to an adjacent room: north, south, east, west, up, down, or out."""
    return sessions.get(session).execute(f"go {direction}")


@mcp.tool()
def take(item: str, session: str = "default") -> str:
    """Pick up an item in the current room. Use the item's name as shown in room descriptions."""
    return sessions.get(session).execute(f"take {item}")


@mcp.tool()
def drop(item: str, session: str = "default") -> str:
    """Put down an item you are carrying."""
    return sessions.get(session).execute(f"drop {item}")


@mcp.tool()
def use(item: str, session: str = "default") -> str:
    """Use an item from your inventory in the current room."""
    return sessions.get(session).execute(f"use {item}")


@mcp.tool()
def read(item: str, session: str = "default") -> str:
    """Read an item from your inventory (e.g., the spell book)."""
    return sessions.get(session).execute(f"read {item}")


@mcp.tool()
def talk(session: str = "default") -> str:
    """Talk to whoever shares the room with you."""
    return sessions.get(session).execute("talk")


@mcp.tool()
def offer(item: str, session: str = "default") -> str:
    """Offer an item from your inventory as a gift."""
    return sessions.get(session).execute(f"offer {item}")


@mcp.tool()
def inventory(session: str = "default") -> str:
    """Check what items you are currently carrying."""
    return sessions.get(session).execute("inventory")


@mcp.tool()
def help(session: str = "default") -> str:
    """Show available commands and how to play."""
    return sessions.get(session).execute("help")


@mcp.tool()
def command(text: str, session: str = "default") -> str:
    """Send a free-text command, exactly as a player would type it (e.g. 'get the lamp', 'n')."""
    return sessions.get(session).execute(text)


@mcp.tool()
def status(session: str = "default") -> str:
    """Get current game state: room, inventory, move count, and win status."""
    state = sessions.get(session).status()
    lines = [
        f"Room: {state['current_room']}",
        f"Inventory: {', '.join(state['inventory']) or 'empty'}",
        f"Moves: {state['moves']}",
        f"Won: {state['won']}",
    ]
    return "\n".join(lines)


@mcp.tool()
def stats(session: str = "default") -> dict:
    """Get play statistics: moves, secrets found, dragon friendship, minutes played."""
    return sessions.get(session).stats()


@mcp.tool()
def new_game(session: str = "default") -> str:
    """Throw away this session's progress and start again at the castle gates."""
    return sessions.reset(session).execute("look")


@mcp.tool()
def health() -> dict:
    """Report that the server is up."""
    return {
        "status": "ok",
        "app": settings.app_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    mcp.run()
