"""Two-token command parser: free text -> (verb, noun)."""

from __future__ import annotations

import re
from typing import NamedTuple

from castle_logic.world import ALIASES, DIRECTIONS, KNOWN_VERBS

_LEADING_ARTICLE = re.compile(r"^(the|a|an)\s+", re.IGNORECASE)


class Command(NamedTuple):
    verb: str
    noun: str = ""


def parse(text: str) -> Command | None:
    """Parse a command line. Returns None for blank input.

    No semantic checks happen here: unknown verbs and nouns pass through for
    the engine to reject.
    """
    words = text.lower().split()
    if not words:
        return None

    verb = words[0]
    noun = " ".join(words[1:])

    target = ALIASES.get(verb)
    if target is not None:
        if target in DIRECTIONS and not noun:
            verb, noun = "go", target
        else:
            verb = target

    if verb in DIRECTIONS and not noun:
        verb, noun = "go", verb

    return Command(verb, strip_article(noun))


def strip_article(noun: str) -> str:
    """Drop one leading "the", "a" or "an"; articles further in are kept."""
    return _LEADING_ARTICLE.sub("", noun, count=1)


def is_known_verb(verb: str) -> bool:
    return verb in KNOWN_VERBS or verb in DIRECTIONS
