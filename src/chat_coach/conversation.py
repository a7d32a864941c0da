"""Conversation turns: sanitize raw message lists into typed turns."""

import logging
import re
from collections.abc import Mapping
from typing import NamedTuple

logger = logging.getLogger("coach.conversation")

ROLES = ("user", "assistant", "system")

# Whitespace plus the byte-order mark, which str.strip() leaves in place
_EDGE_BLANKS = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


class Turn(NamedTuple):
    role: str
    content: str


def normalize_messages(value) -> list[Turn]:
    """Turn an untrusted value into an ordered list of Turns.

    Anything that isn't a list yields []. Elements that aren't mappings, carry
    an unknown role, have non-string content, or are blank after trimming are
    dropped silently. Never raises.
    """
    if not isinstance(value, list):
        return []

    turns = []
    for raw in value:
        if not isinstance(raw, Mapping):
            continue
        role = raw.get("role")
        content = raw.get("content")
        if role not in ROLES or not isinstance(content, str):
            continue
        content = _EDGE_BLANKS.sub("", content)
        if content:
            turns.append(Turn(role=role, content=content))

    dropped = len(value) - len(turns)
    if dropped:
        logger.debug("Dropped %d malformed or empty message(s)", dropped)
    return turns


def last_user_turn(turns: list[Turn]) -> Turn | None:
    """Most recent user turn, scanning from the end."""
    for turn in reversed(turns):
        if turn.role == "user":
            return turn
    return None
