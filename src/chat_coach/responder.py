"""Reply engine: keyword shortcuts, focus digest, blockers, and idea sampling."""

import json
import logging
import random
import re
from collections.abc import Mapping, Sequence

from . import config
from .content import (
    BLOCKER_RULES,
    BLOCKERS_LABEL,
    CLOSING_LINE,
    EMPTY_CONVERSATION_REPLY,
    FRAMING_LABEL,
    IDEA_POOL,
    KEYWORD_RULES,
    MOMENTUM_ADVISORY,
    NEXT_STEPS_LABEL,
    NO_USER_TURN_REPLY,
)
from .conversation import Turn, last_user_turn, normalize_messages

logger = logging.getLogger("coach.responder")

_WHITESPACE_RUN = re.compile(r"\s+")


def handle_chat_request(payload, rng: random.Random | None = None) -> dict:
    """Request boundary: {"messages": [...]} in, {"reply": "..."} out.

    Any payload shape is accepted. A missing or malformed "messages" field is
    an empty conversation, which gets the greeting without running the
    assembler.
    """
    raw_messages = payload.get("messages") if isinstance(payload, Mapping) else None
    messages = normalize_messages(raw_messages)

    if not messages:
        logger.info("Empty conversation, returning greeting")
        return {"reply": EMPTY_CONVERSATION_REPLY}

    return {"reply": craft_reply(messages, rng=rng)}


def handle_raw_request(body, rng: random.Random | None = None) -> dict:
    """Same as handle_chat_request, starting from an undecoded JSON body."""
    try:
        payload = json.loads(body) if body else None
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("Unreadable request body, treating as empty: %s", e)
        payload = None
    return handle_chat_request(payload, rng=rng)


def craft_reply(messages: list[Turn], rng: random.Random | None = None) -> str:
    """Build the reply for a normalized conversation.

    Order of precedence:
        1. No user turn → fixed invitation.
        2. Keyword hit on the latest user turn → canned response, verbatim.
        3. Otherwise framing (if any) + blockers + sampled next steps + closer.
    """
    latest = last_user_turn(messages)
    if latest is None:
        return NO_USER_TURN_REPLY

    keyword_hit = match_keyword(latest.content)
    if keyword_hit is not None:
        return keyword_hit

    if rng is None:
        rng = random.Random()

    focus = summarize_focus(messages)
    blockers = surface_blockers(latest.content)
    ideas = sample_ideas(IDEA_POOL, config.IDEA_SAMPLE_SIZE, rng)
    logger.info(
        "Assembled reply: focus=%s, blockers=%d, ideas=%d",
        focus is not None, len(blockers), len(ideas),
    )

    segments = []
    if focus:
        segments.append(_bulleted(FRAMING_LABEL, [focus]))
    segments.append(_bulleted(BLOCKERS_LABEL, blockers))
    segments.append(_bulleted(NEXT_STEPS_LABEL, ideas))
    segments.append(CLOSING_LINE)
    return "\n\n".join(segments)


def match_keyword(message: str) -> str | None:
    """First keyword rule with a trigger contained in the message wins.

    Plain substring containment, so "hi" also fires inside "this".
    """
    lowered = message.lower()
    for index, rule in enumerate(KEYWORD_RULES):
        if any(trigger in lowered for trigger in rule.triggers):
            logger.debug("Keyword rule %d matched", index)
            return rule.response
    return None


def summarize_focus(messages: list[Turn]) -> str | None:
    """Digest of the last few user turns, whitespace collapsed, ' • ' joined."""
    user_turns = [m for m in messages if m.role == "user"]
    if not user_turns:
        return None

    distilled = config.FOCUS_SEPARATOR.join(
        _WHITESPACE_RUN.sub(" ", turn.content).strip()
        for turn in user_turns[-config.FOCUS_WINDOW:]
    )
    return distilled or None


def surface_blockers(message: str) -> list[str]:
    """Advisories for every topic the message touches, in rule order.

    Falls back to the momentum advisory, so the result is never empty.
    """
    blockers = [rule.advisory for rule in BLOCKER_RULES if rule.pattern.search(message)]
    if not blockers:
        blockers.append(MOMENTUM_ADVISORY)
    return blockers


def sample_ideas(pool: Sequence[str], count: int, rng: random.Random) -> list[str]:
    """Uniform sample without replacement; at most len(pool) entries."""
    return rng.sample(list(pool), max(0, min(count, len(pool))))


def _bulleted(label: str, items: list[str]) -> str:
    return label + "\n" + "\n".join(f"{config.BULLET}{item}" for item in items)
