"""Fixed reply content: keyword rules, blocker rules, idea pool, UI copy.

Everything here is an immutable, ordered tuple. Order is precedence for
KEYWORD_RULES and output order for BLOCKER_RULES.
"""

import re
from typing import NamedTuple


class KeywordRule(NamedTuple):
    triggers: tuple[str, ...]  # lowercase phrases, matched as substrings
    response: str


class BlockerRule(NamedTuple):
    topic: str
    pattern: re.Pattern
    advisory: str


KEYWORD_RULES = (
    KeywordRule(
        triggers=("hello", "hi", "hey"),
        response="Hello! 👋 I'm tuned in and ready to collaborate. What are we exploring today?",
    ),
    KeywordRule(
        triggers=("thanks", "thank you", "appreciate"),
        response="Happy to help! If there's anything else you'd like to iterate on, just let me know.",
    ),
    KeywordRule(
        triggers=("help", "stuck", "support"),
        response="I've got your back. Share where things feel fuzzy and we'll carve a clearer path together.",
    ),
    KeywordRule(
        triggers=("who are you", "what are you"),
        response=(
            "I'm your conversation partner—part coach, part co-creator—here to help you "
            "untangle ideas and move them forward."
        ),
    ),
    KeywordRule(
        triggers=("idea", "brainstorm", "concept"),
        response=(
            "Let's brainstorm! Give me a bit more context, like the audience or goal, "
            "and I'll throw out a few angles."
        ),
    ),
)

BLOCKER_RULES = (
    BlockerRule(
        topic="time",
        pattern=re.compile(r"\btime\b|\bschedule\b|\bbusy\b", re.IGNORECASE | re.ASCII),
        advisory="Time: carve out a focused micro-sprint (30–60 minutes) and define a single milestone.",
    ),
    BlockerRule(
        topic="budget",
        pattern=re.compile(r"\bmoney\b|\bbudget\b|\bcost\b", re.IGNORECASE | re.ASCII),
        advisory="Budget: validate the idea with zero- or low-cost experiments before investing further.",
    ),
    BlockerRule(
        topic="confidence",
        pattern=re.compile(
            r"\bconfidence\b|\bunsure\b|\bworr(?:y|ied|ies|ying)\b", re.IGNORECASE | re.ASCII
        ),
        advisory=(
            "Confidence: outline the riskiest assumption and design a lightweight test "
            "to confirm or refute it."
        ),
    ),
)

MOMENTUM_ADVISORY = (
    "Momentum: decide on a measurable outcome for your next action so you can "
    "celebrate progress quickly."
)

IDEA_POOL = (
    "Consider reframing the idea around a specific persona to make it tangible.",
    "Test the concept with a low-stakes pilot—collect fast feedback before investing heavily.",
    "Pair the idea with a simple narrative that explains the before/after transformation.",
    "Break the big concept into a three-step journey so it feels more approachable.",
    "Contrast the current status quo with the change you want to introduce.",
)

# Section labels for the assembled reply
FRAMING_LABEL = "Here's how I'm understanding what you're aiming for based on our conversation:"
BLOCKERS_LABEL = "Potential blockers to watch out for (and how you might address them):"
NEXT_STEPS_LABEL = "Next steps you can take right away:"

CLOSING_LINE = (
    "When you're ready, share how these land—or drop fresh details and we'll iterate further."
)

# No user turn in an otherwise non-empty conversation
NO_USER_TURN_REPLY = (
    "I'm here whenever you're ready to chat. Share a question, an idea, or anything "
    "you'd like to unpack."
)

# Empty conversation at the request boundary
EMPTY_CONVERSATION_REPLY = (
    "Hi there! Describe what you're working on or what you need help with, and I'll jump in."
)

# ---------------------------------------------------------------------------
# UI copy
# ---------------------------------------------------------------------------

STARTER_MESSAGE = (
    "Hey there! I'm your collaborative thinking partner. Share a topic, a challenge, "
    "or even a half-baked idea and I'll help you shape it."
)

PLACEHOLDER_SUGGESTIONS = (
    "Give me three ideas for a weekend side project.",
    "Help me turn this product idea into a pitch.",
    "Summarize the highlights of remote-first collaboration.",
)

REPLY_FAILED_MESSAGE = "I hit a bump while thinking that through. Give it another try?"

PAGE_EYEBROW = "Conversational Studio"
PAGE_TITLE = "Chatbot that helps you ideate, refine, and move forward."
PAGE_SUBTITLE = (
    "Ask me questions, explore possibilities, and I'll respond with thoughtful, "
    "actionable insights tailored to the conversation."
)
INPUT_PLACEHOLDER = "Share your idea or ask for guidance..."
