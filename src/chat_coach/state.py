"""Chat UI state: session-state setup and the reducer that owns the conversation.

Every change to the chat slice goes through reduce_chat() via dispatch().
Widgets never write messages directly.
"""

import logging
import random
import time
import uuid

import streamlit as st

from . import config
from .content import PLACEHOLDER_SUGGESTIONS, STARTER_MESSAGE

logger = logging.getLogger("coach.state")

CHAT_KEYS = ("messages", "pending", "error", "draft")


def make_message(role: str, content: str) -> dict:
    """UI message record. Only role/content ever reach the responder."""
    return {
        "id": uuid.uuid4().hex[:12],
        "role": role,
        "content": content,
        "created_at": time.time(),
    }


def initial_chat_state() -> dict:
    return {
        "messages": [make_message("assistant", STARTER_MESSAGE)],
        "pending": False,
        "error": None,
        "draft": "",
    }


def sample_suggestions(rng: random.Random | None = None) -> list[str]:
    """Pick the suggestion chips shown under the chat, once per session."""
    rng = rng or random.Random()
    count = min(config.SUGGESTION_COUNT, len(PLACEHOLDER_SUGGESTIONS))
    return rng.sample(list(PLACEHOLDER_SUGGESTIONS), count)


def init_session_state():
    """Call once at app startup. Sets up all state containers."""
    if "initialized" not in st.session_state:
        st.session_state.initialized = True
        for key, value in initial_chat_state().items():
            st.session_state[key] = value
        st.session_state.suggestions = sample_suggestions()


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------

def reduce_chat(state: dict, action: dict) -> dict:
    """Return the next chat state for an action. Never mutates `state`."""
    handlers = {
        "user_submitted": _on_user_submitted,
        "reply_received": _on_reply_received,
        "reply_failed": _on_reply_failed,
        "suggestion_picked": _on_suggestion_picked,
        "reset": _on_reset,
    }
    action_type = action.get("type")
    handler = handlers.get(action_type)
    if handler is None:
        logger.warning("Unknown chat action: %s", action_type)
        return state
    return handler(state, action)


def _on_user_submitted(state: dict, action: dict) -> dict:
    message = action["message"]
    if state["pending"] or not message["content"].strip():
        return state
    return {
        **state,
        "messages": [*state["messages"], message],
        "pending": True,
        "error": None,
        "draft": "",
    }


def _on_reply_received(state: dict, action: dict) -> dict:
    return {
        **state,
        "messages": [*state["messages"], action["message"]],
        "pending": False,
    }


def _on_reply_failed(state: dict, action: dict) -> dict:
    return {**state, "pending": False, "error": action["error"]}


def _on_suggestion_picked(state: dict, action: dict) -> dict:
    return {**state, "draft": action["text"]}


def _on_reset(state: dict, action: dict) -> dict:
    return initial_chat_state()


def dispatch(action: dict) -> dict:
    """Apply an action to st.session_state and return the new chat slice."""
    current = {key: st.session_state[key] for key in CHAT_KEYS}
    updated = reduce_chat(current, action)
    if updated is not current:
        for key in CHAT_KEYS:
            st.session_state[key] = updated[key]
    logger.debug("Dispatched %s (%d messages)", action.get("type"), len(updated["messages"]))
    return updated


def to_request_payload(messages: list[dict]) -> dict:
    """Strip UI messages down to the {role, content} pairs the responder reads."""
    return {"messages": [{"role": m["role"], "content": m["content"]} for m in messages]}
