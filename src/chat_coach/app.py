import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import streamlit as st

from chat_coach import config
from chat_coach.content import (
    INPUT_PLACEHOLDER,
    PAGE_EYEBROW,
    PAGE_SUBTITLE,
    PAGE_TITLE,
    REPLY_FAILED_MESSAGE,
)
from chat_coach.logging_config import setup_logging
from chat_coach.responder import handle_chat_request
from chat_coach.state import (
    dispatch,
    init_session_state,
    make_message,
    to_request_payload,
)

logger = setup_logging().getChild("app")


# ---------------------------------------------------------------------------
# Callbacks: every state change goes through dispatch()
# ---------------------------------------------------------------------------

def _send_draft() -> None:
    """Submit the draft, ask the responder, and record the outcome."""
    draft = st.session_state.draft.strip()
    if not draft or st.session_state.pending:
        return

    chat = dispatch({"type": "user_submitted", "message": make_message("user", draft)})
    try:
        response = handle_chat_request(to_request_payload(chat["messages"]))
    except Exception:
        logger.exception("Responder failed on a %d-message conversation", len(chat["messages"]))
        dispatch({"type": "reply_failed", "error": REPLY_FAILED_MESSAGE})
        return

    dispatch({"type": "reply_received", "message": make_message("assistant", response["reply"])})


def _pick_suggestion(text: str) -> None:
    dispatch({"type": "suggestion_picked", "text": text})


def _reset_conversation() -> None:
    dispatch({"type": "reset"})
    logger.info("Conversation reset")


st.set_page_config(page_title="Chat Coach", layout="centered")

# --- Initialize ---
init_session_state()
logger.info("App render, %d messages in session", len(st.session_state.messages))

# --- Sidebar ---
with st.sidebar:
    st.title("Chat Coach")
    st.button("New conversation", on_click=_reset_conversation, width="stretch")
    st.metric("Messages", len(st.session_state.messages))

# --- Header ---
st.caption(PAGE_EYEBROW.upper())
st.title(PAGE_TITLE)
st.write(PAGE_SUBTITLE)

# --- Conversation ---
for msg in st.session_state.messages:
    with st.chat_message(msg["role"]):
        st.markdown(msg["content"])

if st.session_state.pending:
    st.caption("Thinking…")

if st.session_state.error:
    st.error(st.session_state.error)

# --- Suggestions ---
suggestions = st.session_state.suggestions
if suggestions:
    cols = st.columns(len(suggestions))
    for i, (col, suggestion) in enumerate(zip(cols, suggestions)):
        with col:
            st.button(
                suggestion,
                key=f"suggestion_{i}",
                on_click=_pick_suggestion,
                args=(suggestion,),
                width="stretch",
            )

# --- Input ---
with st.form("chat_form"):
    st.text_area(
        "Message",
        key="draft",
        height=80,
        max_chars=config.MAX_INPUT_CHARS,
        placeholder=INPUT_PLACEHOLDER,
        label_visibility="collapsed",
    )
    st.form_submit_button(
        "Sending…" if st.session_state.pending else "Send",
        on_click=_send_draft,
        disabled=st.session_state.pending,
    )
