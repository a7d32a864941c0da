"""Root conftest: MockSessionState and shared fixtures."""

import os
import tempfile

import pytest

# Keep the rotating log file out of the home directory during tests
os.environ.setdefault("CHAT_COACH_LOG_DIR", tempfile.mkdtemp(prefix="chat-coach-logs-"))


class MockSessionState(dict):
    """Dict subclass with attribute access, mirrors Streamlit session_state.

    Supports both st.session_state["key"] and st.session_state.key.
    """

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)

    def __setattr__(self, key, value):
        self[key] = value

    def __delattr__(self, key):
        try:
            del self[key]
        except KeyError:
            raise AttributeError(key)

    def __contains__(self, key):
        return dict.__contains__(self, key)


def _fresh_session_state(**overrides) -> MockSessionState:
    """Build a MockSessionState with the canonical shape from state.py."""
    state = MockSessionState(
        initialized=True,
        messages=[
            {
                "id": "starter",
                "role": "assistant",
                "content": "Hey there! I'm your collaborative thinking partner.",
                "created_at": 0.0,
            }
        ],
        pending=False,
        error=None,
        draft="",
        suggestions=["Give me three ideas for a weekend side project."],
    )
    state.update(overrides)
    return state


@pytest.fixture
def mock_session_state():
    """Provide a fresh MockSessionState for each test."""
    return _fresh_session_state()
