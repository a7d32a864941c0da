"""Unit-level conftest: deterministic randomness and patched Streamlit state."""

import random
from unittest.mock import MagicMock, patch

import pytest

from tests.conftest import MockSessionState


# ---------------------------------------------------------------------------
# Random source
# ---------------------------------------------------------------------------


@pytest.fixture
def seeded_rng():
    """A Random with a fixed seed so sampled output can be asserted exactly."""
    return random.Random(1234)


def _user(content):
    return {"role": "user", "content": content}


def _assistant(content):
    return {"role": "assistant", "content": content}


# ---------------------------------------------------------------------------
# Session state fixture with st patching for state.py
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_session_state_for_state(mock_session_state):
    """MockSessionState patched into chat_coach.state.st.session_state."""
    mock_st = MagicMock()
    mock_st.session_state = mock_session_state
    with patch("chat_coach.state.st", mock_st):
        yield mock_session_state


@pytest.fixture
def empty_session_state_for_state():
    """Brand-new session, before init_session_state has run."""
    ss = MockSessionState()
    mock_st = MagicMock()
    mock_st.session_state = ss
    with patch("chat_coach.state.st", mock_st):
        yield ss
