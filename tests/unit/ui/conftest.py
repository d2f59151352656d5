"""Configuration for UI unit tests."""

from unittest.mock import patch

import pytest
import streamlit as st


class FakeSessionState(dict):
    """Dictionary with attribute access, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def session_state():
    state = FakeSessionState()
    with patch.object(st, "session_state", state):
        yield state


@pytest.fixture
def mock_rerun():
    with patch.object(st, "rerun") as rerun:
        yield rerun
