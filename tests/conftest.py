import os
import sys
from unittest.mock import MagicMock, patch

# Load C-extension stacks once, outside any sys.modules patching; they cannot be re-imported.
import pandas  # noqa: F401
import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Modules that bind `streamlit` at import time
UI_PACKAGES = {"app", "ui", "views"}


@pytest.fixture
def st_mock():
    """Mock streamlit in sys.modules; UI modules imported inside a test see the mock.

    Columns are the mock itself so widgets created inside columns are
    observable on ``st`` directly.
    """
    st = MagicMock()
    st.session_state = {}
    st.columns.side_effect = lambda spec, **kw: [st] * (spec if isinstance(spec, int) else len(spec))
    st.button.return_value = False
    st.form_submit_button.return_value = False
    modules = {
        "streamlit": st,
        "streamlit.components": st.components,
        "streamlit.components.v1": st.components.v1,
    }
    with patch.dict("sys.modules", modules):
        # Drop copies bound to the real streamlit (e.g. from an AppTest run); restored on exit.
        for name in [m for m in sys.modules if m.split('.')[0] in UI_PACKAGES]:
            del sys.modules[name]
        yield st
