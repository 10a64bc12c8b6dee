import asyncio
from typing import Optional

import streamlit as st

import config
from domain.constants import (
    CONTACT_FIELDS, FIELD_LABELS, SUBMIT_LABEL, SUBMITTING_LABEL, SUCCESS_MESSAGE, ERROR_MESSAGE,
)
from domain.content import CONTACT_INTRO
from domain.models import FormStatus
from services.contact import ContactController
from services.submission import SimulatedEndpoint
from .base import PRIMARY

CLEAR_FLAG = 'contact_clear_pending'
# Must differ from the controller's session-state key; form keys cannot hold values.
FORM_KEY = 'contact'


def _widget_key(name: str) -> str:
    return f"contact_{name}"


def get_controller() -> ContactController:
    return ContactController(st.session_state, SimulatedEndpoint(config.SUBMIT_DELAY_SECONDS))


def render(controller: Optional[ContactController] = None):
    """
    Renders the contact block: intro copy, the form and its status message.

    Widget values are pushed into the controller only on submit; after a
    successful submission the widgets are cleared on the following run.
    """
    controller = controller or get_controller()

    # Deferred widget reset (widget-bound keys cannot change after instantiation)
    if st.session_state.pop(CLEAR_FLAG, False):
        for name in CONTACT_FIELDS:
            st.session_state[_widget_key(name)] = controller.fields[name]

    st.markdown("<div id='contact'></div>", unsafe_allow_html=True)
    with st.container(border=True):
        intro_col, form_col = st.columns(2)
        with intro_col:
            st.markdown(f"#### {CONTACT_INTRO['title']}")
            st.write(CONTACT_INTRO['body'])
            st.markdown(" ".join(f"`{c}`" for c in CONTACT_INTRO['ctas']))

        with form_col:
            with st.form(FORM_KEY, clear_on_submit=False):
                c1, c2 = st.columns(2)
                values = {
                    'name': c1.text_input(FIELD_LABELS['name'], key=_widget_key('name')),
                    'email': c2.text_input(FIELD_LABELS['email'], key=_widget_key('email')),
                }
                c3, c4 = st.columns(2)
                values['company'] = c3.text_input(FIELD_LABELS['company'], key=_widget_key('company'))
                values['team_size'] = c4.text_input(FIELD_LABELS['team_size'], key=_widget_key('team_size'))
                values['message'] = st.text_area(FIELD_LABELS['message'], key=_widget_key('message'), height=110)
                submitted = st.form_submit_button(SUBMIT_LABEL, type="primary")

            if submitted:
                for name in CONTACT_FIELDS:
                    if values[name] != controller.fields[name]:
                        controller.on_field_change(name, values[name])
                # The submit completes within this run; the spinner is the only progress indicator.
                with st.spinner(SUBMITTING_LABEL):
                    status = asyncio.run(controller.on_submit())
                if status is FormStatus.SUCCESS:
                    st.session_state[CLEAR_FLAG] = True
                    st.rerun()

            if controller.status is FormStatus.SUCCESS:
                st.markdown(f"<p style='color:{PRIMARY}; font-size:.9rem;'>{SUCCESS_MESSAGE}</p>",
                            unsafe_allow_html=True)
            elif controller.status is FormStatus.ERROR:
                st.error(ERROR_MESSAGE)
