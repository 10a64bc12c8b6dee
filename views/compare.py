import streamlit as st

from domain import content
from ui.components import section_card, static_table, contact_form


def view():
    intro = content.COMPARE_INTRO
    with section_card(intro['title'], intro['subtitle']):
        st.write(intro['body'])

    with st.container(border=True):
        static_table(content.COMPARISON_ROWS, headers=["Dimension", "Team", "Group"])

    contact_form.render()
