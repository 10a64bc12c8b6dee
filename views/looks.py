import streamlit as st

from domain import content
from ui.components import section_card, bullet_list, static_table, contact_form


def view():
    intro = content.LOOKS_INTRO
    with section_card(intro['title'], intro['subtitle']):
        st.write(intro['body'])

    c1, c2 = st.columns(2)
    with c1:
        with section_card("Example 90‑Minute Session"):
            static_table(content.SAMPLE_AGENDA, headers=["Time", "Focus"])
    with c2:
        with section_card("Coaching Moves You’ll Experience"):
            bullet_list(content.COACHING_MOVES)

    with section_card("Cadence & Duration"):
        st.markdown(content.CADENCE)

    contact_form.render()
