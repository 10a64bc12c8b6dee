import streamlit as st

from domain import content
from ui.components import section_card, bullet_list, contact_form


def view():
    intro = content.ICF_INTRO
    with section_card(intro['title'], intro['subtitle']):
        st.write(intro['body'])

    # Two-column grid, filled row by row
    competencies = content.COMPETENCIES
    for i in range(0, len(competencies), 2):
        cols = st.columns(2)
        for col, comp in zip(cols, competencies[i:i + 2]):
            with col:
                with section_card(comp['name']):
                    bullet_list(comp['points'])

    contact_form.render()
