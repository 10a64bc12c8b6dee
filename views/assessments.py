import streamlit as st

from domain import content
from ui.components import section_card, bullet_list, contact_form


def view():
    intro = content.ASSESS_INTRO
    with section_card(intro['title'], intro['subtitle']):
        st.markdown(intro['body'])

    cols = st.columns(len(content.ASSESSMENT_APPROACHES))
    for col, approach in zip(cols, content.ASSESSMENT_APPROACHES):
        with col:
            with section_card(approach['name']):
                bullet_list(approach['bullets'])

    with section_card("Sample Pulse Items", "Use 5–8 items, same scale weekly/bi‑weekly; discuss results together"):
        bullet_list(content.SAMPLE_PULSE)

    c1, c2 = st.columns(2)
    with c1:
        with section_card("Data Ethics & Psychological Safety"):
            bullet_list(content.DATA_ETHICS)
    with c2:
        with section_card("Deliverables You’ll Receive"):
            bullet_list(content.DELIVERABLES)

    contact_form.render()
