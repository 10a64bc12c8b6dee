import streamlit as st

from domain import content
from ui.components import section_card, bullet_list, pill_row, contact_form


def view():
    intro = content.HOME_INTRO
    with section_card(intro['title'], intro['subtitle']):
        left, right = st.columns(2)
        with left:
            st.markdown(intro['body'])
            pill_row(content.VALUE_PILLS)
            st.markdown(f"**{intro['cta']}** ↓")
        with right:
            with st.container(border=True):
                st.caption("UNIQUE VALUE PROPOSITION")
                st.markdown(content.UNIQUE_VALUE)

    c1, c2 = st.columns(2)
    with c1:
        with section_card("Teams I Work With"):
            bullet_list(content.TEAMS_SERVED)
    with c2:
        with section_card("Typical Problems I Help Solve (Pain Points)"):
            bullet_list(content.PAIN_POINTS)

    with section_card("Outcomes You Can Expect"):
        bullet_list(content.OUTCOMES, columns=2)

    with section_card("Engagement Flow", "A clear path from scoping to sustained change"):
        for i, (heading, text) in enumerate(content.ENGAGEMENT_FLOW, start=1):
            st.markdown(f"<span class='step-num'>{i}</span> **{heading}**", unsafe_allow_html=True)
            st.caption(text)

    contact_form.render()
