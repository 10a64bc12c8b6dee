import streamlit as st

from domain import content
from ui.components import section_card, bullet_list, contact_form


def view():
    intro = content.TOOLS_INTRO
    with section_card(intro['title'], intro['subtitle']):
        st.write(intro['body'])

    # Accordion: one expander per modality, all collapsed initially
    for group in content.TOOL_GROUPS:
        with st.expander(group['title'], expanded=False):
            st.write(group['intro'])
            bullet_list(group['items'])
            st.markdown(f"**{group['cta']}** → use the contact form below")

    contact_form.render()
