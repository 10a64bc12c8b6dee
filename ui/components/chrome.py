"""Site chrome: header with navigation, hero, footer. Rendered on every run."""
import datetime as dt

import streamlit as st

from domain.constants import BRAND, NAV
from domain.content import FOOTER_LINKS, HERO, QUICK_LINKS
from services.router import Router
from . import contact_form
from .base import ACCENT, PRIMARY

LOGO_SVG = f"""
<svg width="40" height="40" viewBox="0 0 64 64" role="img" aria-label="MP monogram">
  <defs>
    <linearGradient id="g" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0%" stop-color="{ACCENT}" />
      <stop offset="100%" stop-color="#e9d6a3" />
    </linearGradient>
  </defs>
  <circle cx="32" cy="32" r="30" fill="{PRIMARY}" />
  <path d="M20 42V22h6l6 8 6-8h6v20h-6V31l-6 8-6-8v11z" fill="url(#g)" />
</svg>
"""


def go_to(router: Router, key: str):
    """Navigate; a page change starts the contact block from a fresh status, as a remount would."""
    previous = router.current_route
    if router.navigate(key) != previous:
        contact_form.get_controller().dismiss()


def render_header(router: Router):
    brand_col, nav_col = st.columns([1, 3], vertical_alignment="center")
    with brand_col:
        st.markdown(
            f"""<div style='display:flex; align-items:center; gap:12px;'>
            {LOGO_SVG}
            <div><p class='brand-name'>{BRAND['name']}</p><p class='brand-tagline'>{BRAND['tagline']}</p></div>
            </div>""",
            unsafe_allow_html=True,
        )
    current = router.current_route
    with nav_col:
        cols = st.columns(len(NAV))
        for col, item in zip(cols, NAV):
            col.button(
                item.label,
                key=f"nav_{item.key}",
                type="primary" if item.key == current else "secondary",
                on_click=go_to,
                args=(router, item.key),
            )
    st.divider()


def render_hero(router: Router):
    main_col, links_col = st.columns([3, 2])
    with main_col:
        st.markdown(f"## {HERO['headline']}")
        st.write(HERO['body'])
        c1, c2 = st.columns(2)
        # No anchors in Streamlit; the contact block sits at the bottom of every page.
        c1.markdown(f"**{HERO['primary_cta']}** ↓ use the form below")
        c2.button(
            HERO['secondary_cta'],
            key="hero_sample_session",
            on_click=go_to,
            args=(router, HERO["secondary_route"]),
        )
    with links_col:
        with st.container(border=True):
            st.caption("Quick Links")
            for key, label in QUICK_LINKS:
                st.button(label, key=f"quick_{key}", on_click=go_to, args=(router, key))
    st.divider()


def render_footer():
    st.divider()
    left, right = st.columns([3, 2])
    left.caption(f"© {dt.date.today().year} {BRAND['name']}. All rights reserved.")
    right.caption(" · ".join(FOOTER_LINKS + ["Contact ↑"]))
