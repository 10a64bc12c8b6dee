import streamlit as st

import config
from domain.constants import NAV
from services.router import Router, resolve_page
from services.seo import build_page_meta
from ui.components import (
    inject_base_css, render_header, render_hero, render_footer, apply_page_meta,
)

# Import the page rendering functions from the view modules
from views import home, looks, tools, assessments, icf, compare

_LABELS = {n.key: n.label for n in NAV}

# --- Page Registry ---
# Maps a route key to its navigation label and the page's rendering function.
PAGE_REGISTRY = {
    "home": {
        "label": _LABELS["home"],
        "render_func": home.view,
    },
    "looks": {
        "label": _LABELS["looks"],
        "render_func": looks.view,
    },
    "tools": {
        "label": _LABELS["tools"],
        "render_func": tools.view,
    },
    "assess": {
        "label": _LABELS["assess"],
        "render_func": assessments.view,
    },
    "icf": {
        "label": _LABELS["icf"],
        "render_func": icf.view,
    },
    "compare": {
        "label": _LABELS["compare"],
        "render_func": compare.view,
    },
}


def main():
    """
    Main application router.

    Navigation buttons update the route through callbacks, which run before the
    script re-executes; the chrome is rendered every run and only the page
    region changes with the route.
    """
    config.configure_logging()
    router = Router(st.session_state)
    meta = build_page_meta(router.current_route)

    st.set_page_config(page_title=meta.title, page_icon="🧭", layout="wide")
    inject_base_css()
    apply_page_meta(meta)

    # --- Chrome ---
    render_header(router)
    render_hero(router)

    # --- Page Rendering ---
    page_to_render = resolve_page(PAGE_REGISTRY, router.current_route)
    page_to_render()

    # --- Footer ---
    render_footer()


if __name__ == "__main__":
    main()
