import inspect
import json

import streamlit as st
import streamlit.components.v1 as components

from domain.models import PageMeta
from services.seo import meta_attribute

APPLIED_KEY = '_meta_applied_route'


def meta_script(meta: PageMeta) -> str:
    """Script that upserts the meta tags into the host page's <head>."""
    tags = [[meta_attribute(name), name, content] for name, content in meta.tags.items()]
    return f"""
    <script>
    (function() {{
      const doc = window.parent.document;
      doc.title = {json.dumps(meta.title)};
      for (const [attr, name, content] of {json.dumps(tags)}) {{
        let el = doc.querySelector(`meta[${{attr}}='${{name}}']`);
        if (!el) {{
          el = doc.createElement('meta');
          el.setAttribute(attr, name);
          doc.head.appendChild(el);
        }}
        el.setAttribute('content', content);
      }}
    }})();
    </script>
    """


def _inline_js_supported() -> bool:
    try:
        return "unsafe_allow_javascript" in inspect.signature(st.html).parameters
    except (TypeError, ValueError):
        return False


def apply_page_meta(meta: PageMeta):
    """One-shot per route: skip when these tags were already applied for the route."""
    if st.session_state.get(APPLIED_KEY) == meta.route:
        return
    # components.v1.html is deprecated; newer releases run scripts through st.html directly.
    if _inline_js_supported():
        st.html(meta_script(meta), unsafe_allow_javascript=True)
    else:
        components.html(meta_script(meta), height=0)
    st.session_state[APPLIED_KEY] = meta.route
