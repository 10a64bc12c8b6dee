from contextlib import contextmanager
from typing import Iterable, Optional, Sequence

import pandas as pd
import streamlit as st

from domain.constants import BRAND

PRIMARY = BRAND["colors"]["primary"]
ACCENT = BRAND["colors"]["accent"]
HEAD_FONT = BRAND["fonts"]["head"]
BODY_FONT = BRAND["fonts"]["body"]


def inject_base_css():
    # Injected on every run; Streamlit drops elements not re-rendered in the current run.
    st.markdown(
        f"""
        <style>
        h1, h2, h3, h4 {{font-family:{HEAD_FONT}; color:{PRIMARY};}}
        p, li {{font-family:{BODY_FONT};}}
        .pill {{
            display:inline-block; padding:4px 12px; border-radius:999px; border:1px solid #d4d4d8;
            font-size:13px; font-weight:500; margin:0 6px 6px 0; background:#fff;
            box-shadow:0 1px 2px rgba(0,0,0,.05);
        }}
        .brand-name {{font-family:{HEAD_FONT}; color:{PRIMARY}; font-weight:700; font-size:1.05rem; margin:0;}}
        .brand-tagline {{color:{ACCENT}; font-size:.75rem; margin:0;}}
        .step-num {{
            display:inline-flex; width:28px; height:28px; border-radius:999px; background:#000; color:#fff;
            align-items:center; justify-content:center; font-weight:600; font-size:.85rem; margin-right:8px;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def section_card(title: str, subtitle: Optional[str] = None, icon: Optional[str] = None):
    """Bordered section with a heading; body is rendered inside the ``with`` block."""
    with st.container(border=True):
        st.markdown(f"### {icon + ' ' if icon else ''}{title}")
        if subtitle:
            st.caption(subtitle)
        yield


def bullet_list(items: Iterable[str], columns: int = 1):
    items = list(items)
    if columns <= 1:
        st.markdown("\n".join(f"- {it}" for it in items))
        return
    cols = st.columns(columns)
    for i, col in enumerate(cols):
        chunk = items[i::columns]
        if chunk:
            col.markdown("\n".join(f"- {it}" for it in chunk))


def pill_row(labels: Iterable[str]):
    html = "".join(f"<span class='pill'>{label}</span>" for label in labels)
    st.markdown(html, unsafe_allow_html=True)


def static_table(rows: Sequence[Sequence[str]], headers: Sequence[str]):
    """Render a read-only table from row tuples."""
    df = pd.DataFrame(list(rows), columns=list(headers))
    st.table(df.set_index(headers[0]))
