"""
This package provides the reusable UI components for the Streamlit site.

It is organized into several modules, each containing a specific category of components:
- `base`: Brand CSS and small content primitives (section cards, lists, pills, tables).
- `chrome`: The header with navigation, the hero and the footer.
- `contact_form`: The contact block shown at the bottom of every page.
- `seo`: Document metadata injection.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    section_card,
    bullet_list,
    pill_row,
    static_table,
)

from .chrome import (
    render_header,
    render_hero,
    render_footer,
)

from .seo import (
    apply_page_meta,
)

from . import contact_form
