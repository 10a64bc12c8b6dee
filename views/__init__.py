"""View modules for manual routing.

The site uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each page lives under `views/` and exposes a `view()`
function that renders static content followed by the shared contact block.

Add any new page as a module with a `view()` callable, add its key to
`domain.constants.NAV` and register it in `PAGE_REGISTRY` inside `app.py`.
"""
