"""Document metadata (title, description, social preview tags) per route."""
from typing import Optional

import config
from domain.constants import BRAND, DEFAULT_DESCRIPTION, DEFAULT_ROUTE, NAV
from domain.models import PageMeta
from services.router import normalize_route

_LABELS = {n.key: n.label for n in NAV}


def page_title(route: Optional[str] = None) -> str:
    route = normalize_route(route)
    if route == DEFAULT_ROUTE:
        return BRAND['name']
    return f"{_LABELS[route]} • {BRAND['name']}"


def build_page_meta(route: Optional[str] = None, description: Optional[str] = None,
                    image: Optional[str] = None) -> PageMeta:
    route = normalize_route(route)
    title = page_title(route)
    desc = description or DEFAULT_DESCRIPTION
    img = image or config.SOCIAL_IMAGE_URL
    tags = {
        "description": desc,
        "og:title": title,
        "og:description": desc,
        "og:type": "website",
        "og:image": img,
        "twitter:card": "summary_large_image",
        "twitter:title": title,
        "twitter:description": desc,
        "twitter:image": img,
    }
    return PageMeta(title=title, description=desc, image=img, tags=tags, route=route)


def meta_attribute(tag_name: str) -> str:
    """Open Graph tags use ``property``; everything else uses ``name``."""
    return "property" if tag_name.startswith("og:") else "name"
