from domain.constants import BRAND, DEFAULT_DESCRIPTION
from services.seo import build_page_meta, page_title, meta_attribute


def test_home_title_is_brand_name():
    assert page_title("home") == BRAND['name']
    assert page_title("__unknown__") == BRAND['name']


def test_page_title_includes_label():
    assert page_title("compare") == "Teams vs Groups • Melissa Pagar Team Coaching"


def test_meta_tags_cover_social_previews():
    meta = build_page_meta("tools")
    assert meta.route == "tools"
    assert meta.description == DEFAULT_DESCRIPTION
    assert meta.tags["og:title"] == meta.title == meta.tags["twitter:title"]
    assert meta.tags["og:type"] == "website"
    assert meta.tags["twitter:card"] == "summary_large_image"
    assert meta.tags["og:image"] == meta.tags["twitter:image"] == meta.image


def test_meta_overrides():
    meta = build_page_meta("icf", description="Custom", image="https://example.com/x.png")
    assert meta.tags["description"] == "Custom"
    assert meta.tags["og:image"] == "https://example.com/x.png"


def test_meta_attribute():
    assert meta_attribute("og:title") == "property"
    assert meta_attribute("twitter:card") == "name"
    assert meta_attribute("description") == "name"
