"""
This module contains centralized constants used throughout the site,
ensuring a single source of truth for navigation, branding and form copy.
"""

from domain.models import NavItem

# Navigation order is the order of the header buttons.
NAV = [
    NavItem("home", "Home"),
    NavItem("looks", "What Coaching Looks Like"),
    NavItem("tools", "Tools"),
    NavItem("assess", "Assessments"),
    NavItem("icf", "ICF Competencies"),
    NavItem("compare", "Teams vs Groups"),
]

ROUTE_KEYS = tuple(n.key for n in NAV)
DEFAULT_ROUTE = "home"

BRAND = {
    "name": "Melissa Pagar Team Coaching",
    "tagline": "From potential → performance",
    "colors": {
        "primary": "#7a2131",  # burgundy
        "accent": "#c7a34b",  # soft gold
        "dark": "#0f0f10",
        "light": "#faf8f7",
    },
    "fonts": {
        "head": "'Playfair Display', ui-serif, Georgia, serif",
        "body": "Inter, ui-sans-serif, system-ui, -apple-system, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif",
    },
}

DEFAULT_DESCRIPTION = (
    "Practical, ethical team coaching for high‑trust, high‑performance teams—"
    "grounded in ICF competencies."
)

# Contact form
CONTACT_FIELDS = ("name", "email", "company", "team_size", "message")
REQUIRED_FIELDS = ("name", "email", "message")

FIELD_LABELS = {
    "name": "Name*",
    "email": "Email*",
    "company": "Company",
    "team_size": "Team size",
    "message": "Message*",
}

SUBMIT_LABEL = "Send Message"
SUBMITTING_LABEL = "Sending…"
SUCCESS_MESSAGE = "Thanks! I’ll reply shortly."
ERROR_MESSAGE = "Please complete required fields or try again."
