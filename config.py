"""Site configuration, loaded from environment variables (optionally via .env)."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")

# Artificial latency of the placeholder form submission
SUBMIT_DELAY_SECONDS = float(os.environ.get("SUBMIT_DELAY_SECONDS", "0.6"))


def _log_level(raw: str) -> str:
    """Known level names pass through; anything else falls back to INFO."""
    name = (raw or "").strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


LOG_LEVEL = _log_level(os.environ.get("LOG_LEVEL", "INFO"))

# Social preview image used for og:image / twitter:image
SOCIAL_IMAGE_URL = os.environ.get(
    "SOCIAL_IMAGE_URL",
    "https://dummyimage.com/1200x630/7a2131/c7a34b&text=Melissa+Pagar+Team+Coaching",
)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging():
    # Streamlit reruns the script on every event; basicConfig is a no-op once handlers exist.
    logging.basicConfig(level=LOG_LEVEL, format=_LOG_FORMAT)
