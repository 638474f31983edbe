"""Configuration for the Tampere gig listing."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict
from zoneinfo import ZoneInfo

# ---------------------------------------------------------------------------
# Source page
# ---------------------------------------------------------------------------
TARGET_URL = "https://kulttuuritoimitus.fi/konsertit-pirkanmaa/"

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
                  "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
}
REQUEST_TIMEOUT = 30  # seconds

# The h1 that tells us we're looking at the right page
ANCHOR_TITLE = "Konsertit | Tampere"
# Each venue gets its own heading of this level
SECTION_TAG = "h3"

# Dates on the page are local Finnish dates
HELSINKI_TZ = ZoneInfo("Europe/Helsinki")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PACKAGE_DIR = Path(__file__).resolve().parent

# Relative to the working directory the build is run from
OUTPUT_DIR = Path("public")
INDEX_PATH = OUTPUT_DIR / "index.html"
LOG_DIR = Path("logs")

TEMPLATE_PATH = PACKAGE_DIR / "template.html"
VENUE_ICONS_PATH = PACKAGE_DIR / "venue_icons.json"


@lru_cache(maxsize=None)
def load_venue_icons(path: Path = VENUE_ICONS_PATH) -> Dict[str, str]:
    """Load the venue name → icon table. Keys must match headings exactly."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return {str(name): str(icon) for name, icon in data.items()}
