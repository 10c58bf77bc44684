"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(
    os.environ.get("DB_PATH", str(PROJECT_ROOT / "data" / "db" / "matse-calendar.db"))
)

# =============================================================================
# UPSTREAM SCHEDULE API
# =============================================================================

UPSTREAM_BASE_URL = "https://www.matse.itc.rwth-aachen.de/stundenplan/web/eventFeed/"
UPSTREAM_TIMEOUT_SECONDS = float(os.environ.get("UPSTREAM_TIMEOUT_SECONDS", "30"))

# Naive upstream timestamps are wall-clock times in this zone
LOCAL_TIMEZONE = "Europe/Berlin"

# Fetch results are reused for 15 minutes
CACHE_TTL_SECONDS = 900

# =============================================================================
# TRACKS (academic years)
# =============================================================================

TRACKS = (1, 2, 3, 4)
TRACK_LABELS = {
    1: "1st year",
    2: "2nd year",
    3: "3rd year",
    4: "Elective",
}

# =============================================================================
# CALENDAR OUTPUT
# =============================================================================

ICS_DATE_FORMAT = "%Y%m%dT%H%M%SZ"
UID_DOMAIN = "matse.morbatex.com"
CALENDAR_PRODID = "-//morbatex/calendar/matse"
CALENDAR_VERSION = "2.0"
CALENDAR_FILENAME = "calendar.ics"
CALENDAR_MEDIA_TYPE = "text/calendar"

CATEGORY_LECTURE = "LECTURE"
CATEGORY_EXERCISE = "Exercise"
CATEGORY_HOLIDAY = "Holiday"

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
REQUEST_LOG_ENABLED = os.environ.get("REQUEST_LOG_ENABLED", "true").lower() == "true"
API_VERSION = "1.0.0"
