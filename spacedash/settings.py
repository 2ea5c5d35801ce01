# spacedash/settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Project .env first; real environment variables still win
load_dotenv(PROJECT_ROOT / ".env", override=False)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./spacedash.sqlite3")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s :: %(message)s")

# Row caps for the list endpoints (same defaults as the legacy PHP routes)
TELEMETRY_LIMIT = int(os.getenv("TELEMETRY_LIMIT", "20"))
ISS_HISTORY_LIMIT = int(os.getenv("ISS_HISTORY_LIMIT", "10"))
ISS_TREND_LIMIT = int(os.getenv("ISS_TREND_LIMIT", "240"))

# Astro events table shows at most this many rows; the raw JSON keeps everything
EVENTS_DISPLAY_LIMIT = int(os.getenv("EVENTS_DISPLAY_LIMIT", "200"))
