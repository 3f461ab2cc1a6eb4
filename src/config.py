"""
Engine configuration.
All settings via environment variables with sensible defaults.
"""
import os
from pathlib import Path

# --- Service ---
SERVICE_NAME = os.environ.get("POWERTOOLS_SERVICE_NAME", "periodka-engine")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# --- Content ---
DATA_DIR = Path(__file__).resolve().parent / "data"
DAILY_CONTENT_PATH = Path(os.environ.get("DAILY_CONTENT_PATH", str(DATA_DIR / "daily_content.json")))

# --- Cycle defaults ---
DEFAULT_CYCLE_LENGTH = int(os.environ.get("DEFAULT_CYCLE_LENGTH", "28"))
DEFAULT_PERIOD_LENGTH = int(os.environ.get("DEFAULT_PERIOD_LENGTH", "5"))

# Days of history a user may edit before today
HISTORY_WINDOW_DAYS = int(os.environ.get("HISTORY_WINDOW_DAYS", "90"))
