# src/config.py
from zoneinfo import ZoneInfo
import os
from pathlib import Path

# ----------------- Settings -----------------
TIMEZONE = ZoneInfo("Africa/Johannesburg")   # log timestamps only
AREA = "capetown-11-plumstead"   # <<<<<<<<<<<<<<<<<< AREA ID
BASE_DIR = Path(__file__).parent.parent.absolute()

SOURCE_JSON = os.path.join(BASE_DIR, "out", f"{AREA}.json")

LOG_FILE = os.path.join(BASE_DIR, "logs", "full_log.log")

# ----------------- Refresh -----------------
UPDATE_INTERVAL = 60 * 30   # 30 minutes
RETRY_DELAY = 60 * 30       # 30 minutes

# ----------------- Display -----------------
WRAPPER_CLASSES = "thin xlarge bright pre-line"
AREA_CLASSES = "bright small bold align-left"
PERIOD_CLASSES = "normal small regular align-left"
WINDOWS_CLASSES = "bright medium bold align-left"
WINDOW_SEPARATOR = ", "
