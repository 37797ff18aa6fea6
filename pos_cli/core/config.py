# pos_cli/core/config.py
from pathlib import Path
import os

# Base URL of the POS backend
BASE_URL = os.environ.get("POS_URL", "http://localhost:8000")

# Seconds before an API call is abandoned
TIMEOUT = float(os.environ.get("POS_TIMEOUT", "10"))

# Local folder for CLI data (session token, etc.)
APP_DIR = Path(os.environ.get("POS_HOME", Path.home() / ".pos_backend"))

SESSION_FILE = APP_DIR / "session.json"
