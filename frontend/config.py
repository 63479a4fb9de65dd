#file: frontend/config.py

import os
from dotenv import load_dotenv

from frontend.models import Location

load_dotenv()

WAQI_API_URL = os.getenv("WAQI_API_URL", "https://api.waqi.info").rstrip("/")
WAQI_TOKEN = os.getenv("WAQI_TOKEN", "")
PROXY_URL = os.getenv("PROXY_URL", "http://localhost:5000").rstrip("/")

REFRESH_INTERVAL_SECONDS = int(os.getenv("REFRESH_INTERVAL_SECONDS", "300"))
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))

# Used when the user has not searched for a place yet
DEFAULT_LOCATION = Location(latitude = 51.5074, longitude = -0.1278, name = "London")
