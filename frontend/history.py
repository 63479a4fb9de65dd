#file: frontend/history.py
"""
Synthetic 24-hour history.

The WAQI feed only exposes the current observation. The trend chart is fed
with points made up from that single reading by adding random jitter to the
index. These are an approximation for display, not measured history.
"""

import random
from datetime import datetime, timedelta
from typing import List

from frontend.models import Location, Reading
from frontend.utils import get_current_time
from frontend.waqi_api import fetch_air_quality

JITTER = 10


def synthesize_history(current: Reading, rng = None, now: datetime | None = None, hours: int = 24) -> List[Reading]:
    """
    Build ``hours + 1`` hourly readings ending at ``now``, oldest first.

    Each point copies ``current`` with the index moved by a random integer in
    [-JITTER, JITTER] and floored at 0. Pass a seeded ``random.Random`` as
    ``rng`` to get a reproducible sequence.
    """
    rng = rng or random.Random()
    now = now or get_current_time()

    history = []
    for offset in range(hours, -1, -1) :
        variation = rng.randint(-JITTER, JITTER)
        history.append(current.model_copy(update = {
            "index": max(0, current.index + variation),
            "observed_at": now - timedelta(hours = offset),
        }))
    return history


def fetch_history(location: Location, token: str | None, rng = None) -> List[Reading]:
    """Fetch the current reading and derive the synthetic history from it."""
    current = fetch_air_quality(location, token)
    return synthesize_history(current, rng = rng)
