#file: frontend/utils.py

from datetime import datetime

import pandas as pd
import pytz


def get_current_time() -> datetime:
    """Get current UTC time as an aware datetime."""
    return datetime.now(pytz.utc)


def format_time(timestamp: datetime) -> str:
    """Format a timestamp the way the cards and chart tooltips show it."""
    return timestamp.strftime("%H:%M:%S")


def readings_to_frame(readings) :
    """Convert readings into a DataFrame sorted by observation time."""
    if not readings :
        return pd.DataFrame()

    df = pd.DataFrame([reading.model_dump() for reading in readings])
    df["observed_at"] = pd.to_datetime(df["observed_at"], utc = True)
    df = df.sort_values(by = "observed_at").reset_index(drop = True)

    return df
