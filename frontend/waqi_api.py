#file: frontend/waqi_api.py

import logging
from datetime import datetime
from typing import Dict, Literal, Optional

import requests
from pydantic import BaseModel, Field, ValidationError, field_validator

from frontend.config import REQUEST_TIMEOUT_SECONDS, WAQI_API_URL
from frontend.errors import InvalidCredential, MalformedPayload, MissingCredential, NetworkFailure, ProviderError
from frontend.models import Location, Reading
from frontend.utils import get_current_time

FEED_OK = "ok"
INVALID_KEY_MESSAGE = "Invalid key"

# WAQI "iaqi" code -> Reading field
POLLUTANT_CODES = {
    "pm25": "particulate2_5",
    "pm10": "particulate10",
    "no2": "nitrogen_dioxide",
    "o3": "ozone",
    "co": "carbon_monoxide",
}


class PollutantValue(BaseModel):
    v: float = Field(..., ge=0)


class FeedTime(BaseModel):
    iso: Optional[datetime] = None

    @field_validator("iso", mode = "before")
    @classmethod
    def blank_as_missing(cls, value):
        return value or None


class FeedData(BaseModel):
    aqi: float = Field(..., ge=0)
    iaqi: Dict[str, PollutantValue] = Field(default_factory=dict)
    time: Optional[FeedTime] = None

    def pollutant(self, code: str) -> float:
        value = self.iaqi.get(code)
        return value.v if value is not None else 0


class FeedSuccess(BaseModel):
    status: Literal["ok"]
    data: FeedData


class FeedFailure(BaseModel):
    status: str
    message: str


def decode_feed_payload(payload) -> FeedSuccess | FeedFailure:
    """Split a raw feed response into its success or failure variant."""
    if not isinstance(payload, dict) :
        raise MalformedPayload(f"Expected a JSON object, got {type(payload).__name__}")

    if payload.get("status") == FEED_OK :
        try :
            return FeedSuccess.model_validate(payload)
        except ValidationError as e :
            logging.error(f"Malformed WAQI payload: {e}")
            raise MalformedPayload() from e

    message = payload.get("data")
    if not isinstance(message, str) or not message :
        message = ProviderError.default_message
    return FeedFailure(status = str(payload.get("status")), message = message)


def normalize_reading(payload, now: datetime | None = None) -> Reading:
    """
    Turn a WAQI feed response into a Reading.

    Pollutants missing from "iaqi" are reported as 0. The observation time is
    the provider's ISO timestamp when it sends one, otherwise ``now`` (the
    current UTC time by default).
    """
    feed = decode_feed_payload(payload)
    if isinstance(feed, FeedFailure) :
        logging.warning(f"WAQI returned status {feed.status!r}: {feed.message}")
        if feed.message == INVALID_KEY_MESSAGE :
            raise InvalidCredential(feed.message)
        raise ProviderError(feed.message)

    data = feed.data
    if data.time is not None and data.time.iso is not None :
        observed_at = data.time.iso
    else :
        observed_at = now or get_current_time()

    return Reading(
        index = data.aqi,
        observed_at = observed_at,
        **{field: data.pollutant(code) for code, field in POLLUTANT_CODES.items()}
    )


def fetch_air_quality(location: Location, token: str | None, timeout: float = REQUEST_TIMEOUT_SECONDS) -> Reading:
    """Fetch the current reading for a location from the WAQI feed."""
    if not token or not token.strip() :
        raise MissingCredential()

    url = f"{WAQI_API_URL}/feed/geo:{location.latitude};{location.longitude}/"
    try :
        response = requests.get(url, params = {"token": token.strip()}, timeout = timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e :
        logging.error(f"Error fetching air quality from WAQI: {e}")
        raise NetworkFailure(str(e)) from e

    return normalize_reading(payload)
