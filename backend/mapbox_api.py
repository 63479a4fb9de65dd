# file: backend/mapbox_api.py

import aiohttp
import asyncio
import logging
import ssl
from typing import Any, Dict, List
from urllib.parse import quote

import certifi

from backend.config import MAPBOX_API_URL, MAPBOX_TOKEN, REQUEST_TIMEOUT_SECONDS


class GeocodingError(Exception):
    """Mapbox could not be reached or answered with an error."""


class GeocodingNotConfigured(GeocodingError):
    """No Mapbox token is configured on the server."""


async def _fetch_places(search_text: str, params: Dict[str, Any]) -> Dict[str, Any]:
    if not MAPBOX_TOKEN:
        logging.error("MAPBOX_TOKEN is not set, cannot forward geocoding request")
        raise GeocodingNotConfigured("Geocoding service is not configured")

    url = f"{MAPBOX_API_URL}/{quote(search_text, safe=',')}.json"
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT_SECONDS)
    async with aiohttp.ClientSession(connector=aiohttp.TCPConnector(ssl=ssl_context), timeout=timeout) as session:
        try:
            async with session.get(url, params={"access_token": MAPBOX_TOKEN, **params}) as response:
                if response.status != 200:
                    logging.error(f"Mapbox returned HTTP {response.status} for {search_text!r}")
                    raise GeocodingError(f"Mapbox returned HTTP {response.status}")
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logging.error(f"Error fetching data from Mapbox: {e}")
            raise GeocodingError(str(e)) from e


def feature_to_place(feature: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a Mapbox feature into name/latitude/longitude."""
    longitude, latitude = feature["center"]
    return {
        "name": feature.get("place_name") or feature.get("text", ""),
        "latitude": latitude,
        "longitude": longitude,
    }


async def forward_geocode(query: str, limit: int = 5) -> List[Dict[str, Any]]:
    """Resolve free text to candidate places, best match first."""
    data = await _fetch_places(query, {"limit": limit})
    return [feature_to_place(feature) for feature in data.get("features", []) if feature.get("center")]


async def reverse_geocode(latitude: float, longitude: float) -> Dict[str, Any]:
    """Return Mapbox's raw reverse-geocoding response for a coordinate pair."""
    return await _fetch_places(f"{longitude},{latitude}", {})
