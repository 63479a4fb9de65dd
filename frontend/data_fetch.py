#file: frontend/data_fetch.py

import aiohttp
import asyncio
import logging

from frontend.config import PROXY_URL, REQUEST_TIMEOUT_SECONDS
from frontend.errors import NetworkFailure, NotFound
from frontend.models import Location


async def _get_json(url, params):
    """GET a proxy route and return its JSON body, raising NetworkFailure on any failure."""
    timeout = aiohttp.ClientTimeout(total = REQUEST_TIMEOUT_SECONDS)
    async with aiohttp.ClientSession(timeout = timeout) as session:
        try:
            async with session.get(url, params = params) as response:
                if response.status >= 400:
                    detail = await _error_detail(response)
                    logging.error(f"[ERROR] HTTP {response.status} from {url}: {detail}")
                    raise NetworkFailure(detail or f"HTTP {response.status}")
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logging.error(f"[ERROR] Network request failed: {e}")
            raise NetworkFailure(str(e)) from e


async def _error_detail(response):
    try:
        body = await response.json(content_type = None)
    except (aiohttp.ContentTypeError, ValueError):
        return await response.text()
    if isinstance(body, dict):
        return body.get("detail") or body.get("error")
    return None


async def fetch_location(query):
    """Resolve a place name to a Location through the geocoding proxy."""
    query = (query or "").strip()
    if not query:
        raise NotFound()

    places = await _get_json(f"{PROXY_URL}/api/geocode", {"q": query, "limit": 1})
    if not places:
        logging.info(f"No geocoding results for {query!r}")
        raise NotFound(f"Location not found: {query}")

    place = places[0]
    return Location(latitude = place["latitude"], longitude = place["longitude"], name = place.get("name"))


async def fetch_place_name(location):
    """Reverse geocode a Location to a display name, or None when the proxy has nothing."""
    data = await _get_json(f"{PROXY_URL}/api/mapbox", {"lat": location.latitude, "lon": location.longitude})
    features = data.get("features") if isinstance(data, dict) else None
    if not features:
        return None
    return features[0].get("place_name")
