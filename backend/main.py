# file: backend/main.py

import logging
import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import List, Optional

from backend.config import CORS_ORIGINS, PORT, RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_MESSAGE, RATE_LIMIT_WINDOW_SECONDS
from backend.mapbox_api import GeocodingError, GeocodingNotConfigured, forward_geocode, reverse_geocode
from backend.models import Place
from backend.rate_limit import RateLimiter

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

limiter = RateLimiter(RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS)

app = FastAPI(
    title = "Air Quality Monitor - geocoding proxy",
    description = "Forwards geocoding requests to Mapbox so the access token stays on the server.",
    version = "0.1"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins = CORS_ORIGINS,
    allow_methods = ["GET"],
    allow_headers = ["*"],
)


async def rate_limited(request: Request) -> None:
    """Reject the request with 429 once the client has used up its window."""
    client = request.client.host if request.client else "unknown"
    allowed, retry_after = limiter.hit(client)
    if not allowed:
        raise HTTPException(status_code=429, detail=RATE_LIMIT_MESSAGE, headers={"Retry-After": str(retry_after)})


@app.get("/api/geocode", response_model=List[Place], dependencies=[Depends(rate_limited)])
async def geocode(
    q: str = Query(..., min_length=1, max_length=100, description="Free-text place name"),
    limit: int = Query(5, ge=1, le=10, description="Maximum number of candidates")
):
    """Resolve a place name to coordinates."""
    logging.info(f"Geocoding {q!r}")
    try:
        return await forward_geocode(q, limit)
    except GeocodingNotConfigured as e:
        raise HTTPException(status_code=503, detail=str(e))
    except GeocodingError as e:
        logging.error(f"Error geocoding {q!r}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch data")


@app.get("/api/mapbox", dependencies=[Depends(rate_limited)])
async def mapbox(
    lat: Optional[float] = Query(None, ge=-90, le=90, description="Latitude"),
    lon: Optional[float] = Query(None, ge=-180, le=180, description="Longitude")
):
    """Reverse geocode a coordinate pair; the Mapbox response is passed through unchanged."""
    if lat is None or lon is None:
        return JSONResponse(status_code=400, content={"error": "Missing coordinates"})
    try:
        return await reverse_geocode(lat, lon)
    except GeocodingNotConfigured as e:
        return JSONResponse(status_code=503, content={"error": str(e)})
    except GeocodingError as e:
        logging.error(f"Error fetching data from Mapbox: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch data"})


if __name__ == "__main__" :
    uvicorn.run(app, host = "0.0.0.0", port = PORT, log_level="info")
