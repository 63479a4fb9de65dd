#file: backend/models.py

from pydantic import BaseModel, Field

class Place(BaseModel):
    name: str = Field(..., description="Full place name as returned by the geocoder")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")
