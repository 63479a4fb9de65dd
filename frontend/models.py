#file: frontend/models.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")
    name: Optional[str] = Field(None, description="Display name of the place")


class Reading(BaseModel):
    """One observation from the feed: the index plus individual pollutant values."""

    model_config = ConfigDict(frozen=True)

    index: float = Field(..., ge=0, description="Air quality index, unbounded upward")
    particulate2_5: float = Field(0, ge=0, description="PM2.5 sub-index")
    particulate10: float = Field(0, ge=0, description="PM10 sub-index")
    nitrogen_dioxide: float = Field(0, ge=0, description="NO2 sub-index")
    ozone: float = Field(0, ge=0, description="O3 sub-index")
    carbon_monoxide: float = Field(0, ge=0, description="CO sub-index")
    observed_at: datetime = Field(..., description="Time of the observation")


class AqiLabel(str, Enum):
    GOOD = "Good"
    MODERATE = "Moderate"
    UNHEALTHY_SENSITIVE = "UnhealthySensitive"
    UNHEALTHY = "Unhealthy"
    VERY_UNHEALTHY = "VeryUnhealthy"
    HAZARDOUS = "Hazardous"

    @property
    def display_name(self) -> str:
        return {
            AqiLabel.UNHEALTHY_SENSITIVE: "Unhealthy for Sensitive Groups",
            AqiLabel.VERY_UNHEALTHY: "Very Unhealthy",
        }.get(self, self.value)


class CategoryDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: AqiLabel
    severity_color: str = Field(..., description="Hex colour used for markers and gauges")
    description: str
    recommendation: str
