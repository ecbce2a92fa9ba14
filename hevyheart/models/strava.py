from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class StravaActivity(BaseModel):
    """Subset of fields returned by the Strava activity list endpoint."""

    id: int
    name: str = ""
    type: str = ""
    start_date: Optional[datetime] = None
    elapsed_time: int = 0
    has_heartrate: bool = False
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None


class StravaDetailedActivity(StravaActivity):
    calories: Optional[float] = None


class StravaHeartRateStream(BaseModel):
    data: List[float] = Field(default_factory=list)
    series_type: str = ""
    original_size: int = 0
    resolution: str = ""


class StravaAthlete(BaseModel):
    id: int
    firstname: str = ""
    lastname: str = ""


class StravaTokenResponse(BaseModel):
    access_token: str
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None
    athlete: Optional[StravaAthlete] = None
