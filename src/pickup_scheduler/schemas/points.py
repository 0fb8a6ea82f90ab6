"""Points API schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .pickups import PickupModel


class PickupPointsRequest(BaseModel):
    pickup: PickupModel


class PickupPointsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pickup_id: str = Field(..., alias="pickupId")
    points: int


class RequesterPointsRequest(BaseModel):
    pickups: List[PickupModel]
    requester: str


class CollectorPointsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pickups: List[PickupModel]
    collector_username: str = Field(..., alias="collectorUsername")


class PointsTotalResponse(BaseModel):
    subject: str
    points: int


class LeaderboardRequest(BaseModel):
    pickups: List[PickupModel]
    limit: Optional[int] = Field(default=None, gt=0, description="Maximum number of entries to return")


class LeaderboardEntry(BaseModel):
    requester: str
    points: int
    pickups: int
