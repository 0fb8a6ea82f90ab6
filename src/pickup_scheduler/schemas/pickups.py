"""Pydantic request/response models for pickup endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models.domain import Pickup


class PickupModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    scheduled_at: datetime = Field(..., alias="scheduledAt")
    kind: str
    locality: str
    requested_by: Optional[str] = Field(None, alias="requestedBy")
    status: Literal["pending", "confirmed", "rejected", "completed"] = "pending"
    collected_weight_kg: Optional[float] = Field(None, ge=0.0, alias="collectedWeightKg")
    archived: bool = False
    staff: Optional[str] = None
    staff_username: Optional[str] = Field(None, alias="staffUsername")
    address: Optional[str] = None
    time_slot: Optional[str] = Field(None, alias="timeSlot")

    def to_domain(self) -> Pickup:
        return Pickup(
            id=self.id,
            scheduled_at=self.scheduled_at,
            kind=self.kind,
            locality=self.locality,
            requested_by=self.requested_by,
            status=self.status,
            collected_weight_kg=self.collected_weight_kg,
            archived=self.archived,
            staff=self.staff,
            staff_username=self.staff_username,
            address=self.address,
            time_slot=self.time_slot,
        )


class CandidateModel(BaseModel):
    """Proposed pickup, given either as ``scheduledAt`` or as ``date`` plus ``timeSlot``."""

    model_config = ConfigDict(populate_by_name=True)

    kind: str
    locality: str
    scheduled_at: Optional[datetime] = Field(None, alias="scheduledAt")
    day: Optional[date] = Field(None, alias="date")
    time_slot: Optional[str] = Field(None, alias="timeSlot")

    @model_validator(mode="after")
    def _require_moment(self) -> "CandidateModel":
        if self.scheduled_at is None and (self.day is None or self.time_slot is None):
            raise ValueError("Provide either scheduledAt or both date and timeSlot.")
        return self


class ValidationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    candidate: CandidateModel
    pickups: List[PickupModel] = Field(default_factory=list, description="Currently known pickups.")
    requester: Optional[str] = Field(None, description="Identity scoping per-user limits.")
    exclude_pickup_id: Optional[str] = Field(
        None,
        alias="excludePickupId",
        description="Id of the pickup being edited, ignored during evaluation.",
    )


class ValidationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    valid: bool
    reason: Optional[str] = None
    rule: Optional[str] = None
    scheduled_at: datetime = Field(..., alias="scheduledAt")
