"""Health and reference-data endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...models.domain import BOGOTA_LOCALITIES, PICKUP_KINDS, TIME_SLOTS
from ...schemas.policy import LocalitiesResponse

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/localities", response_model=LocalitiesResponse)
def list_localities() -> LocalitiesResponse:
    return LocalitiesResponse(
        localities=list(BOGOTA_LOCALITIES),
        time_slots=list(TIME_SLOTS),
        kinds=list(PICKUP_KINDS),
    )
