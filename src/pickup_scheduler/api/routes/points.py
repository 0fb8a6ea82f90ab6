"""API routes for gamification points."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...schemas.points import (
    CollectorPointsRequest,
    LeaderboardEntry,
    LeaderboardRequest,
    PickupPointsRequest,
    PickupPointsResponse,
    PointsTotalResponse,
    RequesterPointsRequest,
)
from ...services.points import (
    compute_collector_points,
    compute_leaderboard,
    compute_pickup_points,
    compute_requester_points,
)
from ...services.policy import PolicyStore, get_policy_store

router = APIRouter(prefix="/points", tags=["points"])


@router.post("/pickup", response_model=PickupPointsResponse, status_code=status.HTTP_200_OK)
def pickup_points(
    payload: PickupPointsRequest,
    store: PolicyStore = Depends(get_policy_store),
) -> PickupPointsResponse:
    return compute_pickup_points(payload, store.points_formula)


@router.post("/requester", response_model=PointsTotalResponse, status_code=status.HTTP_200_OK)
def requester_points(
    payload: RequesterPointsRequest,
    store: PolicyStore = Depends(get_policy_store),
) -> PointsTotalResponse:
    """Total points for a citizen; rejected and archived pickups are excluded."""
    return compute_requester_points(payload, store.points_formula)


@router.post("/collector", response_model=PointsTotalResponse, status_code=status.HTTP_200_OK)
def collector_points(
    payload: CollectorPointsRequest,
    store: PolicyStore = Depends(get_policy_store),
) -> PointsTotalResponse:
    return compute_collector_points(payload, store.points_formula)


@router.post("/leaderboard", response_model=list[LeaderboardEntry], status_code=status.HTTP_200_OK)
def points_leaderboard(
    payload: LeaderboardRequest,
    store: PolicyStore = Depends(get_policy_store),
) -> list[LeaderboardEntry]:
    return compute_leaderboard(payload, store.points_formula)
