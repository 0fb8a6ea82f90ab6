"""Request handling for points endpoints."""

from __future__ import annotations

from ...models.domain import PointsFormula
from ...schemas.points import (
    CollectorPointsRequest,
    LeaderboardEntry,
    LeaderboardRequest,
    PickupPointsRequest,
    PickupPointsResponse,
    PointsTotalResponse,
    RequesterPointsRequest,
)
from .calculator import collector_points_for, leaderboard, points_for, total_points_for


def compute_pickup_points(payload: PickupPointsRequest, formula: PointsFormula) -> PickupPointsResponse:
    pickup = payload.pickup.to_domain()
    return PickupPointsResponse(pickup_id=pickup.id, points=points_for(pickup, formula))


def compute_requester_points(payload: RequesterPointsRequest, formula: PointsFormula) -> PointsTotalResponse:
    pickups = [item.to_domain() for item in payload.pickups]
    return PointsTotalResponse(
        subject=payload.requester,
        points=total_points_for(pickups, payload.requester, formula),
    )


def compute_collector_points(payload: CollectorPointsRequest, formula: PointsFormula) -> PointsTotalResponse:
    pickups = [item.to_domain() for item in payload.pickups]
    return PointsTotalResponse(
        subject=payload.collector_username,
        points=collector_points_for(pickups, payload.collector_username, formula),
    )


def compute_leaderboard(payload: LeaderboardRequest, formula: PointsFormula) -> list[LeaderboardEntry]:
    pickups = [item.to_domain() for item in payload.pickups]
    ranked = leaderboard(pickups, formula, limit=payload.limit)
    return [
        LeaderboardEntry(requester=entry.requester, points=entry.points, pickups=entry.pickups)
        for entry in ranked
    ]
