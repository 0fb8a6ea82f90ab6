"""Points calculator exports."""

from .calculator import (
    RequesterPoints,
    collector_points_for,
    leaderboard,
    points_for,
    total_points_for,
)
from .service import (
    compute_collector_points,
    compute_leaderboard,
    compute_pickup_points,
    compute_requester_points,
)

__all__ = [
    "RequesterPoints",
    "points_for",
    "total_points_for",
    "collector_points_for",
    "leaderboard",
    "compute_pickup_points",
    "compute_requester_points",
    "compute_collector_points",
    "compute_leaderboard",
]
