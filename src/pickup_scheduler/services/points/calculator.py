"""Gamification points for pickups."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ...models.domain import INORGANIC, PENDING, REJECTED, Pickup, PointsFormula


@dataclass(slots=True)
class RequesterPoints:
    requester: str
    points: int
    pickups: int


def _round_half_up(value: float) -> int:
    # half away from zero: 2.5 -> 3, -2.5 -> -3
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def points_for(pickup: Pickup, formula: PointsFormula) -> int:
    base = formula.base_points.get(pickup.kind) or 0
    if pickup.kind == INORGANIC:
        weight = pickup.effective_weight_kg or 0
        return max(0, _round_half_up(base + weight * formula.inorganic_weight_multiplier))
    return max(0, _round_half_up(base))


def _counts_for_requester(pickup: Pickup) -> bool:
    return not pickup.archived and pickup.status != REJECTED


def total_points_for(pickups: Iterable[Pickup], requester: Optional[str], formula: PointsFormula) -> int:
    """Sum of points over a requester's non-archived, non-rejected pickups.

    Pending and confirmed pickups accrue points exactly like completed ones.
    """
    return sum(
        points_for(pickup, formula)
        for pickup in pickups
        if _counts_for_requester(pickup) and pickup.requested_by == requester
    )


def _normalize_username(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def collector_points_for(pickups: Iterable[Pickup], collector_username: str, formula: PointsFormula) -> int:
    """Sum of points over pickups assigned to a collector and already accepted.

    Both pending and rejected pickups are left out. This is stricter than the
    older collector listing, which skipped only pending pickups and so still
    credited rejected assignments.
    """
    username = _normalize_username(collector_username)
    if not username:
        return 0
    return sum(
        points_for(pickup, formula)
        for pickup in pickups
        if not pickup.archived
        and pickup.status not in (PENDING, REJECTED)
        and _normalize_username(pickup.staff_username) == username
    )


def leaderboard(
    pickups: Iterable[Pickup],
    formula: PointsFormula,
    *,
    limit: int | None = None,
) -> list[RequesterPoints]:
    totals: dict[str, RequesterPoints] = {}
    for pickup in pickups:
        if not _counts_for_requester(pickup) or not pickup.requested_by:
            continue
        entry = totals.setdefault(pickup.requested_by, RequesterPoints(pickup.requested_by, 0, 0))
        entry.points += points_for(pickup, formula)
        entry.pickups += 1

    ranked = sorted(totals.values(), key=lambda item: (-item.points, item.requester))
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
