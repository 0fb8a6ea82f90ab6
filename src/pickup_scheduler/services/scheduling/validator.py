"""Frequency-policy eligibility checks for pickup requests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Optional

from ...models.domain import HAZARDOUS, FrequencyRules, Pickup, PickupCandidate
from .calendar import hours_between, week_window, weekday_index, weekday_label
from .lookup import resolve

# hazardous capacity when neither the locality nor the default is configured
HAZARDOUS_CAPACITY_FLOOR = 1


class DenialRule(str, Enum):
    lead_time = "lead_time"
    organic_weekday = "organic_weekday"
    inorganic_weekly_cap = "inorganic_weekly_cap"
    inorganic_spacing = "inorganic_spacing"
    hazardous_user_cap = "hazardous_user_cap"
    hazardous_locality_capacity = "hazardous_locality_capacity"


@dataclass(slots=True, frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None
    rule: Optional[DenialRule] = None

    @classmethod
    def allow(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def deny(cls, rule: DenialRule, reason: str) -> "ValidationResult":
        return cls(valid=False, reason=reason, rule=rule)


def _check_lead_time(candidate: PickupCandidate, today: date) -> ValidationResult:
    if candidate.scheduled_at.date() > today:
        return ValidationResult.allow()
    return ValidationResult.deny(
        DenialRule.lead_time,
        "Pickups must be scheduled for a date after today.",
    )


def _check_organic(candidate: PickupCandidate, rules: FrequencyRules) -> ValidationResult:
    assigned = resolve(rules.organic.weekday_by_locality, candidate.locality)
    if assigned is None or weekday_index(candidate.scheduled_at) == assigned:
        return ValidationResult.allow()
    return ValidationResult.deny(
        DenialRule.organic_weekday,
        f"Organic pickups in {candidate.locality} can only be scheduled on {weekday_label(assigned)}.",
    )


def _check_inorganic(
    candidate: PickupCandidate,
    user_week_pickups: list[Pickup],
    rules: FrequencyRules,
) -> ValidationResult:
    policy = rules.inorganic
    if len(user_week_pickups) >= policy.max_per_week:
        return ValidationResult.deny(
            DenialRule.inorganic_weekly_cap,
            f"You can only schedule {policy.max_per_week} inorganic pickups per week.",
        )

    has_conflict = any(
        hours_between(pickup.scheduled_at, candidate.scheduled_at) < policy.min_hours_between
        for pickup in user_week_pickups
    )
    if has_conflict:
        return ValidationResult.deny(
            DenialRule.inorganic_spacing,
            f"Inorganic pickups must be at least {policy.min_hours_between:g} hours apart.",
        )
    return ValidationResult.allow()


def _check_hazardous(
    candidate: PickupCandidate,
    pickups_same_week: list[Pickup],
    user_week_pickups: list[Pickup],
    rules: FrequencyRules,
) -> ValidationResult:
    policy = rules.hazardous
    if len(user_week_pickups) >= policy.max_per_week_per_user:
        return ValidationResult.deny(
            DenialRule.hazardous_user_cap,
            f"You can only schedule {policy.max_per_week_per_user} hazardous waste pickup(s) per week.",
        )

    capacity = resolve(
        policy.capacity_by_locality,
        candidate.locality,
        floor=HAZARDOUS_CAPACITY_FLOOR,
    )
    locality_count = sum(
        1
        for pickup in pickups_same_week
        if pickup.kind == HAZARDOUS and pickup.locality == candidate.locality
    )
    if locality_count >= capacity:
        return ValidationResult.deny(
            DenialRule.hazardous_locality_capacity,
            f"Hazardous waste slots in {candidate.locality} are full for this week.",
        )
    return ValidationResult.allow()


def validate(
    candidate: PickupCandidate,
    existing_pickups: Iterable[Pickup],
    requester: Optional[str],
    rules: FrequencyRules,
    exclude_pickup_id: Optional[str] = None,
    today: Optional[date] = None,
) -> ValidationResult:
    """Decide whether ``candidate`` may be scheduled for ``requester``.

    Archived pickups and the pickup identified by ``exclude_pickup_id`` (the
    record being edited) are ignored. When ``today`` is given, the candidate must
    fall on a later calendar day. All datetimes must share one calendar,
    either all naive local time or all aware.
    """
    if today is not None:
        lead_time = _check_lead_time(candidate, today)
        if not lead_time.valid:
            return lead_time

    relevant = [
        pickup
        for pickup in existing_pickups
        if not pickup.archived and (exclude_pickup_id is None or pickup.id != exclude_pickup_id)
    ]
    week_start, week_end = week_window(candidate.scheduled_at)
    pickups_same_week = [pickup for pickup in relevant if week_start <= pickup.scheduled_at < week_end]
    user_week_pickups = [
        pickup
        for pickup in pickups_same_week
        if pickup.kind == candidate.kind and pickup.requested_by == requester
    ]

    match candidate.kind:
        case "organic":
            return _check_organic(candidate, rules)
        case "inorganic":
            return _check_inorganic(candidate, user_week_pickups, rules)
        case "hazardous":
            return _check_hazardous(candidate, pickups_same_week, user_week_pickups, rules)
        case _:
            return ValidationResult.allow()
