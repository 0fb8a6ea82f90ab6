from datetime import date, datetime

import pytest

from pickup_scheduler.models.domain import (
    FrequencyRules,
    HazardousRules,
    InorganicRules,
    OrganicRules,
    Pickup,
    PickupCandidate,
    default_frequency_rules,
)
from pickup_scheduler.services.scheduling import DenialRule, validate

# 2025-09-22 is a Monday
MONDAY = datetime(2025, 9, 22, 8, 0)


def _pickup(
    pid: str,
    scheduled_at: datetime,
    kind: str = "inorganic",
    locality: str = "Suba",
    requested_by: str = "Ana",
    **extra,
) -> Pickup:
    return Pickup(
        id=pid,
        scheduled_at=scheduled_at,
        kind=kind,
        locality=locality,
        requested_by=requested_by,
        **extra,
    )


def _rules(
    weekdays: dict | None = None,
    max_per_week: int = 2,
    min_hours_between: float = 24,
    max_per_user: int = 1,
    capacity: dict | None = None,
) -> FrequencyRules:
    return FrequencyRules(
        organic=OrganicRules(weekday_by_locality=weekdays or {}),
        inorganic=InorganicRules(max_per_week=max_per_week, min_hours_between=min_hours_between),
        hazardous=HazardousRules(max_per_week_per_user=max_per_user, capacity_by_locality=capacity or {}),
    )


@pytest.mark.parametrize("day,expected", [(22, False), (23, False), (24, True), (25, False), (28, False)])
def test_organic_weekday_gate(day: int, expected: bool):
    rules = _rules(weekdays={"Suba": 3})
    candidate = PickupCandidate(kind="organic", locality="Suba", scheduled_at=datetime(2025, 9, day, 12, 0))

    result = validate(candidate, [], "Ana", rules)

    assert result.valid is expected


def test_organic_denial_names_locality_and_weekday():
    candidate = PickupCandidate(kind="organic", locality="Suba", scheduled_at=datetime(2025, 9, 23, 8, 0))

    result = validate(candidate, [], "Ana", _rules(weekdays={"Suba": 3}))

    assert result.rule is DenialRule.organic_weekday
    assert "Suba" in result.reason
    assert "Wednesday" in result.reason


def test_organic_gate_ignores_existing_pickups():
    existing = [_pickup(f"pk-{i}", MONDAY, kind="organic") for i in range(5)]
    candidate = PickupCandidate(kind="organic", locality="Suba", scheduled_at=datetime(2025, 9, 24, 8, 0))

    assert validate(candidate, existing, "Ana", _rules(weekdays={"Suba": 3})).valid


def test_organic_without_assignment_is_allowed_any_day():
    rules = _rules(weekdays={"Suba": 3})
    for day in range(22, 29):
        candidate = PickupCandidate(kind="organic", locality="Bosa", scheduled_at=datetime(2025, 9, day, 8, 0))
        assert validate(candidate, [], "Ana", rules).valid


def test_organic_default_weekday_applies_to_unlisted_locality():
    rules = _rules(weekdays={"Suba": 3, "default": 5})

    friday = PickupCandidate(kind="organic", locality="Bosa", scheduled_at=datetime(2025, 9, 26, 8, 0))
    thursday = PickupCandidate(kind="organic", locality="Bosa", scheduled_at=datetime(2025, 9, 25, 8, 0))

    assert validate(friday, [], "Ana", rules).valid
    denied = validate(thursday, [], "Ana", rules)
    assert not denied.valid
    assert "Friday" in denied.reason


def test_sunday_assignment_uses_index_zero():
    rules = _rules(weekdays={"Usme": 0})
    candidate = PickupCandidate(kind="organic", locality="Usme", scheduled_at=datetime(2025, 9, 28, 16, 0))

    assert validate(candidate, [], "Ana", rules).valid


def test_inorganic_weekly_cap_and_archive_release():
    rules = _rules(max_per_week=2)
    existing = [
        _pickup("pk-1", MONDAY),
        _pickup("pk-2", datetime(2025, 9, 24, 8, 0)),
    ]
    candidate = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=datetime(2025, 9, 26, 8, 0))

    denied = validate(candidate, existing, "Ana", rules)
    assert not denied.valid
    assert denied.rule is DenialRule.inorganic_weekly_cap

    existing[0].archived = True
    assert validate(candidate, existing, "Ana", rules).valid


def test_inorganic_cap_is_per_requester():
    rules = _rules(max_per_week=2)
    existing = [
        _pickup("pk-1", MONDAY, requested_by="Luis"),
        _pickup("pk-2", datetime(2025, 9, 24, 8, 0), requested_by="Luis"),
    ]
    candidate = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=datetime(2025, 9, 26, 8, 0))

    assert validate(candidate, existing, "Ana", rules).valid


def test_inorganic_previous_week_does_not_count():
    # Sunday 20:00 is twelve hours before Monday 08:00 but belongs to the previous week
    existing = [_pickup("pk-1", datetime(2025, 9, 21, 20, 0))]
    candidate = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=MONDAY)

    assert validate(candidate, existing, "Ana", _rules(max_per_week=1)).valid


def test_inorganic_spacing_boundary():
    rules = _rules(min_hours_between=24)
    existing = [_pickup("pk-1", MONDAY)]

    too_close = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=datetime(2025, 9, 23, 7, 59))
    exactly = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=datetime(2025, 9, 23, 8, 0))

    denied = validate(too_close, existing, "Ana", rules)
    assert not denied.valid
    assert denied.rule is DenialRule.inorganic_spacing
    assert "24 hours" in denied.reason
    assert validate(exactly, existing, "Ana", rules).valid


def test_inorganic_spacing_detects_conflict_before_existing_pickup():
    existing = [_pickup("pk-1", datetime(2025, 9, 24, 8, 0))]
    candidate = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=datetime(2025, 9, 23, 8, 1))

    result = validate(candidate, existing, "Ana", _rules())

    assert result.rule is DenialRule.inorganic_spacing


def test_inorganic_spacing_ignores_other_kinds():
    existing = [_pickup("pk-1", MONDAY, kind="hazardous")]
    candidate = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=datetime(2025, 9, 22, 10, 0))

    assert validate(candidate, existing, "Ana", _rules()).valid


def test_hazardous_per_user_cap_regardless_of_locality():
    rules = _rules(max_per_user=1, capacity={"Kennedy": 5, "Suba": 5})
    existing = [_pickup("pk-1", MONDAY, kind="hazardous", locality="Suba")]
    candidate = PickupCandidate(kind="hazardous", locality="Kennedy", scheduled_at=datetime(2025, 9, 25, 8, 0))

    result = validate(candidate, existing, "Ana", rules)

    assert not result.valid
    assert result.rule is DenialRule.hazardous_user_cap


def test_hazardous_locality_capacity_counts_all_requesters():
    rules = _rules(max_per_user=1, capacity={"Kennedy": 2})
    candidate = PickupCandidate(kind="hazardous", locality="Kennedy", scheduled_at=datetime(2025, 9, 25, 8, 0))

    existing: list[Pickup] = []
    assert validate(candidate, existing, "Ana", rules).valid
    existing.append(_pickup("pk-1", MONDAY, kind="hazardous", locality="Kennedy", requested_by="Ana"))

    assert validate(candidate, existing, "Luis", rules).valid
    existing.append(_pickup("pk-2", MONDAY, kind="hazardous", locality="Kennedy", requested_by="Luis"))

    denied = validate(candidate, existing, "Marta", rules)
    assert not denied.valid
    assert denied.rule is DenialRule.hazardous_locality_capacity
    assert "Kennedy" in denied.reason


def test_hazardous_capacity_defaults_and_floor():
    existing = [_pickup("pk-1", MONDAY, kind="hazardous", locality="Bosa", requested_by="Luis")]
    candidate = PickupCandidate(kind="hazardous", locality="Bosa", scheduled_at=datetime(2025, 9, 25, 8, 0))

    floor_only = validate(candidate, existing, "Ana", _rules(capacity={"Kennedy": 4}))
    assert floor_only.rule is DenialRule.hazardous_locality_capacity

    assert validate(candidate, existing, "Ana", _rules(capacity={"default": 3})).valid


def test_unknown_kind_is_allowed():
    rules = _rules(max_per_week=0, max_per_user=0)
    candidate = PickupCandidate(kind="electronic", locality="Suba", scheduled_at=MONDAY)

    assert validate(candidate, [_pickup("pk-1", MONDAY, kind="electronic")], "Ana", rules).valid


def test_edited_pickup_does_not_conflict_with_itself():
    existing = [_pickup("pk-1", MONDAY), _pickup("pk-2", datetime(2025, 9, 26, 8, 0), requested_by="Luis")]
    candidate = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=datetime(2025, 9, 22, 10, 0))

    assert not validate(candidate, existing, "Ana", _rules()).valid
    assert validate(candidate, existing, "Ana", _rules(), exclude_pickup_id="pk-1").valid


def test_validate_is_idempotent():
    rules = default_frequency_rules()
    existing = [
        _pickup("pk-1", MONDAY, kind="hazardous", locality="Kennedy", requested_by="Luis"),
        _pickup("pk-2", MONDAY, kind="hazardous", locality="Kennedy", requested_by="Marta"),
    ]
    candidate = PickupCandidate(kind="hazardous", locality="Kennedy", scheduled_at=datetime(2025, 9, 25, 8, 0))

    first = validate(candidate, existing, "Ana", rules)
    second = validate(candidate, existing, "Ana", rules)

    assert first == second
    assert first.rule is DenialRule.hazardous_locality_capacity


@pytest.mark.parametrize(
    "today,expected",
    [(date(2025, 9, 21), True), (date(2025, 9, 22), False), (date(2025, 9, 23), False)],
)
def test_lead_time_requires_a_later_day(today: date, expected: bool):
    candidate = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=MONDAY.replace(hour=20))

    result = validate(candidate, [], "Ana", _rules(), today=today)

    assert result.valid is expected
    if not expected:
        assert result.rule is DenialRule.lead_time


def test_lead_time_runs_before_kind_rules():
    rules = _rules(weekdays={"Suba": 3})
    candidate = PickupCandidate(kind="organic", locality="Suba", scheduled_at=MONDAY)

    result = validate(candidate, [], "Ana", rules, today=MONDAY.date())

    assert result.rule is DenialRule.lead_time


def test_lead_time_skipped_without_today():
    candidate = PickupCandidate(kind="inorganic", locality="Suba", scheduled_at=datetime(2000, 1, 3, 8, 0))

    assert validate(candidate, [], "Ana", _rules()).valid is True
