"""High-level orchestration for pickup eligibility requests."""

from __future__ import annotations

import logging
from datetime import date

from ...config import settings
from ...models.domain import FrequencyRules, PickupCandidate
from ...schemas.pickups import CandidateModel, ValidationRequest, ValidationResponse
from .calendar import local_today, resolve_time_slot, to_local
from .validator import validate


def resolve_candidate(model: CandidateModel, tz_name: str | None = None) -> PickupCandidate:
    """Turn the request candidate into a local-time candidate.

    ``scheduledAt`` wins over ``date`` + ``timeSlot`` when both are present.
    """
    if model.scheduled_at is not None:
        scheduled_at = model.scheduled_at
    else:
        scheduled_at = resolve_time_slot(model.day, model.time_slot)
    return PickupCandidate(
        kind=model.kind,
        locality=model.locality,
        scheduled_at=to_local(scheduled_at, tz_name),
    )


def process_validation_request(
    payload: ValidationRequest,
    rules: FrequencyRules,
    *,
    today: date | None = None,
) -> ValidationResponse:
    """Evaluate a request against ``rules``; ``today`` defaults to the local date."""
    tz_name = settings.timezone
    if today is None:
        today = local_today(tz_name)
    candidate = resolve_candidate(payload.candidate, tz_name)

    pickups = []
    for item in payload.pickups:
        pickup = item.to_domain()
        pickup.scheduled_at = to_local(pickup.scheduled_at, tz_name)
        pickups.append(pickup)

    result = validate(
        candidate,
        pickups,
        payload.requester,
        rules,
        exclude_pickup_id=payload.exclude_pickup_id,
        today=today,
    )
    if result.valid:
        logging.debug(f"Pickup allowed: {candidate.kind} in {candidate.locality} at {candidate.scheduled_at.isoformat()}")
    else:
        logging.info(
            f"Pickup denied ({result.rule.value}) for requester '{payload.requester}': "
            f"{candidate.kind} in {candidate.locality} at {candidate.scheduled_at.isoformat()}"
        )

    return ValidationResponse(
        valid=result.valid,
        reason=result.reason,
        rule=result.rule.value if result.rule else None,
        scheduled_at=candidate.scheduled_at,
    )
