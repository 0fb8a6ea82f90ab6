"""API routes for pickup eligibility checks."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.pickups import ValidationRequest, ValidationResponse
from ...services.policy import PolicyStore, get_policy_store
from ...services.scheduling import process_validation_request

router = APIRouter(prefix="/pickups", tags=["pickups"])


@router.post("/validate", response_model=ValidationResponse, status_code=status.HTTP_200_OK)
def validate_pickup(
    payload: ValidationRequest,
    store: PolicyStore = Depends(get_policy_store),
) -> ValidationResponse:
    """Check a proposed pickup against the current frequency rules.

    A denial is a normal 200 response with ``valid`` set to false; callers must
    not persist the pickup in that case.
    """
    try:
        return process_validation_request(payload, store.frequency_rules)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
