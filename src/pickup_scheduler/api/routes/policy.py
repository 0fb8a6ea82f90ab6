"""Administrative endpoints for the scheduling policy."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.policy import FrequencyRulesModel, PointsFormulaModel, PolicyDocument
from ...services.policy import PolicyStore, get_policy_store

router = APIRouter(prefix="/config", tags=["config"])


@router.get("/points-formula", response_model=PointsFormulaModel)
def get_points_formula(store: PolicyStore = Depends(get_policy_store)) -> PointsFormulaModel:
    return PointsFormulaModel.from_domain(store.points_formula)


@router.put("/points-formula", response_model=PointsFormulaModel)
def put_points_formula(
    payload: PointsFormulaModel,
    store: PolicyStore = Depends(get_policy_store),
) -> PointsFormulaModel:
    try:
        updated = store.replace_points_formula(payload.to_domain())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except OSError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save policy: {str(exc)}",
        ) from exc
    return PointsFormulaModel.from_domain(updated)


@router.get("/frequency-rules", response_model=FrequencyRulesModel)
def get_frequency_rules(store: PolicyStore = Depends(get_policy_store)) -> FrequencyRulesModel:
    return FrequencyRulesModel.from_domain(store.frequency_rules)


@router.put("/frequency-rules", response_model=FrequencyRulesModel)
def put_frequency_rules(
    payload: FrequencyRulesModel,
    store: PolicyStore = Depends(get_policy_store),
) -> FrequencyRulesModel:
    try:
        updated = store.replace_frequency_rules(payload.to_domain())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except OSError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save policy: {str(exc)}",
        ) from exc
    return FrequencyRulesModel.from_domain(updated)


@router.post("/reset", response_model=PolicyDocument)
def reset_policy(store: PolicyStore = Depends(get_policy_store)) -> PolicyDocument:
    """Restore the default points formula and frequency rules."""
    try:
        store.reset()
    except OSError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save policy: {str(exc)}",
        ) from exc
    return store.to_document()
