"""Scheduling eligibility exports."""

from .lookup import resolve
from .service import process_validation_request, resolve_candidate
from .validator import DenialRule, ValidationResult, validate

__all__ = [
    "DenialRule",
    "ValidationResult",
    "process_validation_request",
    "resolve",
    "resolve_candidate",
    "validate",
]
