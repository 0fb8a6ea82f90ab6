"""Scheduling policy store exports."""

from functools import lru_cache

from ...config import settings
from .store import PolicyStore, build_policy_store


@lru_cache()
def get_policy_store() -> PolicyStore:
    """Get the process-wide policy store, loading the policy file if configured."""
    return build_policy_store(settings.policy_file)


__all__ = ["PolicyStore", "build_policy_store", "get_policy_store"]
