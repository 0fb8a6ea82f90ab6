"""Per-locality policy lookups with a shared fallback key."""

from __future__ import annotations

from typing import Mapping, Optional, TypeVar

from ...models.domain import DEFAULT_KEY

T = TypeVar("T")


def resolve(
    mapping: Mapping[str, T],
    key: str,
    *,
    fallback_key: str = DEFAULT_KEY,
    floor: Optional[T] = None,
) -> Optional[T]:
    """Return ``mapping[key]``, else ``mapping[fallback_key]``, else ``floor``.

    ``floor`` is ``None`` for rules that stop constraining when unconfigured.
    """
    value = mapping.get(key)
    if value is not None:
        return value
    value = mapping.get(fallback_key)
    if value is not None:
        return value
    return floor
