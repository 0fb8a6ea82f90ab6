"""Route group exports."""

from . import health, pickups, points, policy

__all__ = ["health", "pickups", "points", "policy"]
