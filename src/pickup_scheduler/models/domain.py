"""Domain models for pickups and scheduling policy snapshots."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional

ORGANIC = "organic"
INORGANIC = "inorganic"
HAZARDOUS = "hazardous"
PICKUP_KINDS: tuple[str, ...] = (ORGANIC, INORGANIC, HAZARDOUS)

PENDING = "pending"
CONFIRMED = "confirmed"
REJECTED = "rejected"
COMPLETED = "completed"
PICKUP_STATUSES: tuple[str, ...] = (PENDING, CONFIRMED, REJECTED, COMPLETED)

DEFAULT_KEY = "default"

BOGOTA_LOCALITIES: tuple[str, ...] = (
    "Usaquén",
    "Chapinero",
    "Santa Fe",
    "San Cristóbal",
    "Usme",
    "Tunjuelito",
    "Bosa",
    "Kennedy",
    "Fontibón",
    "Engativá",
    "Suba",
    "Barrios Unidos",
    "Teusaquillo",
    "Los Mártires",
    "Antonio Nariño",
    "Puente Aranda",
    "La Candelaria",
    "Rafael Uribe Uribe",
    "Ciudad Bolívar",
    "Sumapaz",
)

# slot label -> start hour
TIME_SLOTS: dict[str, int] = {
    "08:00 - 12:00": 8,
    "12:00 - 16:00": 12,
    "16:00 - 20:00": 16,
}


def _frozen_mapping(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


@dataclass(slots=True)
class Pickup:
    """A scheduled or completed waste-collection event."""

    id: str
    scheduled_at: datetime
    kind: str
    locality: str
    requested_by: Optional[str] = None
    status: str = PENDING
    collected_weight_kg: Optional[float] = None
    archived: bool = False
    staff: Optional[str] = None
    staff_username: Optional[str] = None
    address: Optional[str] = None
    time_slot: Optional[str] = None

    @property
    def effective_weight_kg(self) -> Optional[float]:
        """Collected weight, only meaningful for inorganic pickups."""
        if self.kind != INORGANIC:
            return None
        return self.collected_weight_kg


@dataclass(slots=True, frozen=True)
class PickupCandidate:
    """A proposed pickup already resolved to a concrete date and time."""

    kind: str
    locality: str
    scheduled_at: datetime


@dataclass(frozen=True)
class PointsFormula:
    base_points: Mapping[str, int]
    inorganic_weight_multiplier: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_points", _frozen_mapping(self.base_points))


@dataclass(frozen=True)
class OrganicRules:
    weekday_by_locality: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekday_by_locality", _frozen_mapping(self.weekday_by_locality))


@dataclass(frozen=True)
class InorganicRules:
    max_per_week: int
    min_hours_between: float


@dataclass(frozen=True)
class HazardousRules:
    max_per_week_per_user: int
    capacity_by_locality: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "capacity_by_locality", _frozen_mapping(self.capacity_by_locality))


@dataclass(frozen=True)
class FrequencyRules:
    organic: OrganicRules
    inorganic: InorganicRules
    hazardous: HazardousRules


def default_points_formula() -> PointsFormula:
    return PointsFormula(
        base_points={ORGANIC: 50, INORGANIC: 40, HAZARDOUS: 120},
        inorganic_weight_multiplier=6,
    )


def default_frequency_rules() -> FrequencyRules:
    # weekdays: 0 = Sunday
    return FrequencyRules(
        organic=OrganicRules(
            weekday_by_locality={
                "Suba": 3,
                "Chapinero": 2,
                "Kennedy": 4,
                "Engativá": 1,
                "Fontibón": 5,
            }
        ),
        inorganic=InorganicRules(max_per_week=2, min_hours_between=24),
        hazardous=HazardousRules(
            max_per_week_per_user=1,
            capacity_by_locality={
                "Kennedy": 2,
                "Chapinero": 1,
                "Suba": 1,
                "Engativá": 1,
                "Fontibón": 1,
            },
        ),
    )
