"""Pydantic models for the points formula and frequency rules."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.domain import (
    FrequencyRules,
    HazardousRules,
    InorganicRules,
    OrganicRules,
    PointsFormula,
)


class PointsFormulaModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base_points: dict[str, int] = Field(..., alias="basePoints")
    inorganic_weight_multiplier: float = Field(..., ge=0.0, alias="inorganicWeightMultiplier")

    @field_validator("base_points")
    @classmethod
    def _non_negative_points(cls, value: dict[str, int]) -> dict[str, int]:
        negative = sorted(kind for kind, points in value.items() if points < 0)
        if negative:
            raise ValueError(f"base points must be >= 0 (got negative values for: {', '.join(negative)})")
        return value

    @classmethod
    def from_domain(cls, formula: PointsFormula) -> "PointsFormulaModel":
        return cls(
            base_points=dict(formula.base_points),
            inorganic_weight_multiplier=formula.inorganic_weight_multiplier,
        )

    def to_domain(self) -> PointsFormula:
        return PointsFormula(
            base_points=self.base_points,
            inorganic_weight_multiplier=self.inorganic_weight_multiplier,
        )


class OrganicRulesModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weekday_by_locality: dict[str, int] = Field(
        default_factory=dict,
        alias="weekdayByLocality",
        description="Locality (or 'default') to weekday, 0 = Sunday.",
    )

    @field_validator("weekday_by_locality")
    @classmethod
    def _weekday_range(cls, value: dict[str, int]) -> dict[str, int]:
        invalid = sorted(locality for locality, weekday in value.items() if not 0 <= weekday <= 6)
        if invalid:
            raise ValueError(f"weekday must be between 0 and 6 (invalid for: {', '.join(invalid)})")
        return value


class InorganicRulesModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    max_per_week: int = Field(..., ge=0, alias="maxPerWeek")
    min_hours_between: float = Field(..., ge=0.0, alias="minHoursBetween")


class HazardousRulesModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    max_per_week_per_user: int = Field(..., ge=0, alias="maxPerWeekPerUser")
    capacity_by_locality: dict[str, int] = Field(default_factory=dict, alias="capacityByLocality")

    @field_validator("capacity_by_locality")
    @classmethod
    def _non_negative_capacity(cls, value: dict[str, int]) -> dict[str, int]:
        invalid = sorted(locality for locality, capacity in value.items() if capacity < 0)
        if invalid:
            raise ValueError(f"capacity must be >= 0 (invalid for: {', '.join(invalid)})")
        return value


class FrequencyRulesModel(BaseModel):
    organic: OrganicRulesModel
    inorganic: InorganicRulesModel
    hazardous: HazardousRulesModel

    @classmethod
    def from_domain(cls, rules: FrequencyRules) -> "FrequencyRulesModel":
        return cls(
            organic=OrganicRulesModel(weekday_by_locality=dict(rules.organic.weekday_by_locality)),
            inorganic=InorganicRulesModel(
                max_per_week=rules.inorganic.max_per_week,
                min_hours_between=rules.inorganic.min_hours_between,
            ),
            hazardous=HazardousRulesModel(
                max_per_week_per_user=rules.hazardous.max_per_week_per_user,
                capacity_by_locality=dict(rules.hazardous.capacity_by_locality),
            ),
        )

    def to_domain(self) -> FrequencyRules:
        return FrequencyRules(
            organic=OrganicRules(weekday_by_locality=self.organic.weekday_by_locality),
            inorganic=InorganicRules(
                max_per_week=self.inorganic.max_per_week,
                min_hours_between=self.inorganic.min_hours_between,
            ),
            hazardous=HazardousRules(
                max_per_week_per_user=self.hazardous.max_per_week_per_user,
                capacity_by_locality=self.hazardous.capacity_by_locality,
            ),
        )


class PolicyDocument(BaseModel):
    """On-disk representation of the scheduling policy."""

    model_config = ConfigDict(populate_by_name=True)

    points_formula: PointsFormulaModel = Field(..., alias="pointsFormula")
    frequency_rules: FrequencyRulesModel = Field(..., alias="frequencyRules")


class LocalitiesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    localities: list[str]
    time_slots: list[str] = Field(..., alias="timeSlots")
    kinds: list[str]
