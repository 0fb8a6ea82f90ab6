"""Process-wide holder of the points formula and frequency rules."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from ...models.domain import (
    FrequencyRules,
    PointsFormula,
    default_frequency_rules,
    default_points_formula,
)
from ...persistence.filesystem import FileStorage
from ...schemas.policy import FrequencyRulesModel, PointsFormulaModel, PolicyDocument


def _check_points_formula(formula: PointsFormula) -> PointsFormula:
    if not isinstance(formula, PointsFormula):
        raise ValueError(f"Expected PointsFormula, got {type(formula).__name__}")
    try:
        PointsFormulaModel.from_domain(formula)
    except ValidationError as exc:
        raise ValueError(f"Invalid points formula: {exc}") from exc
    return formula


def _check_frequency_rules(rules: FrequencyRules) -> FrequencyRules:
    if not isinstance(rules, FrequencyRules):
        raise ValueError(f"Expected FrequencyRules, got {type(rules).__name__}")
    try:
        FrequencyRulesModel.from_domain(rules)
    except ValidationError as exc:
        raise ValueError(f"Invalid frequency rules: {exc}") from exc
    return rules


class PolicyStore:
    """Owns the current policy snapshots.

    Snapshots are immutable; updates build a new snapshot and swap it in under
    a lock, so readers always see a complete policy.
    """

    def __init__(self, storage: Optional[FileStorage] = None) -> None:
        self._lock = threading.Lock()
        self._storage = storage
        self._points_formula = default_points_formula()
        self._frequency_rules = default_frequency_rules()
        if storage is not None:
            self._load()

    @property
    def points_formula(self) -> PointsFormula:
        return self._points_formula

    @property
    def frequency_rules(self) -> FrequencyRules:
        return self._frequency_rules

    def update_points_formula(self, updater: Callable[[PointsFormula], PointsFormula]) -> PointsFormula:
        with self._lock:
            updated = _check_points_formula(updater(self._points_formula))
            self._save(updated, self._frequency_rules)
            self._points_formula = updated
        logging.info(f"Points formula updated: {dict(updated.base_points)}, multiplier={updated.inorganic_weight_multiplier}")
        return updated

    def update_frequency_rules(self, updater: Callable[[FrequencyRules], FrequencyRules]) -> FrequencyRules:
        with self._lock:
            updated = _check_frequency_rules(updater(self._frequency_rules))
            self._save(self._points_formula, updated)
            self._frequency_rules = updated
        logging.info("Frequency rules updated")
        return updated

    def replace_points_formula(self, formula: PointsFormula) -> PointsFormula:
        return self.update_points_formula(lambda _previous: formula)

    def replace_frequency_rules(self, rules: FrequencyRules) -> FrequencyRules:
        return self.update_frequency_rules(lambda _previous: rules)

    def reset(self) -> None:
        formula = default_points_formula()
        rules = default_frequency_rules()
        with self._lock:
            self._save(formula, rules)
            self._points_formula = formula
            self._frequency_rules = rules
        logging.info("Scheduling policy reset to defaults")

    def to_document(self) -> PolicyDocument:
        return _document(self._points_formula, self._frequency_rules)

    def _load(self) -> None:
        if not self._storage.exists():
            logging.info(f"Policy file {self._storage.path} not found, using defaults")
            return
        try:
            document = PolicyDocument.model_validate(self._storage.read_json())
        except (OSError, ValueError) as exc:
            logging.warning(f"Failed to load policy file {self._storage.path}: {exc}. Using defaults.")
            return
        self._points_formula = document.points_formula.to_domain()
        self._frequency_rules = document.frequency_rules.to_domain()
        logging.info(f"Loaded scheduling policy from {self._storage.path}")

    def _save(self, formula: PointsFormula, rules: FrequencyRules) -> None:
        # callers swap the snapshot in only after this returns
        if self._storage is None:
            return
        self._storage.write_json(_document(formula, rules).model_dump(by_alias=True))


def _document(formula: PointsFormula, rules: FrequencyRules) -> PolicyDocument:
    return PolicyDocument(
        points_formula=PointsFormulaModel.from_domain(formula),
        frequency_rules=FrequencyRulesModel.from_domain(rules),
    )


def build_policy_store(policy_file: Optional[Path] = None) -> PolicyStore:
    storage = FileStorage(policy_file) if policy_file else None
    return PolicyStore(storage=storage)
