"""Shared result types for phase validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from ..metiers import CRITERION_LABELS, Threshold


@dataclass(slots=True)
class CriterionCheck:
    """Outcome of comparing one criterion against its threshold."""

    criterion: str
    required: float
    unit: str
    actual: float | None
    passed: bool

    @property
    def label(self) -> str:
        return CRITERION_LABELS.get(self.criterion, self.criterion)

    def message(self) -> str:
        minimum = f"{self.required:g}"
        if self.unit.startswith("/"):
            return f"{self.label} doit être ≥ {minimum}{self.unit}"
        if self.unit == "%":
            return f"{self.label} doit être ≥ {minimum}%"
        return f"{self.label} doit être ≥ {minimum} {self.unit}"


@dataclass(slots=True)
class ValidationResult:
    """Validator verdict listing every failed criterion."""

    method: str
    valid: bool
    failed_criteria: list[str] = field(default_factory=list)
    details: list[CriterionCheck] = field(default_factory=list)

    def messages(self) -> list[str]:
        return [check.message() for check in self.details if not check.passed]


def check_criteria(
    method: str,
    values: Mapping[str, Any],
    thresholds: Iterable[tuple[str, Threshold]],
) -> ValidationResult:
    """Compare each criterion; a missing value fails its criterion."""
    details: list[CriterionCheck] = []
    for criterion, threshold in thresholds:
        actual = values.get(criterion)
        details.append(
            CriterionCheck(
                criterion=criterion,
                required=threshold.minimum,
                unit=threshold.unit,
                actual=None if actual is None else float(actual),
                passed=threshold.passes(actual),
            )
        )
    failed = [check.criterion for check in details if not check.passed]
    return ValidationResult(
        method=method,
        valid=not failed,
        failed_criteria=failed,
        details=details,
    )
