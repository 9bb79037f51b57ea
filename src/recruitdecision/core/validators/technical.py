"""Technical test validation (typing, Excel, dictation, psychotechnical, analysis)."""

from __future__ import annotations

from typing import Any, Mapping

from ...schemas import Metier, TechnicalScores, TestKind
from ..metiers import DEFAULT_TABLE, TEST_CRITERIA, MetierTable, Threshold
from .base import ValidationResult, check_criteria

DEFAULT_PSYCHO_THRESHOLD = Threshold(minimum=3.0, scale=5.0, unit="/5")


class TechnicalValidator:
    """Compare WFM-entered test results with the métier's required tests.

    Tests the métier does not require are never looked at. A required test
    with no recorded result counts as failed.
    """

    method = "technical"

    def __init__(self, *, table: MetierTable | None = None) -> None:
        self._table = table or DEFAULT_TABLE

    def validate(
        self,
        metier: Metier | str,
        scores: TechnicalScores | Mapping[str, Any],
    ) -> ValidationResult:
        config = self._table.get(metier)
        values = TechnicalScores.model_validate(scores).model_dump()
        thresholds = [
            (criterion, config.threshold(criterion))
            for _, criterion in config.technical_criteria()
        ]
        return check_criteria(self.method, values, thresholds)


def validate_psychotechnical(
    scores: TechnicalScores | Mapping[str, Any],
    *,
    threshold: Threshold = DEFAULT_PSYCHO_THRESHOLD,
) -> ValidationResult:
    """Logical reasoning and attention/concentration must both reach 3/5."""
    values = TechnicalScores.model_validate(scores).model_dump()
    thresholds = [
        (criterion, threshold) for criterion in TEST_CRITERIA[TestKind.PSYCHOTECHNICAL]
    ]
    return check_criteria("psychotechnical", values, thresholds)
