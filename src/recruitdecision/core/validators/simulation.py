"""Phase 2 sales simulation validation."""

from __future__ import annotations

from typing import Any, Mapping

from ...schemas import Metier, SimulationAverages, TestKind
from ..metiers import TEST_CRITERIA, MetierTable, Threshold
from .base import ValidationResult, check_criteria

DEFAULT_SIMULATION_THRESHOLD = Threshold(minimum=3.0, scale=5.0, unit="/5")


class SimulationValidator:
    """All three simulation criteria must reach their minimum."""

    method = "simulation"

    def __init__(self, *, table: MetierTable | None = None) -> None:
        self._table = table

    def validate(
        self,
        metier: Metier | str | None,
        averages: SimulationAverages | Mapping[str, Any],
    ) -> ValidationResult:
        """Check the averages against the métier thresholds, or 3/5 when metier is None."""
        scores = SimulationAverages.model_validate(averages).model_dump()
        return check_criteria(self.method, scores, self._thresholds(metier))

    def _thresholds(self, metier: Metier | str | None) -> list[tuple[str, Threshold]]:
        criteria = TEST_CRITERIA[TestKind.SIMULATION]
        if metier is None or self._table is None:
            return [(criterion, DEFAULT_SIMULATION_THRESHOLD) for criterion in criteria]
        config = self._table.get(metier)
        return [
            (criterion, config.thresholds.get(criterion, DEFAULT_SIMULATION_THRESHOLD))
            for criterion in criteria
        ]
