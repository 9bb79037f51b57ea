"""Phase 1 face-to-face validation."""

from __future__ import annotations

from typing import Any, Mapping

from ...schemas import FaceToFaceAverages, Metier
from ..metiers import DEFAULT_TABLE, MetierTable
from .base import ValidationResult, check_criteria


class FaceToFaceValidator:
    """Check averaged jury criteria against the métier's face-to-face thresholds.

    Voice quality and verbal communication are scored for every métier.
    Présentation visuelle and appétence digitale only count when the métier
    requires them; a value supplied for another métier is ignored.
    """

    method = "face_to_face"

    def __init__(self, *, table: MetierTable | None = None) -> None:
        self._table = table or DEFAULT_TABLE

    def validate(
        self,
        metier: Metier | str,
        averages: FaceToFaceAverages | Mapping[str, Any],
    ) -> ValidationResult:
        config = self._table.get(metier)
        scores = FaceToFaceAverages.model_validate(averages).model_dump()
        thresholds = [
            (criterion, config.threshold(criterion))
            for criterion in config.face_to_face_criteria()
        ]
        return check_criteria(self.method, scores, thresholds)
