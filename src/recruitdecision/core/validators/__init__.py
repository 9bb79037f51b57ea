"""Phase validators and their default-table shortcuts."""

from __future__ import annotations

from typing import Any, Mapping

from ...schemas import FaceToFaceAverages, Metier, SimulationAverages, TechnicalScores
from ..metiers import DEFAULT_TABLE
from .base import CriterionCheck, ValidationResult, check_criteria
from .face_to_face import FaceToFaceValidator
from .simulation import SimulationValidator
from .technical import TechnicalValidator, validate_psychotechnical

_face_to_face = FaceToFaceValidator(table=DEFAULT_TABLE)
_simulation = SimulationValidator(table=DEFAULT_TABLE)
_technical = TechnicalValidator(table=DEFAULT_TABLE)


def validate_face_to_face(
    metier: Metier | str,
    averages: FaceToFaceAverages | Mapping[str, Any],
) -> ValidationResult:
    return _face_to_face.validate(metier, averages)


def validate_simulation(
    averages: SimulationAverages | Mapping[str, Any],
) -> ValidationResult:
    return _simulation.validate(None, averages)


def validate_technical(
    metier: Metier | str,
    scores: TechnicalScores | Mapping[str, Any],
) -> ValidationResult:
    return _technical.validate(metier, scores)


__all__ = [
    "CriterionCheck",
    "FaceToFaceValidator",
    "SimulationValidator",
    "TechnicalValidator",
    "ValidationResult",
    "check_criteria",
    "validate_face_to_face",
    "validate_psychotechnical",
    "validate_simulation",
    "validate_technical",
]
