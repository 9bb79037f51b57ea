"""Core decision engine components."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .aggregation import aggregate_face_to_face, aggregate_simulation, average, round_score
from .decision import DecisionEngine, DecisionResult, evaluate, is_auto_eliminated
from .metiers import (
    DEFAULT_TABLE,
    MetierConfig,
    MetierConfigError,
    MetierTable,
    Threshold,
    get_config,
)
from .unlock import SimulationUnlockStatus, check_simulation_unlock
from .validators import (
    FaceToFaceValidator,
    SimulationValidator,
    TechnicalValidator,
    ValidationResult,
    validate_face_to_face,
    validate_psychotechnical,
    validate_simulation,
    validate_technical,
)


@runtime_checkable
class MetierValidator(Protocol):
    """Validator contract for métier-dependent phases."""

    method: str

    def validate(self, metier: Any, scores: Mapping[str, Any]) -> ValidationResult:
        """Return the validation verdict for the given métier and scores."""


__all__ = [
    "DEFAULT_TABLE",
    "DecisionEngine",
    "DecisionResult",
    "FaceToFaceValidator",
    "MetierConfig",
    "MetierConfigError",
    "MetierTable",
    "MetierValidator",
    "SimulationUnlockStatus",
    "SimulationValidator",
    "TechnicalValidator",
    "Threshold",
    "ValidationResult",
    "aggregate_face_to_face",
    "aggregate_simulation",
    "average",
    "check_simulation_unlock",
    "evaluate",
    "get_config",
    "is_auto_eliminated",
    "round_score",
    "validate_face_to_face",
    "validate_psychotechnical",
    "validate_simulation",
    "validate_technical",
]
