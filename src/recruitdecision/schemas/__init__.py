"""Pydantic schema definitions and enums shared across the engine."""

from __future__ import annotations

from .candidate import CandidateRecord
from .enums import (
    Availability,
    FinalDecision,
    JuryRoleType,
    Metier,
    Phase1Outcome,
    PhaseDecision,
    PresenceStatus,
    TestKind,
)
from .jury import JuryMember, JuryScore
from .scores import FaceToFaceAverages, SimulationAverages, TechnicalScores

__all__ = [
    "Availability",
    "CandidateRecord",
    "FaceToFaceAverages",
    "FinalDecision",
    "JuryMember",
    "JuryRoleType",
    "JuryScore",
    "Metier",
    "Phase1Outcome",
    "PhaseDecision",
    "PresenceStatus",
    "SimulationAverages",
    "TechnicalScores",
    "TestKind",
]
