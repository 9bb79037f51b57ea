"""Jury roster and per-member submissions."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .enums import JuryRoleType, Metier, PhaseDecision
from .scores import FIVE_POINT_MAX


class JuryMember(BaseModel):
    """Jury member attending a recruitment session."""

    id: int
    full_name: str = ""
    role_type: JuryRoleType = JuryRoleType.DRH
    specialite: Metier | None = None
    was_present: bool = True

    model_config = ConfigDict(extra="forbid")


class JuryScore(BaseModel):
    """One jury member's evaluation of a candidate for a given phase."""

    jury_member_id: int
    phase: int = Field(default=1, ge=1, le=2)
    voice_quality: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    verbal_communication: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    presentation_visuelle: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    appetence_digitale: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    sens_negociation: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    capacite_persuasion: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    sens_combativite: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    decision: PhaseDecision | None = None
    evaluated_at: datetime | None = None
    comments: str | None = None

    model_config = ConfigDict(extra="forbid")
