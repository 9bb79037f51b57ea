"""Candidate evaluation input as read by the batch pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import Availability, Metier, PresenceStatus
from .jury import JuryScore
from .scores import TechnicalScores


class CandidateRecord(BaseModel):
    """Snapshot of everything needed to decide on one candidate."""

    candidate_id: str
    metier: Metier
    availability: Availability = Availability.OUI
    presence: PresenceStatus = PresenceStatus.PRESENT
    jury_scores: list[JuryScore] = Field(default_factory=list)
    technical: TechnicalScores | None = None
    name: str | None = None
    notes: str | None = None

    model_config = ConfigDict(extra="allow")
