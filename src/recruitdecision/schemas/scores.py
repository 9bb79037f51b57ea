"""Score records handed to the decision engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

FIVE_POINT_MAX = 5.0
DICTATION_MAX = 20.0
PERCENT_MAX = 100.0


class FaceToFaceAverages(BaseModel):
    """Phase 1 criteria averaged across jury members."""

    voice_quality: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    verbal_communication: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    presentation_visuelle: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    appetence_digitale: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)

    model_config = ConfigDict(extra="forbid", frozen=True)


class SimulationAverages(BaseModel):
    """Phase 2 sales simulation criteria averaged across jury members."""

    sens_negociation: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    capacite_persuasion: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    sens_combativite: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)

    model_config = ConfigDict(extra="forbid", frozen=True)


class TechnicalScores(BaseModel):
    """Single WFM-entered technical test results."""

    typing_speed: float | None = Field(default=None, ge=0)
    typing_accuracy: float | None = Field(default=None, ge=0, le=PERCENT_MAX)
    excel_test: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    dictation: float | None = Field(default=None, ge=0, le=DICTATION_MAX)
    psycho_raisonnement_logique: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    psycho_attention_concentration: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)
    analysis_exercise: float | None = Field(default=None, ge=0, le=FIVE_POINT_MAX)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def is_empty(self) -> bool:
        """Return True when no test result has been entered yet."""
        return all(value is None for value in self.model_dump().values())
