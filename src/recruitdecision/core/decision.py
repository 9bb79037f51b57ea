"""Decision composer: runs phase validators in order and derives the verdict."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import structlog

from ..schemas import (
    Availability,
    FaceToFaceAverages,
    FinalDecision,
    Metier,
    Phase1Outcome,
    PhaseDecision,
    PresenceStatus,
    SimulationAverages,
    TechnicalScores,
)
from .metiers import DEFAULT_TABLE, MetierTable
from .validators import FaceToFaceValidator, SimulationValidator, TechnicalValidator


@dataclass(slots=True)
class DecisionResult:
    """Phase and final decisions; None means not enough data yet."""

    phase1_decision: PhaseDecision | None = None
    phase2_decision: PhaseDecision | None = None
    technical_decision: PhaseDecision | None = None
    final_decision: FinalDecision | None = None
    phase1_outcome: Phase1Outcome | None = None
    failed_criteria: list[str] = field(default_factory=list)

    @property
    def is_pending(self) -> bool:
        return self.final_decision is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase1_decision": _value(self.phase1_decision),
            "phase2_decision": _value(self.phase2_decision),
            "technical_decision": _value(self.technical_decision),
            "final_decision": _value(self.final_decision),
            "phase1_outcome": _value(self.phase1_outcome),
            "failed_criteria": list(self.failed_criteria),
        }


def _value(member: Any) -> str | None:
    return None if member is None else member.value


class DecisionEngine:
    """Sequential state machine over presence, availability and the three phases."""

    def __init__(
        self,
        *,
        table: MetierTable | None = None,
        face_to_face: FaceToFaceValidator | None = None,
        simulation: SimulationValidator | None = None,
        technical: TechnicalValidator | None = None,
    ) -> None:
        self._table = table or DEFAULT_TABLE
        self._face_to_face = face_to_face or FaceToFaceValidator(table=self._table)
        self._simulation = simulation or SimulationValidator(table=self._table)
        self._technical = technical or TechnicalValidator(table=self._table)
        self._logger = structlog.get_logger(__name__)

    @property
    def table(self) -> MetierTable:
        return self._table

    def evaluate(
        self,
        metier: Metier | str,
        availability: Availability | str,
        presence: PresenceStatus | str,
        face_to_face: FaceToFaceAverages | Mapping[str, Any] | None = None,
        simulation: SimulationAverages | Mapping[str, Any] | None = None,
        technical: TechnicalScores | Mapping[str, Any] | None = None,
    ) -> DecisionResult:
        # Unknown métiers must fail before any short-circuit hides them.
        config = self._table.get(metier)
        availability = Availability(availability)
        presence = PresenceStatus(presence)
        log = self._logger.bind(metier=config.metier.value)

        if presence is PresenceStatus.ABSENT:
            log.debug("decision.absent")
            return DecisionResult(final_decision=FinalDecision.ABSENT)

        if availability is Availability.NON:
            log.debug("decision.unavailable")
            return DecisionResult(
                phase1_decision=PhaseDecision.DEFAVORABLE,
                technical_decision=PhaseDecision.DEFAVORABLE,
                final_decision=FinalDecision.NON_RECRUTE,
                phase1_outcome=Phase1Outcome.ELIMINE,
                failed_criteria=["availability"],
            )

        result = DecisionResult()

        if face_to_face is None:
            log.debug("decision.pending", waiting_for="face_to_face")
            return result
        phase1 = self._face_to_face.validate(config.metier, face_to_face)
        if not phase1.valid:
            result.phase1_decision = PhaseDecision.DEFAVORABLE
            result.phase1_outcome = Phase1Outcome.ELIMINE
            return self._reject(result, phase1.failed_criteria, log, phase="face_to_face")
        result.phase1_decision = PhaseDecision.FAVORABLE
        result.phase1_outcome = Phase1Outcome.ADMIS

        if config.requires_simulation:
            if simulation is None:
                log.debug("decision.pending", waiting_for="simulation")
                return result
            phase2 = self._simulation.validate(config.metier, simulation)
            if not phase2.valid:
                result.phase2_decision = PhaseDecision.DEFAVORABLE
                return self._reject(result, phase2.failed_criteria, log, phase="simulation")
            result.phase2_decision = PhaseDecision.FAVORABLE

        technical_scores = _technical_or_none(technical)
        if technical_scores is None:
            log.debug("decision.pending", waiting_for="technical")
            return result
        tests = self._technical.validate(config.metier, technical_scores)
        if not tests.valid:
            result.technical_decision = PhaseDecision.DEFAVORABLE
            return self._reject(result, tests.failed_criteria, log, phase="technical")

        result.technical_decision = PhaseDecision.FAVORABLE
        result.final_decision = FinalDecision.RECRUTE
        log.debug("decision.recruited")
        return result

    @staticmethod
    def _reject(
        result: DecisionResult,
        failed_criteria: list[str],
        log: Any,
        *,
        phase: str,
    ) -> DecisionResult:
        result.final_decision = FinalDecision.NON_RECRUTE
        result.failed_criteria = list(failed_criteria)
        log.debug("decision.rejected", phase=phase, failed_criteria=failed_criteria)
        return result


def _technical_or_none(
    technical: TechnicalScores | Mapping[str, Any] | None,
) -> TechnicalScores | None:
    if technical is None:
        return None
    scores = TechnicalScores.model_validate(technical)
    if scores.is_empty():
        return None
    return scores


def is_auto_eliminated(availability: Availability | str, face_to_face_valid: bool) -> bool:
    """A candidate is out without further tests if unavailable or failing Phase 1."""
    return Availability(availability) is Availability.NON or not face_to_face_valid


_DEFAULT_ENGINE = DecisionEngine()


def evaluate(
    metier: Metier | str,
    availability: Availability | str,
    presence: PresenceStatus | str,
    face_to_face: FaceToFaceAverages | Mapping[str, Any] | None = None,
    simulation: SimulationAverages | Mapping[str, Any] | None = None,
    technical: TechnicalScores | Mapping[str, Any] | None = None,
) -> DecisionResult:
    """Evaluate a candidate against the default métier table."""
    return _DEFAULT_ENGINE.evaluate(
        metier,
        availability,
        presence,
        face_to_face=face_to_face,
        simulation=simulation,
        technical=technical,
    )


__all__ = ["DecisionEngine", "DecisionResult", "evaluate", "is_auto_eliminated"]
