"""Whether the Phase 2 sales simulation can start for a candidate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import structlog

from ..schemas import FaceToFaceAverages, JuryMember, JuryRoleType, JuryScore, Metier
from .aggregation import aggregate_face_to_face
from .metiers import DEFAULT_TABLE, MetierTable
from .validators import FaceToFaceValidator

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class UnlockConditions:
    all_jurors_evaluated_phase1: bool = False
    all_averages_above_threshold: bool = False
    is_simulation_metier: bool = False


@dataclass(slots=True)
class JurorDecision:
    jury_member_id: int
    jury_member_name: str
    decision: str


@dataclass(slots=True)
class SimulationUnlockStatus:
    """Unlock verdict with the reasons it is still locked."""

    unlocked: bool
    conditions: UnlockConditions
    phase1_averages: FaceToFaceAverages | None = None
    phase1_decisions: list[JurorDecision] = field(default_factory=list)
    missing_jurors: list[JuryMember] = field(default_factory=list)
    missing_conditions: list[str] = field(default_factory=list)


def expected_jurors(metier: Metier, roster: Iterable[JuryMember]) -> list[JuryMember]:
    """Present jury members who must rate a candidate of ``metier``.

    Business representatives only rate candidates of their own specialty.
    """
    expected: list[JuryMember] = []
    for member in roster:
        if not member.was_present:
            continue
        if member.role_type is JuryRoleType.REPRESENTANT_METIER and member.specialite != metier:
            continue
        expected.append(member)
    return expected


def check_simulation_unlock(
    metier: Metier | str,
    roster: Iterable[JuryMember],
    submissions: Iterable[JuryScore],
    *,
    table: MetierTable | None = None,
) -> SimulationUnlockStatus:
    """Unlock requires every expected juror's Phase 1 and passing averages.

    Individual juror decisions are reported but never block the unlock; only
    the averages count.
    """
    table = table or DEFAULT_TABLE
    config = table.get(metier)
    log = logger.bind(metier=config.metier.value)

    if not config.requires_simulation:
        log.debug("simulation_unlock.not_applicable")
        return SimulationUnlockStatus(
            unlocked=False,
            conditions=UnlockConditions(),
            missing_conditions=["Métier ne nécessite pas de simulation"],
        )

    phase1 = [submission for submission in submissions if submission.phase == 1]
    members = list(roster)
    names = {member.id: member.full_name for member in members}
    expected = expected_jurors(config.metier, members)
    evaluated_ids = {submission.jury_member_id for submission in phase1}
    missing = [member for member in expected if member.id not in evaluated_ids]
    all_evaluated = bool(expected) and not missing

    averages = aggregate_face_to_face(phase1)
    failed_messages: list[str] = []
    if averages is None:
        averages_ok = False
    else:
        validation = FaceToFaceValidator(table=table).validate(config.metier, averages)
        averages_ok = validation.valid
        failed_messages = [
            f"{check.label}: {(check.actual or 0.0):.2f}/5 < {check.required:g}/5"
            for check in validation.details
            if not check.passed
        ]

    missing_conditions: list[str] = []
    if not all_evaluated:
        missing_conditions.append(
            f"{len(missing)} jury(s) n'ont pas encore noté la Phase 1"
        )
    if not averages_ok:
        detail = ", ".join(failed_messages) if failed_messages else "aucune note"
        missing_conditions.append(f"Moyennes insuffisantes: {detail}")

    unlocked = all_evaluated and averages_ok
    log.debug(
        "simulation_unlock.checked",
        unlocked=unlocked,
        expected=len(expected),
        evaluated=len(evaluated_ids),
    )

    return SimulationUnlockStatus(
        unlocked=unlocked,
        conditions=UnlockConditions(
            all_jurors_evaluated_phase1=all_evaluated,
            all_averages_above_threshold=averages_ok,
            is_simulation_metier=True,
        ),
        phase1_averages=averages,
        phase1_decisions=[
            JurorDecision(
                jury_member_id=submission.jury_member_id,
                jury_member_name=names.get(submission.jury_member_id, ""),
                decision=submission.decision.value if submission.decision else "PENDING",
            )
            for submission in phase1
        ],
        missing_jurors=missing,
        missing_conditions=missing_conditions,
    )


__all__ = [
    "JurorDecision",
    "SimulationUnlockStatus",
    "UnlockConditions",
    "check_simulation_unlock",
    "expected_jurors",
]
