"""Per-criterion averaging of jury submissions."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..schemas import FaceToFaceAverages, JuryScore, SimulationAverages

FACE_TO_FACE_FIELDS: tuple[str, ...] = (
    "voice_quality",
    "verbal_communication",
    "presentation_visuelle",
    "appetence_digitale",
)

SIMULATION_FIELDS: tuple[str, ...] = (
    "sens_negociation",
    "capacite_persuasion",
    "sens_combativite",
)


def average(values: Iterable[float | None]) -> float | None:
    """Arithmetic mean of the present values, or None when there are none."""
    present = [float(value) for value in values if value is not None]
    if not present:
        return None
    return sum(present) / len(present)


def round_score(value: float | None, digits: int = 2) -> float | None:
    if value is None:
        return None
    return round(value, digits)


def criterion_averages(
    submissions: Sequence[JuryScore],
    fields: Iterable[str],
) -> dict[str, float | None]:
    """Average each criterion over the submissions that actually rated it."""
    return {
        name: average(getattr(submission, name) for submission in submissions)
        for name in fields
    }


def aggregate_face_to_face(submissions: Iterable[JuryScore]) -> FaceToFaceAverages | None:
    """Phase 1 averages, or None when no jury member has submitted yet."""
    phase1 = [submission for submission in submissions if submission.phase == 1]
    if not phase1:
        return None
    return FaceToFaceAverages(**criterion_averages(phase1, FACE_TO_FACE_FIELDS))


def aggregate_simulation(submissions: Iterable[JuryScore]) -> SimulationAverages | None:
    """Phase 2 averages, or None when no simulation has been rated yet."""
    phase2 = [submission for submission in submissions if submission.phase == 2]
    if not phase2:
        return None
    return SimulationAverages(**criterion_averages(phase2, SIMULATION_FIELDS))


__all__ = [
    "aggregate_face_to_face",
    "aggregate_simulation",
    "average",
    "criterion_averages",
    "round_score",
]
