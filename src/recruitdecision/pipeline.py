"""Batch evaluation of candidate snapshots."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pendulum
import structlog
from pydantic import ValidationError

from .core import DecisionEngine, aggregate_face_to_face, aggregate_simulation, round_score
from .schemas import CandidateRecord, FaceToFaceAverages, SimulationAverages
from . import __version__


class CandidateLoadError(ValueError):
    """Raised when candidate loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[CandidateRecord]):
        super().__init__("Candidate loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Candidate loading failed: {self.errors}"


class CandidateLoader:
    """Load candidate snapshots from a JSON Lines file."""

    def load(self, path: Path) -> list[CandidateRecord]:
        candidates: list[CandidateRecord] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                try:
                    candidate = CandidateRecord.model_validate(record)
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
                    continue
                candidates.append(candidate)
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates


class OutputWriter:
    """Persist evaluation results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class DecisionPipeline:
    """Aggregate jury scores, run the engine and write the results."""

    def __init__(
        self,
        *,
        engine: DecisionEngine,
        candidate_loader: CandidateLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._engine = engine
        self._candidates = candidate_loader or CandidateLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def evaluate_record(self, candidate: CandidateRecord) -> dict[str, Any]:
        face_to_face = aggregate_face_to_face(candidate.jury_scores)
        simulation = aggregate_simulation(candidate.jury_scores)
        result = self._engine.evaluate(
            candidate.metier,
            candidate.availability,
            candidate.presence,
            face_to_face=face_to_face,
            simulation=simulation,
            technical=candidate.technical,
        )
        return {
            "candidate_id": candidate.candidate_id,
            "metier": candidate.metier.value,
            "availability": candidate.availability.value,
            "presence": candidate.presence.value,
            "jury_count": len({score.jury_member_id for score in candidate.jury_scores}),
            "averages": {
                "face_to_face": _rounded(face_to_face),
                "simulation": _rounded(simulation),
            },
            "decision": result.to_dict(),
        }

    def run(
        self,
        *,
        candidates_path: Path,
        output_path: Path,
        audit_logger: AuditLogger | None = None,
    ) -> list[dict]:
        load_errors: list[str] = []
        try:
            candidates = self._candidates.load(candidates_path)
        except CandidateLoadError as exc:
            candidates = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("candidates.partial_load", errors=exc.errors)

        results: list[dict] = []
        for candidate in candidates:
            entry = self.evaluate_record(candidate)
            results.append(entry)
            decision = entry["decision"]

            if audit_logger:
                audit_logger.append(
                    {
                        "candidate_id": candidate.candidate_id,
                        "metier": candidate.metier.value,
                        "decision": decision,
                        "evaluated_at": pendulum.now("UTC").to_iso8601_string(),
                        "app_version": __version__,
                    }
                )

            self._logger.info(
                "decision.result",
                candidate_id=candidate.candidate_id,
                metier=candidate.metier.value,
                final_decision=decision["final_decision"],
                failed_criteria=decision["failed_criteria"],
            )

        metadata = {
            "candidate_count": len(candidates),
            "errors": load_errors,
            "timestamp": pendulum.now("UTC").to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return results


def _rounded(averages: FaceToFaceAverages | SimulationAverages | None) -> dict[str, float | None] | None:
    if averages is None:
        return None
    return {name: round_score(value) for name, value in averages.model_dump().items()}


__all__ = [
    "AuditLogger",
    "CandidateLoadError",
    "CandidateLoader",
    "DecisionPipeline",
    "OutputWriter",
]
