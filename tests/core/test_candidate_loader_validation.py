from __future__ import annotations

import json
from pathlib import Path

import pendulum
import pytest

from recruitdecision.core import DecisionEngine
from recruitdecision.pipeline import (
    AuditLogger,
    CandidateLoadError,
    CandidateLoader,
    DecisionPipeline,
)
from recruitdecision.schemas import CandidateRecord


def test_candidate_loader_raises_on_invalid_json(tmp_path: Path):
    loader = CandidateLoader()
    path = tmp_path / "candidates.jsonl"
    path.write_text('{"candidate_id": "C-1", "metier": "AGENCES"}\n{invalid}', encoding="utf-8")

    with pytest.raises(CandidateLoadError) as exc:
        loader.load(path)
    assert "invalid JSON" in exc.value.errors[0]
    assert len(exc.value.partial) == 1


def test_candidate_loader_skips_invalid_and_reports(tmp_path: Path):
    loader = CandidateLoader()
    path = tmp_path / "candidates.jsonl"
    valid_payload = {"candidate_id": "C-001", "metier": "CALL_CENTER"}
    invalid_payload = {"candidate_id": "C-002", "metier": "BOULANGERIE"}
    out_of_range = {
        "candidate_id": "C-003",
        "metier": "CALL_CENTER",
        "technical": {"dictation": 25},
    }
    path.write_text(
        "\n".join(json.dumps(item) for item in (valid_payload, invalid_payload, out_of_range)),
        encoding="utf-8",
    )

    with pytest.raises(CandidateLoadError) as exc:
        loader.load(path)
    error = exc.value
    assert error.errors[0].startswith("line 2:")
    assert error.errors[1].startswith("line 3:")
    assert [candidate.candidate_id for candidate in error.partial] == ["C-001"]


def test_evaluate_record_aggregates_jury_scores():
    pipeline = DecisionPipeline(engine=DecisionEngine())
    candidate = CandidateRecord.model_validate(
        {
            "candidate_id": "C-010",
            "metier": "TELEVENTE",
            "jury_scores": [
                {"jury_member_id": 1, "voice_quality": 4, "verbal_communication": 3},
                {"jury_member_id": 2, "voice_quality": 3, "verbal_communication": 4},
                {
                    "jury_member_id": 1,
                    "phase": 2,
                    "sens_negociation": 3,
                    "capacite_persuasion": 2,
                    "sens_combativite": 4,
                },
            ],
        }
    )

    entry = pipeline.evaluate_record(candidate)

    assert entry["jury_count"] == 2
    assert entry["averages"]["face_to_face"]["voice_quality"] == 3.5
    assert entry["averages"]["simulation"]["capacite_persuasion"] == 2.0
    assert entry["decision"]["phase1_decision"] == "FAVORABLE"
    assert entry["decision"]["phase2_decision"] == "DEFAVORABLE"
    assert entry["decision"]["final_decision"] == "NON_RECRUTE"
    assert entry["decision"]["failed_criteria"] == ["capacite_persuasion"]


def test_pipeline_run_writes_results_and_audit(tmp_path: Path):
    candidates_path = tmp_path / "candidates.jsonl"
    output_path = tmp_path / "out" / "results.json"
    audit_path = tmp_path / "audit" / "decisions.jsonl"
    candidates_path.write_text(
        json.dumps({"candidate_id": "C-020", "metier": "SUPERVISION", "presence": "ABSENT"})
        + "\nnot json\n",
        encoding="utf-8",
    )
    pipeline = DecisionPipeline(engine=DecisionEngine())

    results = pipeline.run(
        candidates_path=candidates_path,
        output_path=output_path,
        audit_logger=AuditLogger(audit_path),
    )

    assert [entry["decision"]["final_decision"] for entry in results] == ["ABSENT"]
    written = json.loads(output_path.read_text(encoding="utf-8"))
    assert written["metadata"]["candidate_count"] == 1
    assert len(written["metadata"]["errors"]) == 1
    audit_lines = audit_path.read_text(encoding="utf-8").splitlines()
    assert len(audit_lines) == 1
    assert json.loads(audit_lines[0])["candidate_id"] == "C-020"


def test_pipeline_timestamps_share_utc(tmp_path: Path):
    candidates_path = tmp_path / "candidates.jsonl"
    output_path = tmp_path / "results.json"
    audit_path = tmp_path / "audit.jsonl"
    candidates_path.write_text(
        json.dumps({"candidate_id": "C-021", "metier": "CALL_CENTER", "presence": "ABSENT"}),
        encoding="utf-8",
    )

    DecisionPipeline(engine=DecisionEngine()).run(
        candidates_path=candidates_path,
        output_path=output_path,
        audit_logger=AuditLogger(audit_path),
    )

    metadata = json.loads(output_path.read_text(encoding="utf-8"))["metadata"]
    audit_entry = json.loads(audit_path.read_text(encoding="utf-8").splitlines()[0])
    assert pendulum.parse(metadata["timestamp"]).offset == 0
    assert pendulum.parse(audit_entry["evaluated_at"]).offset == 0
