from __future__ import annotations

import pytest
from pydantic import ValidationError

from recruitdecision.schemas import (
    Availability,
    CandidateRecord,
    FaceToFaceAverages,
    JuryScore,
    PresenceStatus,
    TechnicalScores,
)


def test_candidate_record_defaults():
    record = CandidateRecord(candidate_id="C-001", metier="AGENCES")

    assert record.availability is Availability.OUI
    assert record.presence is PresenceStatus.PRESENT
    assert record.jury_scores == []
    assert record.technical is None


def test_face_to_face_scores_are_on_five_point_scale():
    with pytest.raises(ValidationError):
        FaceToFaceAverages(voice_quality=5.5, verbal_communication=3)


def test_technical_scales():
    TechnicalScores(typing_speed=60, typing_accuracy=100, dictation=20)

    with pytest.raises(ValidationError):
        TechnicalScores(dictation=21)
    with pytest.raises(ValidationError):
        TechnicalScores(typing_accuracy=101)
    with pytest.raises(ValidationError):
        TechnicalScores(excel_test=-1)


def test_technical_scores_is_empty():
    assert TechnicalScores().is_empty()
    assert not TechnicalScores(excel_test=0).is_empty()


def test_score_records_reject_unknown_fields():
    with pytest.raises(ValidationError):
        TechnicalScores(psychotechnical_test=4)


def test_jury_score_phase_bounds():
    assert JuryScore(jury_member_id=1).phase == 1

    with pytest.raises(ValidationError):
        JuryScore(jury_member_id=1, phase=3)


def test_jury_score_parses_timestamps():
    score = JuryScore(jury_member_id=7, evaluated_at="2025-03-14T09:30:00Z")

    assert score.evaluated_at is not None
    assert score.evaluated_at.year == 2025
