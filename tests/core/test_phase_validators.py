from __future__ import annotations

from recruitdecision.core import (
    DEFAULT_TABLE,
    FaceToFaceValidator,
    MetierValidator,
    SimulationValidator,
    TechnicalValidator,
    validate_face_to_face,
    validate_psychotechnical,
    validate_simulation,
    validate_technical,
)
from recruitdecision.schemas import FaceToFaceAverages, Metier, TechnicalScores

CALL_CENTER_PASSING = {
    "typing_speed": 20,
    "typing_accuracy": 90,
    "excel_test": 4,
    "dictation": 16,
}


def test_face_to_face_passes_at_threshold():
    result = validate_face_to_face(
        Metier.CALL_CENTER,
        {"voice_quality": 3, "verbal_communication": 3},
    )

    assert result.valid
    assert result.failed_criteria == []


def test_agences_requires_presentation_visuelle():
    result = validate_face_to_face(
        Metier.AGENCES,
        FaceToFaceAverages(voice_quality=5, verbal_communication=5, presentation_visuelle=2.5),
    )

    assert not result.valid
    assert result.failed_criteria == ["presentation_visuelle"]
    assert result.messages() == ["Présentation visuelle doit être ≥ 3/5"]


def test_missing_required_face_to_face_criterion_fails():
    result = validate_face_to_face(
        Metier.AGENCES,
        {"voice_quality": 4, "verbal_communication": 4},
    )

    assert result.failed_criteria == ["presentation_visuelle"]


def test_face_to_face_reports_every_failed_criterion():
    result = validate_face_to_face(
        Metier.RESEAUX_SOCIAUX,
        {"voice_quality": 2, "verbal_communication": 1, "appetence_digitale": 2},
    )

    assert result.failed_criteria == [
        "voice_quality",
        "verbal_communication",
        "appetence_digitale",
    ]


def test_optional_criterion_ignored_for_other_metiers():
    result = validate_face_to_face(
        Metier.CALL_CENTER,
        {"voice_quality": 4, "verbal_communication": 4, "appetence_digitale": 1},
    )

    assert result.valid
    assert [check.criterion for check in result.details] == [
        "voice_quality",
        "verbal_communication",
    ]


def test_simulation_requires_all_three_criteria():
    result = validate_simulation(
        {"sens_negociation": 3, "capacite_persuasion": 2.9, "sens_combativite": 4}
    )

    assert not result.valid
    assert result.failed_criteria == ["capacite_persuasion"]


def test_simulation_uses_metier_thresholds_when_given():
    table = DEFAULT_TABLE.with_overrides({"TELEVENTE": {"sens_combativite": 4}})
    validator = SimulationValidator(table=table)
    averages = {"sens_negociation": 3, "capacite_persuasion": 3, "sens_combativite": 3.5}

    assert validator.validate(None, averages).valid
    assert validator.validate(Metier.TELEVENTE, averages).failed_criteria == [
        "sens_combativite"
    ]


def test_technical_passes_for_call_center():
    result = validate_technical(Metier.CALL_CENTER, CALL_CENTER_PASSING)

    assert result.valid
    assert [check.criterion for check in result.details] == [
        "typing_speed",
        "typing_accuracy",
        "excel_test",
        "dictation",
    ]


def test_technical_missing_required_score_fails():
    scores = dict(CALL_CENTER_PASSING)
    del scores["excel_test"]

    result = validate_technical(Metier.CALL_CENTER, scores)

    assert result.failed_criteria == ["excel_test"]


def test_technical_ignores_tests_not_required():
    result = validate_technical(
        Metier.TELEVENTE,
        {"typing_speed": 17, "typing_accuracy": 75, "dictation": 14, "excel_test": 0},
    )

    assert result.valid


def test_technical_messages_carry_units():
    result = validate_technical(
        Metier.RESEAUX_SOCIAUX,
        {"typing_speed": 20, "typing_accuracy": 80, "dictation": 15},
    )

    assert result.messages() == [
        "Rapidité de saisie doit être ≥ 23 MPM",
        "Précision de saisie doit être ≥ 85%",
        "Dictée doit être ≥ 16/20",
    ]


def test_bo_reclam_checks_psychotechnical_scores():
    scores = TechnicalScores(
        **CALL_CENTER_PASSING,
        psycho_raisonnement_logique=4,
        psycho_attention_concentration=2,
    )

    result = validate_technical(Metier.BO_RECLAM, scores)

    assert result.failed_criteria == ["psycho_attention_concentration"]
    assert validate_psychotechnical(scores).failed_criteria == ["psycho_attention_concentration"]


def test_bot_cognitive_trainer_analysis_exercise():
    scores = {"excel_test": 3, "dictation": 14, "analysis_exercise": 2}

    result = validate_technical(Metier.BOT_COGNITIVE_TRAINER, scores)

    assert result.failed_criteria == ["analysis_exercise"]


def test_validators_follow_protocol():
    assert isinstance(FaceToFaceValidator(), MetierValidator)
    assert isinstance(SimulationValidator(), MetierValidator)
    assert isinstance(TechnicalValidator(), MetierValidator)
