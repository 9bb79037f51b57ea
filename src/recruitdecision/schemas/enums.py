"""Closed status and decision vocabularies."""

from __future__ import annotations

from enum import Enum


class Metier(str, Enum):
    """Job roles a candidate can be recruited for."""

    CALL_CENTER = "CALL_CENTER"
    AGENCES = "AGENCES"
    BO_RECLAM = "BO_RECLAM"
    TELEVENTE = "TELEVENTE"
    RESEAUX_SOCIAUX = "RESEAUX_SOCIAUX"
    SUPERVISION = "SUPERVISION"
    BOT_COGNITIVE_TRAINER = "BOT_COGNITIVE_TRAINER"
    SMC_FIXE = "SMC_FIXE"
    SMC_MOBILE = "SMC_MOBILE"


class TestKind(str, Enum):
    """Tests and optional face-to-face criteria a métier can require."""

    __test__ = False

    TYPING = "typing"
    EXCEL = "excel"
    DICTATION = "dictation"
    SIMULATION = "simulation"
    PSYCHOTECHNICAL = "psychotechnical"
    ANALYSIS_EXERCISE = "analysis_exercise"
    PRESENTATION_VISUELLE = "presentation_visuelle"
    APPETENCE_DIGITALE = "appetence_digitale"


class PresenceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class Availability(str, Enum):
    OUI = "OUI"
    NON = "NON"


class PhaseDecision(str, Enum):
    """Verdict on a single evaluation phase."""

    FAVORABLE = "FAVORABLE"
    DEFAVORABLE = "DEFAVORABLE"


class Phase1Outcome(str, Enum):
    """Admission status after the face-to-face phase."""

    ADMIS = "ADMIS"
    ELIMINE = "ELIMINE"


class FinalDecision(str, Enum):
    RECRUTE = "RECRUTE"
    NON_RECRUTE = "NON_RECRUTE"
    ABSENT = "ABSENT"


class JuryRoleType(str, Enum):
    """Jury member roles; business representatives only rate their specialty."""

    DRH = "DRH"
    EPC = "EPC"
    REPRESENTANT_METIER = "REPRESENTANT_METIER"
    WFM_JURY = "WFM_JURY"
