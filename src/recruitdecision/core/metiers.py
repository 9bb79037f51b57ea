"""Per-métier required tests and pass thresholds."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from ..schemas import Metier, TestKind

FACE_TO_FACE_BASE_CRITERIA: tuple[str, ...] = ("voice_quality", "verbal_communication")

TEST_CRITERIA: Mapping[TestKind, tuple[str, ...]] = MappingProxyType(
    {
        TestKind.TYPING: ("typing_speed", "typing_accuracy"),
        TestKind.EXCEL: ("excel_test",),
        TestKind.DICTATION: ("dictation",),
        TestKind.SIMULATION: ("sens_negociation", "capacite_persuasion", "sens_combativite"),
        TestKind.PSYCHOTECHNICAL: (
            "psycho_raisonnement_logique",
            "psycho_attention_concentration",
        ),
        TestKind.ANALYSIS_EXERCISE: ("analysis_exercise",),
        TestKind.PRESENTATION_VISUELLE: ("presentation_visuelle",),
        TestKind.APPETENCE_DIGITALE: ("appetence_digitale",),
    }
)

FACE_TO_FACE_OPTIONAL_TESTS: tuple[TestKind, ...] = (
    TestKind.PRESENTATION_VISUELLE,
    TestKind.APPETENCE_DIGITALE,
)

TECHNICAL_TESTS: tuple[TestKind, ...] = (
    TestKind.TYPING,
    TestKind.EXCEL,
    TestKind.DICTATION,
    TestKind.PSYCHOTECHNICAL,
    TestKind.ANALYSIS_EXERCISE,
)

CRITERION_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "voice_quality": "Qualité de la voix",
        "verbal_communication": "Communication verbale",
        "presentation_visuelle": "Présentation visuelle",
        "appetence_digitale": "Appétence digitale",
        "sens_negociation": "Sens de la négociation",
        "capacite_persuasion": "Capacité de persuasion",
        "sens_combativite": "Sens de la combativité",
        "typing_speed": "Rapidité de saisie",
        "typing_accuracy": "Précision de saisie",
        "excel_test": "Test Excel",
        "dictation": "Dictée",
        "psycho_raisonnement_logique": "Raisonnement logique",
        "psycho_attention_concentration": "Attention et concentration",
        "analysis_exercise": "Exercice d'analyse",
    }
)


class MetierConfigError(LookupError):
    """Raised for unknown métiers or an inconsistent threshold table."""


@dataclass(frozen=True, slots=True)
class Threshold:
    """Minimum passing score and the scale it is measured on."""

    minimum: float
    scale: float
    unit: str

    def passes(self, value: float | None) -> bool:
        return value is not None and value >= self.minimum


def _five(minimum: float = 3.0) -> Threshold:
    return Threshold(minimum=minimum, scale=5.0, unit="/5")


def _dictation(minimum: float) -> Threshold:
    return Threshold(minimum=minimum, scale=20.0, unit="/20")


def _typing(speed: float, accuracy: float) -> dict[str, Threshold]:
    return {
        "typing_speed": Threshold(minimum=speed, scale=float("inf"), unit="MPM"),
        "typing_accuracy": Threshold(minimum=accuracy, scale=100.0, unit="%"),
    }


@dataclass(frozen=True, slots=True)
class MetierConfig:
    """Required tests and thresholds for one métier."""

    metier: Metier
    label: str
    required_tests: frozenset[TestKind]
    thresholds: Mapping[str, Threshold] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "required_tests", frozenset(self.required_tests))
        object.__setattr__(self, "thresholds", MappingProxyType(dict(self.thresholds)))
        missing = [
            criterion
            for criterion in self.required_criteria()
            if criterion not in self.thresholds
        ]
        if missing:
            raise MetierConfigError(
                f"{self.metier.value}: no threshold defined for {', '.join(missing)}"
            )
        out_of_range = [
            criterion
            for criterion, threshold in self.thresholds.items()
            if not 0 <= threshold.minimum <= threshold.scale
        ]
        if out_of_range:
            raise MetierConfigError(
                f"{self.metier.value}: threshold outside its scale for {', '.join(out_of_range)}"
            )

    def requires(self, test: TestKind) -> bool:
        return test in self.required_tests

    @property
    def requires_simulation(self) -> bool:
        return TestKind.SIMULATION in self.required_tests

    def required_criteria(self) -> list[str]:
        criteria = list(FACE_TO_FACE_BASE_CRITERIA)
        for test in TestKind:
            if test in self.required_tests:
                criteria.extend(TEST_CRITERIA[test])
        return criteria

    def face_to_face_criteria(self) -> list[str]:
        criteria = list(FACE_TO_FACE_BASE_CRITERIA)
        for test in FACE_TO_FACE_OPTIONAL_TESTS:
            if test in self.required_tests:
                criteria.extend(TEST_CRITERIA[test])
        return criteria

    def technical_criteria(self) -> list[tuple[TestKind, str]]:
        return [
            (test, criterion)
            for test in TECHNICAL_TESTS
            if test in self.required_tests
            for criterion in TEST_CRITERIA[test]
        ]

    def threshold(self, criterion: str) -> Threshold:
        try:
            return self.thresholds[criterion]
        except KeyError as exc:
            raise MetierConfigError(
                f"{self.metier.value}: no threshold defined for {criterion!r}"
            ) from exc


def _build_default_configs() -> list[MetierConfig]:
    face_to_face = {criterion: _five() for criterion in FACE_TO_FACE_BASE_CRITERIA}
    simulation = {criterion: _five() for criterion in TEST_CRITERIA[TestKind.SIMULATION]}
    psycho = {criterion: _five() for criterion in TEST_CRITERIA[TestKind.PSYCHOTECHNICAL]}

    return [
        MetierConfig(
            metier=Metier.CALL_CENTER,
            label="Call Center",
            required_tests=frozenset({TestKind.TYPING, TestKind.EXCEL, TestKind.DICTATION}),
            thresholds={
                **face_to_face,
                **_typing(17, 75),
                "excel_test": _five(),
                "dictation": _dictation(14),
            },
        ),
        MetierConfig(
            metier=Metier.AGENCES,
            label="Agences",
            required_tests=frozenset(
                {
                    TestKind.PRESENTATION_VISUELLE,
                    TestKind.TYPING,
                    TestKind.DICTATION,
                    TestKind.SIMULATION,
                }
            ),
            thresholds={
                **face_to_face,
                "presentation_visuelle": _five(),
                **_typing(17, 75),
                "dictation": _dictation(14),
                **simulation,
            },
        ),
        MetierConfig(
            metier=Metier.BO_RECLAM,
            label="BO Réclam",
            required_tests=frozenset(
                {
                    TestKind.TYPING,
                    TestKind.EXCEL,
                    TestKind.DICTATION,
                    TestKind.PSYCHOTECHNICAL,
                }
            ),
            thresholds={
                **face_to_face,
                **_typing(17, 75),
                "excel_test": _five(),
                "dictation": _dictation(14),
                **psycho,
            },
        ),
        MetierConfig(
            metier=Metier.TELEVENTE,
            label="Télévente",
            required_tests=frozenset(
                {TestKind.TYPING, TestKind.DICTATION, TestKind.SIMULATION}
            ),
            thresholds={
                **face_to_face,
                **_typing(17, 75),
                "dictation": _dictation(14),
                **simulation,
            },
        ),
        MetierConfig(
            metier=Metier.RESEAUX_SOCIAUX,
            label="Réseaux Sociaux",
            required_tests=frozenset(
                {TestKind.APPETENCE_DIGITALE, TestKind.TYPING, TestKind.DICTATION}
            ),
            thresholds={
                **face_to_face,
                "appetence_digitale": _five(),
                **_typing(23, 85),
                "dictation": _dictation(16),
            },
        ),
        MetierConfig(
            metier=Metier.SUPERVISION,
            label="Supervision",
            required_tests=frozenset({TestKind.TYPING, TestKind.EXCEL, TestKind.DICTATION}),
            thresholds={
                **face_to_face,
                **_typing(17, 75),
                "excel_test": _five(),
                "dictation": _dictation(14),
            },
        ),
        MetierConfig(
            metier=Metier.BOT_COGNITIVE_TRAINER,
            label="Bot Cognitive Trainer",
            required_tests=frozenset(
                {TestKind.EXCEL, TestKind.DICTATION, TestKind.ANALYSIS_EXERCISE}
            ),
            thresholds={
                **face_to_face,
                "excel_test": _five(),
                "dictation": _dictation(14),
                "analysis_exercise": _five(),
            },
        ),
        MetierConfig(
            metier=Metier.SMC_FIXE,
            label="SMC Fixe",
            required_tests=frozenset({TestKind.TYPING, TestKind.EXCEL, TestKind.DICTATION}),
            thresholds={
                **face_to_face,
                **_typing(17, 75),
                "excel_test": _five(),
                "dictation": _dictation(14),
            },
        ),
        MetierConfig(
            metier=Metier.SMC_MOBILE,
            label="SMC Mobile",
            required_tests=frozenset({TestKind.TYPING, TestKind.EXCEL, TestKind.DICTATION}),
            thresholds={
                **face_to_face,
                **_typing(17, 85),
                "excel_test": _five(),
                "dictation": _dictation(14),
            },
        ),
    ]


class MetierTable:
    """Immutable lookup table from métier to its configuration."""

    def __init__(self, configs: Iterable[MetierConfig]) -> None:
        self._configs: Mapping[Metier, MetierConfig] = MappingProxyType(
            {config.metier: config for config in configs}
        )
        missing = [metier.value for metier in Metier if metier not in self._configs]
        if missing:
            raise MetierConfigError(f"No configuration for métier(s): {', '.join(missing)}")

    def get(self, metier: Metier | str) -> MetierConfig:
        key = _coerce_metier(metier)
        return self._configs[key]

    def metiers(self) -> list[Metier]:
        return list(self._configs.keys())

    def requires(self, metier: Metier | str, test: TestKind) -> bool:
        return self.get(metier).requires(test)

    def minimum_thresholds(self, metier: Metier | str) -> dict[str, float]:
        config = self.get(metier)
        return {
            criterion: config.threshold(criterion).minimum
            for criterion in config.required_criteria()
        }

    def with_overrides(self, overrides: Mapping[str, Mapping[str, Any]]) -> "MetierTable":
        """Return a new table with per-métier threshold minimums replaced."""
        updated: dict[Metier, MetierConfig] = dict(self._configs)
        for raw_metier, criteria in overrides.items():
            config = self.get(raw_metier)
            thresholds = dict(config.thresholds)
            for criterion, minimum in criteria.items():
                if criterion not in thresholds:
                    raise MetierConfigError(
                        f"{config.metier.value}: cannot override unknown criterion {criterion!r}"
                    )
                thresholds[criterion] = replace(thresholds[criterion], minimum=float(minimum))
            updated[config.metier] = replace(config, thresholds=thresholds)
        return MetierTable(updated.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            metier.value: {
                "label": config.label,
                "required_tests": sorted(test.value for test in config.required_tests),
                "thresholds": {
                    criterion: {
                        "minimum": threshold.minimum,
                        "scale": threshold.scale if math.isfinite(threshold.scale) else None,
                        "unit": threshold.unit,
                    }
                    for criterion, threshold in config.thresholds.items()
                },
            }
            for metier, config in self._configs.items()
        }


def _coerce_metier(metier: Metier | str) -> Metier:
    if isinstance(metier, Metier):
        return metier
    try:
        return Metier(metier)
    except ValueError as exc:
        raise MetierConfigError(f"Unknown métier: {metier!r}") from exc


DEFAULT_TABLE = MetierTable(_build_default_configs())


def get_config(metier: Metier | str) -> MetierConfig:
    """Return the default configuration for ``metier``."""
    return DEFAULT_TABLE.get(metier)


__all__ = [
    "CRITERION_LABELS",
    "DEFAULT_TABLE",
    "MetierConfig",
    "MetierConfigError",
    "MetierTable",
    "TEST_CRITERIA",
    "Threshold",
    "get_config",
]
