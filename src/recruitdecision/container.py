"""Dependency injection container for the decision engine."""

from __future__ import annotations

from typing import Any, Mapping

from dependency_injector import containers, providers

from .core import (
    DEFAULT_TABLE,
    DecisionEngine,
    FaceToFaceValidator,
    MetierTable,
    SimulationValidator,
    TechnicalValidator,
)
from .pipeline import DecisionPipeline


def build_metier_table(overrides: Mapping[str, Mapping[str, Any]] | None = None) -> MetierTable:
    """Default table, with threshold overrides applied when configured."""
    if not overrides:
        return DEFAULT_TABLE
    return DEFAULT_TABLE.with_overrides(overrides)


class DecisionContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    metier_table = providers.Singleton(
        build_metier_table,
        overrides=config.thresholds,
    )

    face_to_face_validator = providers.Singleton(FaceToFaceValidator, table=metier_table)
    simulation_validator = providers.Singleton(SimulationValidator, table=metier_table)
    technical_validator = providers.Singleton(TechnicalValidator, table=metier_table)

    decision_engine = providers.Singleton(
        DecisionEngine,
        table=metier_table,
        face_to_face=face_to_face_validator,
        simulation=simulation_validator,
        technical=technical_validator,
    )

    pipeline = providers.Factory(
        DecisionPipeline,
        engine=decision_engine,
    )


def create_container(*, settings: dict | None = None) -> DecisionContainer:
    """Instantiate container with optional overrides."""

    container = DecisionContainer()

    if not settings:
        return container

    thresholds = settings.get("thresholds", {}) if isinstance(settings, dict) else {}
    if thresholds:
        container.config.override({"thresholds": thresholds})

    return container
