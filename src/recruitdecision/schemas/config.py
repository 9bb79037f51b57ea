"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .enums import Metier


class MetierOverride(BaseModel):
    thresholds: dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    metiers: dict[Metier, MetierOverride] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        overrides = {
            metier.value: override.thresholds
            for metier, override in self.metiers.items()
            if override.thresholds
        }
        if overrides:
            settings["thresholds"] = overrides
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            AppConfig.__name__,
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
