"""Recruitment decision engine."""

from __future__ import annotations

__version__ = "0.1.0"

from .core.decision import evaluate  # noqa: E402

__all__ = ["__version__", "evaluate"]
