"""
Regional diet and cancer-incidence build pipeline.

The package provides utilities for:
    * reconciling state/UT spellings onto one canonical vocabulary,
    * classifying recipe rows (diet, sweetness, state of origin, ingredients),
    * aggregating dishes and yearly incidence counts into per-state summaries,
    * joining both sides and ranking cuisine/incidence correlations.

Everything runs against local CSV/JSON tables and writes JSON documents.
"""

from __future__ import annotations

from typing import Any

__all__ = ["run_pipeline"]


def run_pipeline(*args: Any, **kwargs: Any):
    """Lazy wrapper so importing regiondiet doesn't pull pandas immediately."""

    from .pipeline import run_pipeline as _run_pipeline

    return _run_pipeline(*args, **kwargs)
