from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import pytest

from regiondiet.aggregation import ClassifiedObservation, RegionSummary
from regiondiet.growth import summarize_incidence
from regiondiet.taxonomy import UNKNOWN_DIET


@pytest.fixture()
def make_observation():
    def _make(
        region: Optional[str] = "Goa",
        diet: str = UNKNOWN_DIET,
        sweet: bool = False,
        prep: Optional[float] = None,
        cook: Optional[float] = None,
        tokens: Sequence[str] = (),
    ) -> ClassifiedObservation:
        return ClassifiedObservation(
            region=region,
            diet=diet,
            sweet=sweet,
            prep_minutes=prep,
            cook_minutes=cook,
            tokens=tuple(tokens),
        )

    return _make


@pytest.fixture()
def make_cuisine_summary():
    def _make(
        state: str,
        dish_count: int = 10,
        pct_veg: Optional[float] = None,
        pct_sweet: Optional[float] = None,
        mentions: Sequence[Tuple[str, int]] = (),
    ) -> RegionSummary:
        return RegionSummary(
            state=state,
            dish_count=dish_count,
            pct_veg=pct_veg,
            pct_sweet=pct_sweet,
            avg_prep_time=None,
            avg_cook_time=None,
            pct_lentil_like=None,
            pct_red_meat_like=None,
            pct_poultry=None,
            pct_fish=None,
            pct_turmeric=None,
            ingredient_stats=tuple(mentions),
            ingredient_mentions=tuple(mentions),
        )

    return _make


@pytest.fixture()
def make_incidence_summary():
    def _make(state: str, totals: Dict[int, Optional[float]], population: int = 1_000_000):
        return summarize_incidence(state, population, totals)

    return _make
