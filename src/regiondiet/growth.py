from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .config import CAGR_SPAN, INCIDENCE_YEARS


PER_CAPITA_SCALE = 100_000


def _is_finite_number(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def cagr(v0: Optional[float], v1: Optional[float], years: float) -> Optional[float]:
    """Compound annual growth rate, or None when the inputs cannot support one."""
    if not _is_finite_number(v0) or not _is_finite_number(v1) or not _is_finite_number(years):
        return None
    if v0 <= 0 or years <= 0:
        return None
    ratio = v1 / v0
    if ratio < 0:
        return None
    return math.pow(ratio, 1 / years) - 1


def per_capita_rate(count: Optional[float], population: Optional[float]) -> Optional[float]:
    if count is None or not population:
        return None
    return count / population * PER_CAPITA_SCALE


def cagr_field_name(span: Tuple[int, int] = CAGR_SPAN) -> str:
    start, end = span
    return f"incidence_cagr_{start % 100:02d}_{end % 100:02d}"


@dataclass(frozen=True)
class IncidenceSummary:
    state: str
    population: Optional[int]
    incidence: Dict[int, Optional[float]]
    incidence_per_100k: Dict[int, Optional[float]]
    incidence_cagr: Optional[float]
    cagr_span: Tuple[int, int] = CAGR_SPAN
    years: Tuple[int, ...] = INCIDENCE_YEARS

    def to_dict(self) -> Dict[str, Any]:
        row: Dict[str, Any] = {"state": self.state, "population": self.population}
        for year in self.years:
            row[f"incidence_{year}"] = self.incidence.get(year)
        row[cagr_field_name(self.cagr_span)] = self.incidence_cagr
        for year in self.years:
            row[f"incidence_per_100k_{year}"] = self.incidence_per_100k.get(year)
        return row

    def metric(self, key: str) -> Optional[float]:
        value = self.to_dict().get(key)
        return value if _is_finite_number(value) else None


def summarize_incidence(
    state: str,
    population: Optional[int],
    totals: Dict[int, Optional[float]],
    years: Sequence[int] = INCIDENCE_YEARS,
    span: Tuple[int, int] = CAGR_SPAN,
) -> IncidenceSummary:
    """Derive per-year rates and the span CAGR from yearly totals.

    A missing year only blanks that year's rate; the CAGR needs both endpoints.
    """
    start, end = span
    v_start = totals.get(start)
    v_end = totals.get(end)
    growth = cagr(v_start, v_end, end - start) if v_start is not None and v_end is not None else None
    rates = {year: per_capita_rate(totals.get(year), population) for year in years}
    return IncidenceSummary(
        state=state,
        population=population,
        incidence={year: totals.get(year) for year in years},
        incidence_per_100k=rates,
        incidence_cagr=growth,
        cagr_span=tuple(span),
        years=tuple(years),
    )
