"""Two-variable linear fits and the exhaustive metric-pair search.

Everything here is a pure function of the joined records, so results can be
recomputed per request and thrown away.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import CAGR_SPAN, INCIDENCE_YEARS, CorrelationConfig
from .growth import cagr_field_name
from .join import JoinedRecord

CUISINE_SIDE = "cuisine"
CANCER_SIDE = "cancer"
INGREDIENT_PREFIX = "ingredient:"


@dataclass(frozen=True)
class MetricOption:
    key: str
    label: str
    side: str
    ingredient: Optional[str] = None

    def value(self, record: JoinedRecord) -> Optional[float]:
        summary = record.cuisine if self.side == CUISINE_SIDE else record.cancer
        if summary is None:
            return None
        if self.ingredient is not None:
            return summary.ingredient_share(self.ingredient)
        return summary.metric(self.key)


CUISINE_METRICS: Tuple[MetricOption, ...] = (
    MetricOption("pct_veg", "Vegetarian share", CUISINE_SIDE),
    MetricOption("pct_sweet", "Sweet flavor share", CUISINE_SIDE),
    MetricOption("pct_lentil_like", "Lentil mention share", CUISINE_SIDE),
    MetricOption("pct_red_meat_like", "Red meat mention share", CUISINE_SIDE),
    MetricOption("pct_poultry", "Poultry mention share", CUISINE_SIDE),
    MetricOption("pct_fish", "Fish mention share", CUISINE_SIDE),
    MetricOption("pct_turmeric", "Turmeric mention share", CUISINE_SIDE),
    MetricOption("avg_prep_time", "Average prep time (min)", CUISINE_SIDE),
    MetricOption("avg_cook_time", "Average cook time (min)", CUISINE_SIDE),
    MetricOption("dish_count", "Dish count", CUISINE_SIDE),
)


def incidence_metrics(
    years: Sequence[int] = INCIDENCE_YEARS, span: Tuple[int, int] = CAGR_SPAN
) -> List[MetricOption]:
    metrics = [MetricOption(f"incidence_{year}", f"Cancer incidence {year}", CANCER_SIDE) for year in years]
    metrics.extend(
        MetricOption(f"incidence_per_100k_{year}", f"Cancer incidence per 100k {year}", CANCER_SIDE)
        for year in years
    )
    start, end = span
    metrics.append(
        MetricOption(cagr_field_name(span), f"Cancer incidence CAGR ({start}-{end % 100:02d})", CANCER_SIDE)
    )
    return metrics


@dataclass(frozen=True)
class ScatterSample:
    region: str
    x: float
    y: float


@dataclass(frozen=True)
class Residual:
    region: str
    actual: float
    predicted: float
    residual: float


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    intercept: float
    r: float
    residuals: Tuple[Residual, ...]

    @property
    def sample_size(self) -> int:
        return len(self.residuals)


@dataclass(frozen=True)
class ComboSuggestion:
    x: MetricOption
    y: MetricOption
    r: float
    sample_size: int
    slope: float
    intercept: float

    @property
    def abs_r(self) -> float:
        return abs(self.r)


def _finite(value) -> bool:
    return value is not None and not isinstance(value, bool) and math.isfinite(value)


def fit(samples: Sequence[ScatterSample]) -> Optional[RegressionResult]:
    """Least-squares line through the samples using population moments.

    Returns None when no sample has finite x and y. A flat x or y gives r = 0
    instead of NaN.
    """
    valid = [s for s in samples if _finite(s.x) and _finite(s.y)]
    if not valid:
        return None
    xs = np.array([s.x for s in valid], dtype=float)
    ys = np.array([s.y for s in valid], dtype=float)
    mean_x = float(xs.mean())
    mean_y = float(ys.mean())
    var_x = float(np.mean((xs - mean_x) ** 2))
    var_y = float(np.mean((ys - mean_y) ** 2))
    covariance = float(np.mean((xs - mean_x) * (ys - mean_y)))

    slope = 0.0 if var_x == 0 else covariance / var_x
    intercept = mean_y - slope * mean_x
    r = 0.0 if var_x == 0 or var_y == 0 else covariance / math.sqrt(var_x * var_y)

    residuals = []
    for sample in valid:
        predicted = slope * sample.x + intercept
        residuals.append(
            Residual(
                region=sample.region,
                actual=float(sample.y),
                predicted=predicted,
                residual=sample.y - predicted,
            )
        )
    residuals.sort(key=lambda item: abs(item.residual), reverse=True)
    return RegressionResult(slope=slope, intercept=intercept, r=r, residuals=tuple(residuals))


def build_samples(
    records: Sequence[JoinedRecord], x_metric: MetricOption, y_metric: MetricOption
) -> List[ScatterSample]:
    samples = []
    for record in records:
        x = x_metric.value(record)
        y = y_metric.value(record)
        if not _finite(x) or not _finite(y):
            continue
        samples.append(ScatterSample(region=record.state, x=x, y=y))
    return samples


def ingredient_share_metrics(
    records: Sequence[JoinedRecord], min_regions: int = 5, max_ingredients: int = 40
) -> List[MetricOption]:
    """Pseudo-metrics for ingredients used in at least ``min_regions`` states."""
    coverage: Counter = Counter()
    for record in records:
        if record.cuisine is None:
            continue
        coverage.update(name for name, count in record.cuisine.ingredient_mentions if count > 0)
    eligible = sorted(
        (item for item in coverage.items() if item[1] >= min_regions),
        key=lambda item: (-item[1], item[0]),
    )
    return [
        MetricOption(f"{INGREDIENT_PREFIX}{name}", f"Share of dishes using {name}", CUISINE_SIDE, ingredient=name)
        for name, _ in eligible[:max_ingredients]
    ]


def candidate_x_metrics(
    records: Sequence[JoinedRecord], config: Optional[CorrelationConfig] = None
) -> List[MetricOption]:
    config = config or CorrelationConfig()
    return list(CUISINE_METRICS) + ingredient_share_metrics(
        records, config.min_ingredient_regions, config.max_ingredients
    )


def discover_top_correlations(
    records: Sequence[JoinedRecord],
    x_metrics: Sequence[MetricOption],
    y_metrics: Sequence[MetricOption],
    min_samples: int = 6,
) -> List[ComboSuggestion]:
    """Fit every (x, y) pair and rank the survivors by |r|, strongest first."""
    combos: List[ComboSuggestion] = []
    for x_metric in x_metrics:
        for y_metric in y_metrics:
            samples = build_samples(records, x_metric, y_metric)
            if len(samples) < min_samples:
                continue
            result = fit(samples)
            if result is None:
                continue
            combos.append(
                ComboSuggestion(
                    x=x_metric,
                    y=y_metric,
                    r=result.r,
                    sample_size=result.sample_size,
                    slope=result.slope,
                    intercept=result.intercept,
                )
            )
    combos.sort(key=lambda combo: (-combo.abs_r, combo.x.key, combo.y.key))
    return combos


def residual_extremes(result: RegressionResult, k: int = 5) -> Tuple[List[Residual], List[Residual]]:
    positives = sorted((r for r in result.residuals if r.residual > 0), key=lambda r: r.residual, reverse=True)
    negatives = sorted((r for r in result.residuals if r.residual < 0), key=lambda r: r.residual)
    return positives[:k], negatives[:k]
