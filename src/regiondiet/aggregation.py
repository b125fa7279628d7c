from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .classifiers import any_mention, normalize_ingredient
from .config import CAGR_SPAN, INCIDENCE_YEARS
from .errors import MissingPopulationError
from .growth import IncidenceSummary, summarize_incidence
from .regions import is_sentinel, lookup_population, normalize_region
from .taxonomy import NON_VEG_TERMS, VEGETARIAN, MentionCategory, mention_categories

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifiedObservation:
    """One dish after classification; region is a canonical state key or None."""

    region: Optional[str]
    diet: str
    sweet: bool
    prep_minutes: Optional[float] = None
    cook_minutes: Optional[float] = None
    tokens: Tuple[str, ...] = ()


@dataclass
class RegionAccumulator:
    state: str
    dish_count: int = 0
    veg: int = 0
    sweet: int = 0
    prep_sum: float = 0.0
    prep_n: int = 0
    cook_sum: float = 0.0
    cook_n: int = 0
    mentions: Dict[str, int] = field(default_factory=dict)
    ingredient_stats: Counter = field(default_factory=Counter)
    ingredient_mentions: Counter = field(default_factory=Counter)


@dataclass(frozen=True)
class RegionSummary:
    state: str
    dish_count: int
    pct_veg: Optional[float]
    pct_sweet: Optional[float]
    avg_prep_time: Optional[float]
    avg_cook_time: Optional[float]
    pct_lentil_like: Optional[float]
    pct_red_meat_like: Optional[float]
    pct_poultry: Optional[float]
    pct_fish: Optional[float]
    pct_turmeric: Optional[float]
    ingredient_stats: Tuple[Tuple[str, int], ...] = ()
    ingredient_mentions: Tuple[Tuple[str, int], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state,
            "dish_count": self.dish_count,
            "pct_veg": self.pct_veg,
            "pct_sweet": self.pct_sweet,
            "avg_prep_time": self.avg_prep_time,
            "avg_cook_time": self.avg_cook_time,
            "pct_lentil_like": self.pct_lentil_like,
            "pct_red_meat_like": self.pct_red_meat_like,
            "pct_poultry": self.pct_poultry,
            "pct_fish": self.pct_fish,
            "pct_turmeric": self.pct_turmeric,
            "ingredient_stats": dict(self.ingredient_stats),
            "ingredient_mentions": dict(self.ingredient_mentions),
        }

    def metric(self, key: str) -> Optional[float]:
        value = getattr(self, key, None)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return float(value)

    def ingredient_share(self, ingredient: str) -> Optional[float]:
        if not self.dish_count:
            return None
        return dict(self.ingredient_mentions).get(ingredient, 0) / self.dish_count


def _share(count: int, total: int) -> Optional[float]:
    return count / total if total else None


def _mean(total: float, n: int) -> Optional[float]:
    return total / n if n else None


def _sorted_frequencies(counter: Counter) -> Tuple[Tuple[str, int], ...]:
    return tuple(sorted(counter.items(), key=lambda item: (-item[1], item[0])))


class CuisineAggregator:
    """Folds classified dishes into one running bucket per canonical state."""

    def __init__(self, categories: Optional[Sequence[MentionCategory]] = None):
        self.categories = list(categories) if categories is not None else mention_categories()
        self.buckets: Dict[str, RegionAccumulator] = {}
        self.dropped = 0

    def _bucket(self, state: str) -> RegionAccumulator:
        bucket = self.buckets.get(state)
        if bucket is None:
            bucket = RegionAccumulator(
                state=state, mentions={category.name: 0 for category in self.categories}
            )
            self.buckets[state] = bucket
        return bucket

    def add_observation(self, region_raw: Optional[str], observation: ClassifiedObservation) -> bool:
        state = normalize_region(region_raw)
        if is_sentinel(state):
            self.dropped += 1
            return False
        bucket = self._bucket(state)
        bucket.dish_count += 1

        tokens = list(observation.tokens)
        has_animal_protein = any_mention(tokens, NON_VEG_TERMS)
        if observation.diet == VEGETARIAN and not has_animal_protein:
            bucket.veg += 1
        if observation.sweet:
            bucket.sweet += 1
        if observation.prep_minutes is not None:
            bucket.prep_sum += observation.prep_minutes
            bucket.prep_n += 1
        if observation.cook_minutes is not None:
            bucket.cook_sum += observation.cook_minutes
            bucket.cook_n += 1

        unique_tokens = list(dict.fromkeys(tokens))
        for category in self.categories:
            if any_mention(unique_tokens, category.terms):
                bucket.mentions[category.name] += 1
        bucket.ingredient_stats.update(unique_tokens)
        normalized = {normalize_ingredient(token) for token in unique_tokens}
        bucket.ingredient_mentions.update(name for name in normalized if name)
        return True

    def add(self, observation: ClassifiedObservation) -> bool:
        return self.add_observation(observation.region, observation)

    def extend(self, observations: Iterable[ClassifiedObservation]) -> int:
        return sum(1 for observation in observations if self.add(observation))

    def finalize(self) -> List[RegionSummary]:
        summaries = []
        for bucket in self.buckets.values():
            n = bucket.dish_count
            summaries.append(
                RegionSummary(
                    state=bucket.state,
                    dish_count=n,
                    pct_veg=_share(bucket.veg, n),
                    pct_sweet=_share(bucket.sweet, n),
                    avg_prep_time=_mean(bucket.prep_sum, bucket.prep_n),
                    avg_cook_time=_mean(bucket.cook_sum, bucket.cook_n),
                    pct_lentil_like=_share(bucket.mentions.get("lentil_like", 0), n),
                    pct_red_meat_like=_share(bucket.mentions.get("red_meat_like", 0), n),
                    pct_poultry=_share(bucket.mentions.get("poultry", 0), n),
                    pct_fish=_share(bucket.mentions.get("fish", 0), n),
                    pct_turmeric=_share(bucket.mentions.get("turmeric", 0), n),
                    ingredient_stats=_sorted_frequencies(bucket.ingredient_stats),
                    ingredient_mentions=_sorted_frequencies(bucket.ingredient_mentions),
                )
            )
        summaries.sort(key=lambda summary: summary.state)
        LOGGER.info("Finalized cuisine summaries for %d states (%d observations dropped)", len(summaries), self.dropped)
        return summaries


@dataclass(frozen=True)
class IncidenceRow:
    region: Optional[str]
    counts: Dict[int, Optional[float]]


@dataclass
class IncidenceBucket:
    state: str
    population: Optional[int]
    totals: Dict[int, Optional[float]]

    def add(self, year: int, value: Optional[float]) -> None:
        # A single missing cell blanks the year for the whole state.
        if value is None or self.totals.get(year) is None:
            self.totals[year] = None
        else:
            self.totals[year] += value


class IncidenceAggregator:
    def __init__(self, years: Sequence[int] = INCIDENCE_YEARS, cagr_span: Tuple[int, int] = CAGR_SPAN):
        self.years = tuple(years)
        self.cagr_span = tuple(cagr_span)
        self.buckets: Dict[str, IncidenceBucket] = {}
        self.dropped = 0

    def add_row(self, row: IncidenceRow) -> bool:
        raw = (row.region or "").strip()
        state = normalize_region(raw)
        if is_sentinel(state):
            self.dropped += 1
            return False
        bucket = self.buckets.get(state)
        if bucket is None:
            bucket = IncidenceBucket(
                state=state,
                population=lookup_population(state, raw),
                totals={year: 0 for year in self.years},
            )
            self.buckets[state] = bucket
        for year in self.years:
            bucket.add(year, row.counts.get(year))
        return True

    def finalize(self) -> List[IncidenceSummary]:
        missing = [state for state, bucket in self.buckets.items() if bucket.population is None]
        if missing:
            raise MissingPopulationError(missing)
        summaries = [
            summarize_incidence(bucket.state, bucket.population, dict(bucket.totals), self.years, self.cagr_span)
            for bucket in self.buckets.values()
        ]
        summaries.sort(key=lambda summary: summary.state)
        LOGGER.info("Finalized incidence summaries for %d states (%d rows dropped)", len(summaries), self.dropped)
        return summaries
