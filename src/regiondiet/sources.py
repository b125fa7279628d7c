"""Adapters for the three recipe table shapes and the incidence table.

Each adapter turns one raw row into a classified record, or returns None when
the row cannot be attributed to a state.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

import pandas as pd

from .aggregation import ClassifiedObservation, IncidenceRow
from .classifiers import classify_diet, infer_region, is_sweet, tokenize_ingredients
from .config import INCIDENCE_YEARS
from .errors import SourceTableError
from .regions import is_sentinel, normalize_region

LOGGER = logging.getLogger(__name__)

INCIDENCE_REGION_COLUMN = "State/UT"


def to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def _text(row: Mapping[str, Any], key: str) -> str:
    value = row.get(key)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return str(value)


def _canonical_state(raw: str) -> Optional[str]:
    state = normalize_region(raw)
    return None if is_sentinel(state) else state


def load_table(path: Path, required_columns: Sequence[str] = ()) -> pd.DataFrame:
    if not path.exists():
        raise SourceTableError(path)
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [column for column in required_columns if column not in df.columns]
    if missing:
        raise SourceTableError(path, missing)
    return df


def load_optional_table(path: Path, required_columns: Sequence[str] = ()) -> Optional[pd.DataFrame]:
    if not path.exists():
        LOGGER.warning("Optional source %s not found, skipping", path)
        return None
    return load_table(path, required_columns)


def load_manual_recipes(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        LOGGER.warning("Optional source %s not found, skipping", path)
        return []
    entries = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise SourceTableError(path, ["<top-level list>"])
    return entries


def incidence_row(row: Mapping[str, Any], years: Sequence[int] = INCIDENCE_YEARS) -> Optional[IncidenceRow]:
    region = _text(row, INCIDENCE_REGION_COLUMN).strip()
    if not region:
        return None
    counts = {year: to_number(row.get(str(year))) for year in years}
    return IncidenceRow(region=region, counts=counts)


def iter_incidence_rows(df: pd.DataFrame, years: Sequence[int] = INCIDENCE_YEARS) -> Iterator[IncidenceRow]:
    skipped = 0
    for row in df.to_dict("records"):
        record = incidence_row(row, years)
        if record is None:
            skipped += 1
            continue
        yield record
    if skipped:
        LOGGER.info("Skipped %d incidence rows without a state", skipped)


def scraped_recipe_observation(row: Mapping[str, Any]) -> Optional[ClassifiedObservation]:
    """Recipe-site rows carry no state column; the state comes from the cuisine label."""
    region = (
        infer_region(_text(row, "cuisine"))
        or infer_region(_text(row, "recipe_name"))
        or infer_region(_text(row, "course"))
    )
    if not region:
        return None
    name = _text(row, "recipe_name").strip()
    if not name:
        return None
    raw_ingredients = _text(row, "translated_ingredients").strip()
    tokens = tokenize_ingredients(raw_ingredients)
    return ClassifiedObservation(
        region=region,
        diet=classify_diet(_text(row, "diet")),
        sweet=is_sweet(name, _text(row, "course"), tokens, raw_ingredients),
        prep_minutes=to_number(row.get("prep_time_mins")),
        cook_minutes=to_number(row.get("cook_time_mins")),
        tokens=tuple(tokens),
    )


def legacy_dish_observation(row: Mapping[str, Any]) -> Optional[ClassifiedObservation]:
    region = _canonical_state(_text(row, "state"))
    if region is None:
        return None
    name = _text(row, "name").strip()
    raw_ingredients = _text(row, "ingredients")
    tokens = tokenize_ingredients(raw_ingredients)
    flavor = _text(row, "flavor_profile").strip().lower()
    sweet = flavor == "sweet" or is_sweet(name, _text(row, "course"), tokens, raw_ingredients)
    return ClassifiedObservation(
        region=region,
        diet=classify_diet(_text(row, "diet")),
        sweet=sweet,
        prep_minutes=to_number(row.get("prep_time")),
        cook_minutes=to_number(row.get("cook_time")),
        tokens=tuple(tokens),
    )


def manual_recipe_observation(entry: Mapping[str, Any]) -> Optional[ClassifiedObservation]:
    region = _canonical_state(_text(entry, "state"))
    if region is None:
        return None
    ingredients = entry.get("ingredients") or []
    raw_ingredients = ", ".join(str(item) for item in ingredients)
    tokens = tokenize_ingredients(raw_ingredients)
    explicit_sweet = entry.get("is_sweet")
    if explicit_sweet is None:
        sweet = is_sweet(_text(entry, "recipe_name"), None, tokens, raw_ingredients)
    else:
        sweet = bool(explicit_sweet)
    return ClassifiedObservation(
        region=region,
        diet=classify_diet(_text(entry, "diet")),
        sweet=sweet,
        prep_minutes=to_number(entry.get("prep_time_mins")),
        cook_minutes=to_number(entry.get("cook_time_mins")),
        tokens=tuple(tokens),
    )


def iter_observations(rows, adapter, source: str) -> Iterator[ClassifiedObservation]:
    kept = 0
    dropped = 0
    for row in rows:
        observation = adapter(row)
        if observation is None:
            dropped += 1
            continue
        kept += 1
        yield observation
    LOGGER.info("%s: %d observations classified, %d rows dropped", source, kept, dropped)
