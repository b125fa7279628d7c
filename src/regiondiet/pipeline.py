from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, List

from .aggregation import CuisineAggregator, IncidenceAggregator
from .config import CorrelationConfig, PipelineConfig, PipelinePaths
from .correlation import ComboSuggestion, candidate_x_metrics, discover_top_correlations, incidence_metrics
from .join import JoinedRecord, join_summaries, write_json_outputs
from .sources import (
    INCIDENCE_REGION_COLUMN,
    iter_incidence_rows,
    iter_observations,
    legacy_dish_observation,
    load_manual_recipes,
    load_optional_table,
    load_table,
    manual_recipe_observation,
    scraped_recipe_observation,
)

LOGGER = logging.getLogger(__name__)

CANCER_OUTPUT = "cancer_by_state.json"
CUISINE_OUTPUT = "cuisine_by_state.json"
JOINED_OUTPUT = "joined_state_metrics.json"


def _ingest_cuisine(paths: PipelinePaths) -> CuisineAggregator:
    aggregator = CuisineAggregator()
    scraped = load_optional_table(paths.scraped_recipes_csv())
    if scraped is not None:
        aggregator.extend(
            iter_observations(scraped.to_dict("records"), scraped_recipe_observation, "scraped recipes")
        )
    legacy = load_optional_table(paths.legacy_recipes_csv())
    if legacy is not None:
        aggregator.extend(iter_observations(legacy.to_dict("records"), legacy_dish_observation, "legacy dishes"))
    manual = load_manual_recipes(paths.manual_recipes_json())
    aggregator.extend(iter_observations(manual, manual_recipe_observation, "manual recipes"))
    return aggregator


def build_joined_records(config: PipelineConfig) -> Dict[str, List]:
    paths = config.paths
    incidence_df = load_table(paths.incidence_csv(), [INCIDENCE_REGION_COLUMN])
    incidence = IncidenceAggregator(config.incidence_years, config.cagr_span)
    for row in iter_incidence_rows(incidence_df, config.incidence_years):
        incidence.add_row(row)
    cancer_rows = incidence.finalize()

    cuisine_rows = _ingest_cuisine(paths).finalize()
    joined = join_summaries(cancer_rows, cuisine_rows)
    return {CANCER_OUTPUT: cancer_rows, CUISINE_OUTPUT: cuisine_rows, JOINED_OUTPUT: joined}


def top_correlations(
    joined: List[JoinedRecord], config: PipelineConfig, limit: int
) -> List[ComboSuggestion]:
    combos = discover_top_correlations(
        joined,
        candidate_x_metrics(joined, config.correlation),
        incidence_metrics(config.incidence_years, config.cagr_span),
        min_samples=config.correlation.min_samples,
    )
    return combos[:limit]


def run_pipeline(config: PipelineConfig) -> Dict[str, Path]:
    documents = build_joined_records(config)
    outputs = write_json_outputs(documents, config.paths.output_dir, config.max_output_bytes)

    if config.top_correlations > 0:
        for rank, combo in enumerate(
            top_correlations(documents[JOINED_OUTPUT], config, config.top_correlations), start=1
        ):
            LOGGER.info(
                "#%d %s vs %s: r=%.3f (n=%d)", rank, combo.x.label, combo.y.label, combo.r, combo.sample_size
            )
    return outputs


def _parse_args() -> argparse.Namespace:
    defaults = PipelinePaths.from_env()
    parser = argparse.ArgumentParser(
        description="Build per-state cancer incidence and cuisine summaries and join them."
    )
    parser.add_argument("--data-dir", type=str, default=str(defaults.data_dir), help="Directory containing the source tables.")
    parser.add_argument("--output-dir", type=str, default=str(defaults.output_dir), help="Where to write the derived JSON documents.")
    parser.add_argument("--top-correlations", type=int, default=0, help="Log the N strongest cuisine/incidence correlations.")
    parser.add_argument("--min-samples", type=int, default=6, help="Minimum paired states before a metric pair is scored.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args()


def main():
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    paths = PipelinePaths(data_dir=Path(args.data_dir), output_dir=Path(args.output_dir))
    config = PipelineConfig(
        paths=paths,
        correlation=CorrelationConfig(min_samples=args.min_samples),
        top_correlations=args.top_correlations,
    )
    run_pipeline(config)
    print(f"[regiondiet] Derived documents saved to: {paths.output_dir.resolve()}")


if __name__ == "__main__":
    main()
