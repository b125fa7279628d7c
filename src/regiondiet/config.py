from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


@dataclass
class PipelinePaths:
    """Input/output paths required by the build pipeline."""

    data_dir: Path = Path("data")
    output_dir: Path = Path("public/derived")
    incidence_file: str = "cancer_incidence_india.csv"
    scraped_recipes_file: str = "archanaskitchen_recipes.csv"
    legacy_recipes_file: str = "legacy_indian_food.csv"
    manual_recipes_file: str = "manual_ut_recipes.json"

    def incidence_csv(self) -> Path:
        return self.data_dir / self.incidence_file

    def scraped_recipes_csv(self) -> Path:
        return self.data_dir / self.scraped_recipes_file

    def legacy_recipes_csv(self) -> Path:
        return self.data_dir / self.legacy_recipes_file

    def manual_recipes_json(self) -> Path:
        return self.data_dir / self.manual_recipes_file

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "PipelinePaths":
        load_dotenv(env_file)
        paths = cls()
        data_dir = os.getenv("REGIONDIET_DATA_DIR")
        output_dir = os.getenv("REGIONDIET_OUTPUT_DIR")
        if data_dir:
            paths.data_dir = Path(data_dir)
        if output_dir:
            paths.output_dir = Path(output_dir)
        return paths


@dataclass
class CorrelationConfig:
    """Bounds for the exhaustive metric-pair search."""

    min_samples: int = 6
    min_ingredient_regions: int = 5
    max_ingredients: int = 40
    top_k: int = 10


INCIDENCE_YEARS: Tuple[int, ...] = (2019, 2020, 2021, 2022)
CAGR_SPAN: Tuple[int, int] = (2019, 2022)
MAX_OUTPUT_BYTES = 1_000_000


@dataclass
class PipelineConfig:
    paths: PipelinePaths = field(default_factory=PipelinePaths)
    correlation: CorrelationConfig = field(default_factory=CorrelationConfig)
    incidence_years: Tuple[int, ...] = INCIDENCE_YEARS
    cagr_span: Tuple[int, int] = CAGR_SPAN
    max_output_bytes: int = MAX_OUTPUT_BYTES
    top_correlations: int = 0
