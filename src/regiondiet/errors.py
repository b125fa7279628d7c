from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence


class PipelineError(RuntimeError):
    """Base class for failures that abort a pipeline run."""


class SourceTableError(PipelineError):
    def __init__(self, path: Path, missing_columns: Sequence[str] = ()):
        self.path = Path(path)
        self.missing_columns = list(missing_columns)
        if self.missing_columns:
            message = f"{self.path} is missing columns: {', '.join(self.missing_columns)}"
        else:
            message = f"Required source table not found: {self.path}"
        super().__init__(message)


class MissingPopulationError(PipelineError):
    def __init__(self, regions: Iterable[str]):
        self.regions = sorted(regions)
        super().__init__(f"Missing population for states: {', '.join(self.regions)}")


class OutputTooLargeError(PipelineError):
    def __init__(self, path: Path, size: int, limit: int):
        self.path = Path(path)
        self.size = size
        self.limit = limit
        super().__init__(f"{self.path.name} too large: {size} bytes (limit {limit})")
