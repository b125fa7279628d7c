from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .aggregation import RegionSummary
from .config import MAX_OUTPUT_BYTES
from .errors import OutputTooLargeError
from .growth import IncidenceSummary

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class JoinedRecord:
    state: str
    cancer: Optional[IncidenceSummary]
    cuisine: Optional[RegionSummary]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state,
            "cancer": self.cancer.to_dict() if self.cancer is not None else None,
            "cuisine": self.cuisine.to_dict() if self.cuisine is not None else None,
        }


def join_summaries(
    cancer_summaries: Sequence[IncidenceSummary],
    cuisine_summaries: Sequence[RegionSummary],
) -> List[JoinedRecord]:
    """One record per state found on either side; the missing side stays None."""
    cancer_by_state = {summary.state: summary for summary in cancer_summaries}
    cuisine_by_state = {summary.state: summary for summary in cuisine_summaries}
    states = sorted(set(cancer_by_state) | set(cuisine_by_state))
    return [
        JoinedRecord(
            state=state,
            cancer=cancer_by_state.get(state),
            cuisine=cuisine_by_state.get(state),
        )
        for state in states
    ]


def records_to_jsonable(records: Sequence[Any]) -> List[Dict[str, Any]]:
    return [record.to_dict() for record in records]


def write_json_outputs(
    documents: Mapping[str, Sequence[Any]],
    output_dir: Path,
    max_bytes: int = MAX_OUTPUT_BYTES,
) -> Dict[str, Path]:
    """Write each record set as an indented JSON array, then enforce the size ceiling."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    for file_name, records in documents.items():
        path = output_dir / file_name
        path.write_text(json.dumps(records_to_jsonable(records), indent=2), encoding="utf-8")
        written[file_name] = path
    for path in written.values():
        size = path.stat().st_size
        if size > max_bytes:
            raise OutputTooLargeError(path, size, max_bytes)
        LOGGER.debug("Wrote %s (%d bytes)", path, size)
    return written
