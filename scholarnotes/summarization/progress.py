"""
Progress reporting for a single pipeline run.

Maps the pipeline's internal counters onto one 0-100 percentage:

    extraction:  (pages_done / total_pages) * 20
    reduction:   20 + (completed_steps / (chunk_count + 3)) * 80

The reduction unit count is coarse (one unit per page plus one per stage
above it). Larger documents therefore complete more groups than there are
units, and the value is clamped at 100. Every value handed to the callback is
in [0, 100] and never lower than the one before it.
"""

from dataclasses import dataclass
from typing import Callable

from scholarnotes.config import EXTRACTION_PROGRESS_SHARE

# Units beyond one-per-page: section, chapter and executive stages
STAGE_UNITS = 3


@dataclass
class ProgressState:
    """
    Counters for one run. Owned by exactly one ProgressReporter.

    Attributes:
        percent: Last reported percentage.
        total_units: Reduction units (chunk_count + 3); 0 before reduction.
        completed_steps: Reduction steps finished so far.
    """
    percent: float = 0.0
    total_units: int = 0
    completed_steps: int = 0


class ProgressReporter:
    """
    Single writer of a run's progress; forwards changes to `on_progress`.

    Args:
        on_progress: Optional callback(percent: float).
        extraction_share: Percentage of the bar owned by text extraction.
    """

    def __init__(self, on_progress: Callable[[float], None] | None = None,
                 extraction_share: float = EXTRACTION_PROGRESS_SHARE):
        self.on_progress = on_progress
        self.extraction_share = extraction_share
        self._state = ProgressState()

    @property
    def percent(self) -> float:
        return self._state.percent

    @property
    def completed_steps(self) -> int:
        return self._state.completed_steps

    @property
    def total_units(self) -> int:
        return self._state.total_units

    def report_extraction(self, pages_done: int, total_pages: int) -> None:
        """Called by the extractor after each page."""
        if total_pages <= 0:
            return
        self._emit((pages_done / total_pages) * self.extraction_share)

    def begin_reduction(self, chunk_count: int) -> None:
        """Size the reduction phase before its first call."""
        self._state.total_units = chunk_count + STAGE_UNITS
        self._state.completed_steps = 0

    def step(self) -> None:
        """One base item, one group, or the executive call has completed."""
        state = self._state
        if state.total_units == 0:
            raise RuntimeError("begin_reduction() must be called before step()")
        state.completed_steps += 1
        reduction_share = 100 - self.extraction_share
        self._emit(self.extraction_share + (state.completed_steps / state.total_units) * reduction_share)

    def finish(self) -> None:
        """Successful run: the bar ends at exactly 100."""
        self._emit(100.0)

    def _emit(self, value: float) -> None:
        value = min(max(value, self._state.percent), 100.0)
        if value == self._state.percent:
            return
        self._state.percent = value
        if self.on_progress:
            self.on_progress(value)
