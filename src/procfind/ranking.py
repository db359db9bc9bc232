"""Threshold filtering and ordering of scored candidates."""

import logging
from collections.abc import Callable, Iterable

from procfind.config import SCORE_THRESHOLD
from procfind.errors import PerProcessError
from procfind.models import ScoredCandidate, SortDirective

logger = logging.getLogger(__name__)

CpuTimeLookup = Callable[[int], int]


class Ranker:
    """
    Filters candidates by score and orders the survivors.

    All orderings are descending and stable, so candidates that compare equal
    keep the order of the process index.
    """

    def __init__(
        self,
        threshold: float = SCORE_THRESHOLD,
        cpu_time: CpuTimeLookup | None = None,
    ) -> None:
        """
        Initialize the Ranker.

        Args:
            threshold: Candidates must score strictly above this to be kept.
            cpu_time: Returns a pid's CPU time in milliseconds. Needed only for
                SortDirective.CPU_TIME.
        """
        self._threshold = threshold
        self._cpu_time = cpu_time

    @property
    def threshold(self) -> float:
        """Get the score threshold."""
        return self._threshold

    def rank(
        self,
        candidates: Iterable[ScoredCandidate],
        directive: SortDirective = SortDirective.NONE,
    ) -> list[ScoredCandidate]:
        """Keep candidates above the threshold and order them per the directive."""
        survivors = [c for c in candidates if c.score > self._threshold]

        if directive is SortDirective.MEMORY:
            return sorted(survivors, key=lambda c: c.memory_bytes, reverse=True)
        if directive is SortDirective.CPU_TIME:
            return self._sort_by_cpu_time(survivors)
        return sorted(survivors, key=lambda c: c.score, reverse=True)

    def _sort_by_cpu_time(self, candidates: list[ScoredCandidate]) -> list[ScoredCandidate]:
        """Order by CPU time, looking each pid up exactly once."""
        if self._cpu_time is None:
            raise ValueError("CPU time ordering requires a cpu_time lookup")

        cpu_times: dict[int, int] = {}
        for candidate in candidates:
            try:
                cpu_times[candidate.pid] = self._cpu_time(candidate.pid)
            except PerProcessError:
                # Exited or denied; rank it as idle rather than dropping it
                logger.debug("CPU time unavailable for pid %d, using 0", candidate.pid)
                cpu_times[candidate.pid] = 0

        return sorted(candidates, key=lambda c: cpu_times[c.pid], reverse=True)
