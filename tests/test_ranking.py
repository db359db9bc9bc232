"""Tests for the Ranker."""

import pytest

from procfind.config import SCORE_THRESHOLD
from procfind.errors import PerProcessError
from procfind.models import ScoredCandidate, SortDirective
from procfind.ranking import Ranker


def _candidate(pid: int, score: float, memory_bytes: int = 0) -> ScoredCandidate:
    return ScoredCandidate(score=score, pid=pid, name=f"proc{pid}", memory_bytes=memory_bytes)


class TestThreshold:
    """Tests for score threshold filtering."""

    def test_default_threshold(self):
        assert Ranker().threshold == SCORE_THRESHOLD == 0.7

    def test_threshold_is_strict(self):
        """Test a score equal to the threshold is dropped."""
        ranked = Ranker().rank([_candidate(1, 0.7), _candidate(2, 0.7000001)])

        assert [c.pid for c in ranked] == [2]

    @pytest.mark.parametrize("directive", list(SortDirective))
    def test_no_low_scores_under_any_directive(self, directive):
        candidates = [_candidate(pid, score) for pid, score in enumerate([0.1, 0.5, 0.7, 0.71, 0.9, 1.0])]

        ranked = Ranker(cpu_time=lambda pid: 0).rank(candidates, directive)

        assert all(c.score > 0.7 for c in ranked)
        assert len(ranked) == 3

    def test_empty_result_is_valid(self):
        assert Ranker().rank([_candidate(1, 0.2)]) == []
        assert Ranker().rank([]) == []

    def test_custom_threshold(self):
        ranked = Ranker(threshold=0.9).rank([_candidate(1, 0.8), _candidate(2, 0.95)])

        assert [c.pid for c in ranked] == [2]


class TestScoreOrder:
    """Tests for the default score ordering."""

    def test_descending_by_score(self):
        ranked = Ranker().rank([_candidate(1, 0.8), _candidate(2, 1.0), _candidate(3, 0.9)])

        assert [c.pid for c in ranked] == [2, 3, 1]

    def test_ties_keep_input_order(self):
        ranked = Ranker().rank([_candidate(5, 0.9), _candidate(3, 1.0), _candidate(4, 0.9), _candidate(1, 1.0)])

        assert [c.pid for c in ranked] == [3, 1, 5, 4]


class TestMemoryOrder:
    """Tests for SortDirective.MEMORY."""

    def test_descending_by_memory_ignoring_score(self):
        candidates = [_candidate(1, 1.0, 100), _candidate(2, 0.8, 300), _candidate(3, 0.9, 200)]

        ranked = Ranker().rank(candidates, SortDirective.MEMORY)

        assert [c.pid for c in ranked] == [2, 3, 1]
        memory = [c.memory_bytes for c in ranked]
        assert memory == sorted(memory, reverse=True)

    def test_ties_keep_input_order(self):
        candidates = [_candidate(1, 0.8, 100), _candidate(2, 1.0, 100), _candidate(3, 0.9, 500)]

        ranked = Ranker().rank(candidates, SortDirective.MEMORY)

        assert [c.pid for c in ranked] == [3, 1, 2]


class TestCpuTimeOrder:
    """Tests for SortDirective.CPU_TIME."""

    def test_descending_by_cpu_time(self):
        cpu_times = {1: 10, 2: 5000, 3: 700}
        candidates = [_candidate(1, 1.0), _candidate(2, 0.8), _candidate(3, 0.9)]

        ranked = Ranker(cpu_time=cpu_times.__getitem__).rank(candidates, SortDirective.CPU_TIME)

        assert [c.pid for c in ranked] == [2, 3, 1]

    def test_looks_up_each_survivor_once(self):
        calls = []

        def cpu_time(pid):
            calls.append(pid)
            return pid * 10

        candidates = [_candidate(1, 1.0), _candidate(2, 0.2), _candidate(3, 0.9), _candidate(4, 0.8)]

        Ranker(cpu_time=cpu_time).rank(candidates, SortDirective.CPU_TIME)

        assert sorted(calls) == [1, 3, 4]

    def test_failed_lookup_counts_as_zero(self):
        """Test a vanished process is kept and ranked as if it used no CPU."""

        def cpu_time(pid):
            if pid == 2:
                raise PerProcessError(pid, "gone")
            return {1: 10, 3: 700}[pid]

        candidates = [_candidate(2, 1.0), _candidate(1, 0.8), _candidate(3, 0.9)]

        ranked = Ranker(cpu_time=cpu_time).rank(candidates, SortDirective.CPU_TIME)

        assert [c.pid for c in ranked] == [3, 1, 2]

    def test_requires_lookup(self):
        with pytest.raises(ValueError, match="cpu_time"):
            Ranker().rank([_candidate(1, 1.0)], SortDirective.CPU_TIME)

    def test_no_lookups_when_nothing_survives(self):
        calls = []

        ranked = Ranker(cpu_time=calls.append).rank([_candidate(1, 0.1)], SortDirective.CPU_TIME)

        assert ranked == []
        assert calls == []
