"""Fuzzy scoring of process records against a search term."""

import re
from collections.abc import Iterable

from rapidfuzz.distance import JaroWinkler

from procfind.models import ProcessRecord, ScoredCandidate

_PID_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_pid(term: str) -> int | None:
    if _PID_PATTERN.fullmatch(term):
        return int(term)
    return None


def similarity(a: str, b: str) -> float:
    """Jaro-Winkler similarity of two strings, in [0, 1]."""
    return JaroWinkler.normalized_similarity(a, b)


def score_record(term: str, record: ProcessRecord) -> float:
    """
    Score how well a search term matches a process record.

    The score is the best of three signals: similarity to the process name,
    an exact pid match (always 1.0), and similarity to the "<pid> - <name>"
    display string offered by autocomplete. Comparisons are case-insensitive.
    """
    term_lower = term.lower()

    name_score = similarity(term_lower, record.name.lower())
    pid_score = 1.0 if _parse_pid(term) == record.pid else 0.0
    display_score = similarity(term_lower, record.display.lower())

    return max(name_score, pid_score, display_score)


def score_index(term: str, records: Iterable[ProcessRecord]) -> list[ScoredCandidate]:
    """Score every record, keeping the records' order."""
    return [
        ScoredCandidate(
            score=score_record(term, record),
            pid=record.pid,
            name=record.name,
            memory_bytes=record.memory_bytes,
        )
        for record in records
    ]
