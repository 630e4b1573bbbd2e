"""Similarity scoring between normalized names."""

from typing import Iterable, NamedTuple

from rapidfuzz import fuzz


class MatchResult(NamedTuple):
    """Best candidate for one input name."""
    best_candidate: str
    score: int


NO_MATCH = MatchResult("", 0)


def score(a: str, b: str) -> int:
    """Score two normalized names on a 0-100 scale.

    Uses the Indel-distance ratio, which is symmetric in its arguments.
    Identical strings (including two empty strings) score 100; an empty
    string against a non-empty one scores 0.
    """
    a = a or ""
    b = b or ""
    if a == b:
        return 100
    return int(round(fuzz.ratio(a, b)))


def best_match(name: str, candidates: Iterable[str]) -> MatchResult:
    """Find the highest scoring candidate for a name.

    Candidates are scanned in iteration order and only a strictly higher
    score replaces the current best, so ties go to the first candidate seen.
    Returns NO_MATCH when there are no candidates.
    """
    best = NO_MATCH
    seen_any = False
    for candidate in candidates:
        candidate_score = score(name, candidate)
        if not seen_any or candidate_score > best.score:
            best = MatchResult(candidate, candidate_score)
            seen_any = True
            if candidate_score == 100:
                break
    return best
