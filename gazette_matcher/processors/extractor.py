"""Candidate name extraction from gazette text."""

import logging
import re
from datetime import datetime
from typing import Iterable, Iterator, Tuple

from ..utils.normalization import normalize_name

logger = logging.getLogger(__name__)

# Formal notice phrasing: "... to the estate of Jane Smith, who died ..."
ESTATE_RE = re.compile(
    r'(to the estate of|estate of|re:|for|by)\s+(.*?)(?:,|\n| who died| deceased)',
    re.IGNORECASE
)

# Two or more capitalized words separated by single spaces
CAPITALIZED_RE = re.compile(r'\b([A-Z][a-z]+(?: [A-Z][a-z]+)+)\b')

NUMERIC_DATE_RE = re.compile(r'\b(\d{1,2})[/.-](\d{1,2})[/.-](\d{4})\b')
LONG_DATE_RE = re.compile(
    r'\b(\d{1,2})(?:st|nd|rd|th)?\s+'
    r'(January|February|March|April|May|June|July|August|September|October|November|December)'
    r',?\s+(\d{4})\b',
    re.IGNORECASE
)


class CandidateSet:
    """Unique normalized candidate names in first-seen order.

    Membership is what matters for matching. Insertion order is kept only so
    that the best-match tie-break is deterministic between runs.
    """

    def __init__(self, names: Iterable[str] = ()):
        unique = dict.fromkeys(name for name in names if name)
        self._names: Tuple[str, ...] = tuple(unique)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CandidateSet):
            return set(self._names) == set(other._names)
        if isinstance(other, (set, frozenset)):
            return set(self._names) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._names))

    def __repr__(self) -> str:
        return f"CandidateSet({list(self._names)!r})"

    def to_list(self) -> list:
        return list(self._names)


def extract_estate_names(text: str) -> Iterator[str]:
    """Yield normalized names introduced by estate-notice phrasing."""
    for match in ESTATE_RE.finditer(text):
        yield normalize_name(match.group(2))


def extract_capitalized_names(text: str) -> Iterator[str]:
    """Yield normalized runs of capitalized words anywhere in the text."""
    for match in CAPITALIZED_RE.finditer(text):
        yield normalize_name(match.group(1))


def extract_candidates(text: str) -> CandidateSet:
    """Extract the set of candidate names mentioned in gazette text.

    Two strategies are combined. The estate-phrase pattern is precise when
    the notice follows its usual wording; the capitalized-sequence pattern
    catches names written anywhere else. Both feed one set, so a name found
    by both appears once.

    Args:
        text: Raw text decoded from the gazette document

    Returns:
        CandidateSet of normalized names, empty when nothing was found
    """
    if not text:
        return CandidateSet()

    estate_names = list(extract_estate_names(text))
    fallback_names = list(extract_capitalized_names(text))
    candidates = CandidateSet(estate_names + fallback_names)

    logger.debug(
        f"Extracted {len(candidates)} candidates "
        f"({len(estate_names)} estate matches, {len(fallback_names)} capitalized runs)"
    )
    return candidates


def extract_document_date(text: str, date_format: str = '%d/%m/%Y') -> str:
    """Find the first date printed in the document.

    Recognizes numeric day-first dates (05/06/2025, 5-6-2025, 05.06.2025) and
    long-form dates (5th June 2025). Whichever appears earliest in the text
    wins.

    Args:
        text: Raw document text
        date_format: strftime format for the returned value

    Returns:
        The formatted date, or an empty string if no valid date is found
    """
    if not text:
        return ""

    found = []
    for match in NUMERIC_DATE_RE.finditer(text):
        day, month, year = (int(part) for part in match.groups())
        try:
            found.append((match.start(), datetime(year, month, day)))
            break
        except ValueError:
            continue

    for match in LONG_DATE_RE.finditer(text):
        day, month_name, year = match.groups()
        try:
            parsed = datetime.strptime(f"{int(day)} {month_name.title()} {year}", '%d %B %Y')
        except ValueError:
            continue
        found.append((match.start(), parsed))
        break

    if not found:
        return ""

    _, earliest = min(found, key=lambda item: item[0])
    return earliest.strftime(date_format)
