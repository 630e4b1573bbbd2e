"""Gazette matcher package."""

from .matcher import GazetteMatcher, match_names
from .processors import extract_candidates, reconcile, score
from .utils import normalize_name

__all__ = ['GazetteMatcher', 'match_names', 'extract_candidates', 'reconcile', 'score', 'normalize_name']
