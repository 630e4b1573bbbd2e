"""
Processors for extracting, scoring and reconciling deceased persons' names.
"""

from .extractor import CandidateSet, extract_candidates, extract_document_date
from .scoring import MatchResult, best_match, score
from .reconciler import Reconciler, reconcile

__all__ = [
    'CandidateSet',
    'extract_candidates',
    'extract_document_date',
    'MatchResult',
    'best_match',
    'score',
    'Reconciler',
    'reconcile'
]
