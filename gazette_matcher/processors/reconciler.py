"""Reconcile spreadsheet records against gazette candidates."""

import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..errors import ConfigError
from ..utils.normalization import normalize_name
from .base import BaseProcessor, Record
from .error_tracker import ErrorTracker
from .extractor import CandidateSet
from .scoring import MatchResult, NO_MATCH, best_match
from .validator import DEFAULT_NAME_COLUMN, RecordValidator

MODE_FILTER = 'filter'
MODE_ANNOTATE = 'annotate'
MODES = (MODE_FILTER, MODE_ANNOTATE)

APPROVED = 'Approved'
MAX_SCORE = 100


def validate_threshold(threshold: Any) -> int:
    """Return the threshold as an int, raising ConfigError if it is unusable."""
    if isinstance(threshold, str):
        try:
            value = int(threshold.strip())
        except ValueError:
            raise ConfigError(f"threshold must be an integer, got {threshold!r}")
    elif isinstance(threshold, int) and not isinstance(threshold, bool):
        value = threshold
    elif isinstance(threshold, float) and threshold.is_integer():
        value = int(threshold)
    else:
        raise ConfigError(f"threshold must be an integer, got {threshold!r}")

    if not 0 <= value <= MAX_SCORE:
        raise ConfigError(f"threshold must be between 0 and {MAX_SCORE}, got {value}")
    return value


class Reconciler(BaseProcessor):
    """Match each record's name against the gazette candidates.

    In filter mode only records scoring at or above the threshold are
    returned. In annotate mode every record is returned, and records with a
    perfect score are marked approved.
    """

    def __init__(
        self,
        candidates: Iterable[str],
        threshold: int = MAX_SCORE,
        mode: str = MODE_FILTER,
        name_column: str = DEFAULT_NAME_COLUMN,
        approval_date: str = '',
        gazette_date: str = '',
        **kwargs
    ):
        super().__init__(**kwargs)
        if mode not in MODES:
            raise ConfigError(f"mode must be one of: {', '.join(MODES)}")

        if not isinstance(candidates, CandidateSet):
            candidates = CandidateSet(candidates)
        self.candidates = candidates
        self.threshold = validate_threshold(threshold)
        self.mode = mode
        self.name_column = name_column
        self.approval_date = approval_date
        self.gazette_date = gazette_date
        self.error_tracker = ErrorTracker()

    def validate_data(self, records: Sequence[Record]) -> Tuple[List[str], List[str]]:
        validator = RecordValidator(self.name_column)
        validator.validate(records)

        for issue in validator.warnings:
            self.error_tracker.add_error(
                'EMPTY_NAME',
                f"Row {issue.row_number} has no name",
                {'row': issue.row_number}
            )

        warnings = []
        if validator.warnings:
            warnings.append(f"{len(validator.warnings)} rows have no name and will score 0")
        if records and not self.candidates:
            warnings.append("No candidate names were extracted from the gazette")
        return [issue.message for issue in validator.critical], warnings

    def match_name(self, name: str) -> MatchResult:
        if not name:
            return NO_MATCH
        return best_match(name, self.candidates)

    def _process_record(self, record: Record) -> Optional[Dict[str, Any]]:
        excel_name = normalize_name(record.get(self.name_column))
        result = self.match_name(excel_name)

        output = dict(record)
        output['excelName'] = excel_name
        output['gazetteMatch'] = result.best_candidate
        output['score'] = result.score

        if self.mode == MODE_FILTER:
            return output if result.score >= self.threshold else None

        approved = result.score == MAX_SCORE
        output['status'] = APPROVED if approved else ''
        output['approvalDate'] = self.approval_date if approved else ''
        output['gazetteDate'] = self.gazette_date
        return output

    def reconcile(self, records: Sequence[Record]) -> List[Dict[str, Any]]:
        """Reconcile records against the candidate set.

        Args:
            records: Spreadsheet rows, each a mapping of column to value

        Returns:
            Reconciled records in input order

        Raises:
            InputError: If the records have no usable name column
            ReconciliationCancelled: If the run is cancelled or times out
        """
        results = self.process(list(records))
        self.stats.matched = sum(1 for result in results if result['score'] >= self.threshold)
        self.logger.info(f"Matching complete: {self.stats.matched} matches found")
        self.error_tracker.log_summary(self.logger)
        return results


def reconcile(
    records: Sequence[Mapping[str, Any]],
    candidates: Iterable[str],
    threshold: int = MAX_SCORE,
    mode: str = MODE_FILTER,
    cancel_event: Optional[threading.Event] = None,
    **kwargs
) -> List[Dict[str, Any]]:
    """Convenience wrapper around Reconciler for one-off calls."""
    reconciler = Reconciler(
        candidates,
        threshold=threshold,
        mode=mode,
        cancel_event=cancel_event,
        **kwargs
    )
    return reconciler.reconcile(records)
