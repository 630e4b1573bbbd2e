from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence
import logging
import threading

from .cli.config import Config
from .processors.extractor import extract_candidates, extract_document_date
from .processors.reconciler import Reconciler
from .utils.readers import read_document_text, read_records

logger = logging.getLogger(__name__)


class GazetteMatcher:
    """Runs the full match from decoded inputs (or files) to a response payload."""

    def __init__(self, config: Config, debug: bool = False):
        config.validate()
        self.config = config
        self.debug = debug

    def match_files(
        self,
        spreadsheet: Path,
        document: Path,
        cancel_event: Optional[threading.Event] = None
    ) -> Dict[str, Any]:
        """Read the spreadsheet and gazette document, then match them."""
        records = read_records(spreadsheet, required_columns=[self.config.name_column])
        text = read_document_text(document)
        return self.match(records, text, cancel_event=cancel_event)

    def match(
        self,
        records: Sequence[Mapping[str, Any]],
        text: str,
        cancel_event: Optional[threading.Event] = None
    ) -> Dict[str, Any]:
        """Match spreadsheet records against names found in gazette text.

        Returns:
            Dict with the reconciled records under "matched" and run
            counts under "summary"
        """
        candidates = extract_candidates(text)
        logger.info(f"Gazette names extracted: {len(candidates)}")

        reconciler = Reconciler(
            candidates,
            threshold=self.config.threshold,
            mode=self.config.mode,
            name_column=self.config.name_column,
            approval_date=self.config.resolve_approval_date(),
            gazette_date=extract_document_date(text, self.config.date_format),
            batch_size=self.config.batch_size,
            max_workers=self.config.max_workers,
            timeout=self.config.timeout,
            cancel_event=cancel_event,
            debug=self.debug
        )
        matched = reconciler.reconcile(records)

        return {
            'matched': matched,
            'summary': self._summarize(records, candidates, reconciler)
        }

    def _summarize(self, records, candidates, reconciler: Reconciler) -> Dict[str, Any]:
        return {
            'records': len(records),
            'candidates': len(candidates),
            'matched': reconciler.stats.matched,
            'threshold': reconciler.threshold,
            'mode': reconciler.mode,
            'gazetteDate': reconciler.gazette_date
        }

    def extract(self, text: str) -> Dict[str, Any]:
        """Candidate names and document date found in gazette text."""
        candidates = extract_candidates(text)
        return {
            'candidates': candidates.to_list(),
            'gazetteDate': extract_document_date(text, self.config.date_format)
        }


def match_names(records: Sequence[Mapping[str, Any]], text: str, threshold: int = 100) -> List[Dict[str, Any]]:
    """Filter-mode match of records against gazette text with default settings."""
    config = Config(threshold=threshold)
    return GazetteMatcher(config).match(records, text)['matched']
