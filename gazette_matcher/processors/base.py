"""Base processor for record batches."""
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Dict, Any, Optional, List, Mapping, Sequence, Tuple
import logging
import threading
import time

from ..errors import InputError, ReconciliationCancelled


class ProcessingStats:
    """Statistics for processing operations."""

    def __init__(self):
        """Initialize stats with default values."""
        self._stats = {
            'total_processed': 0,
            'successful_batches': 0,
            'total_warnings': 0,
            'processing_time': 0.0,
            'started_at': datetime.now(timezone.utc),
            'completed_at': None
        }

    def __getattr__(self, name: str) -> Any:
        """Get stat value by attribute name."""
        try:
            return self._stats[name]
        except KeyError:
            # Create new stat with default value 0
            self._stats[name] = 0
            return 0

    def __setattr__(self, name: str, value: Any) -> None:
        """Set stat value by attribute name."""
        if name == '_stats':
            super().__setattr__(name, value)
        else:
            self._stats[name] = value


Record = Mapping[str, Any]


class BaseProcessor(ABC):
    """Abstract base class for record processors.

    Records are split into batches. With more than one worker the batches run
    on a thread pool; results are always reassembled in input order.
    """

    def __init__(
        self,
        batch_size: int = 500,
        max_workers: int = 1,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
        debug: bool = False
    ):
        """Initialize processor with batching configuration.

        Args:
            batch_size: Number of records to process in each batch
            max_workers: Number of threads used to process batches
            timeout: Seconds after which processing is aborted
            cancel_event: Event that aborts processing when set
            debug: Enable debug logging
        """
        self.batch_size = batch_size
        self.max_workers = max_workers
        self.timeout = timeout
        self.cancel_event = cancel_event
        self.debug = debug
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = ProcessingStats()
        self._deadline: Optional[float] = None

        if self.debug:
            self.logger.debug(
                f"Initialized {self.__class__.__name__} with batch_size={batch_size}, "
                f"max_workers={max_workers}"
            )

    @abstractmethod
    def validate_data(self, records: Sequence[Record]) -> Tuple[List[str], List[str]]:
        """Validate records before processing.

        Args:
            records: Records to validate

        Returns:
            Tuple of (critical_issues, warnings)
        """
        pass

    @abstractmethod
    def _process_record(self, record: Record) -> Optional[Dict[str, Any]]:
        """Process a single record.

        Returns:
            The output record, or None when the record is dropped
        """
        pass

    def check_cancelled(self) -> None:
        """Raise if the run was cancelled or ran past its deadline."""
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise ReconciliationCancelled("Processing cancelled")
        if self._deadline is not None and time.monotonic() > self._deadline:
            raise ReconciliationCancelled(f"Processing exceeded timeout of {self.timeout}s")

    def _process_batch(self, batch_num: int, batch: Sequence[Record]) -> List[Dict[str, Any]]:
        """Process one batch, checking for cancellation between records."""
        if self.debug:
            batch_start = time.time()
            self.logger.debug(f"Starting batch {batch_num} ({len(batch)} records)")

        results = []
        for record in batch:
            self.check_cancelled()
            output = self._process_record(record)
            if output is not None:
                results.append(output)

        if self.debug:
            self.logger.debug(f"Batch {batch_num} completed in {time.time() - batch_start:.3f}s")
        return results

    def process(self, records: Sequence[Record]) -> List[Dict[str, Any]]:
        """Process records in batches.

        Args:
            records: Records to process

        Returns:
            Output records in input order

        Raises:
            InputError: If validation reports critical issues
            ReconciliationCancelled: If the run is cancelled or times out
        """
        start_time = time.time()
        if self.debug:
            self.logger.debug(f"Starting processing of {len(records)} records")

        critical_issues, warnings = self.validate_data(records)

        # Log warnings but continue
        if warnings:
            self.stats.total_warnings += len(warnings)
            for warning in warnings:
                self.logger.warning(f"  - {warning}")

        # Stop on critical issues
        if critical_issues:
            for issue in critical_issues:
                self.logger.error(f"  - {issue}")
            raise InputError("; ".join(critical_issues))

        if self.timeout is not None:
            self._deadline = time.monotonic() + self.timeout

        batches = [
            records[start_idx:start_idx + self.batch_size]
            for start_idx in range(0, len(records), self.batch_size)
        ]
        if self.debug:
            self.logger.debug(f"Processing {len(records)} records in {len(batches)} batches")

        if self.max_workers > 1 and len(batches) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = [
                    executor.submit(self._process_batch, batch_num, batch)
                    for batch_num, batch in enumerate(batches, 1)
                ]
                try:
                    batch_results = [future.result() for future in futures]
                except ReconciliationCancelled:
                    for future in futures:
                        future.cancel()
                    raise
        else:
            batch_results = [
                self._process_batch(batch_num, batch)
                for batch_num, batch in enumerate(batches, 1)
            ]

        results = [output for batch in batch_results for output in batch]

        self.stats.total_processed += len(records)
        self.stats.successful_batches += len(batches)
        self.stats.processing_time += time.time() - start_time
        self.stats.completed_at = datetime.now(timezone.utc)

        if self.debug:
            self.logger.debug(f"Processing completed in {self.stats.processing_time:.3f}s")

        return results
