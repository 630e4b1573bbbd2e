"""Error and warning aggregation for record processors."""

from collections import defaultdict
from typing import Dict, Optional, Set
import logging


class ErrorTracker:
    """Track and aggregate issues found while processing records."""

    def __init__(self, max_samples: int = 3):
        """Initialize error tracker.

        Args:
            max_samples: Maximum number of samples to store per error type
        """
        self.error_counts = defaultdict(int)
        self.error_samples = defaultdict(list)
        self.max_samples = max_samples
        self.seen_errors: Set[str] = set()  # Track unique error instances

    def add_error(self, error_type: str, message: str, context: Optional[Dict] = None) -> None:
        """Add an error occurrence.

        Args:
            error_type: Category/type of error
            message: Error message
            context: Optional context data for the error
        """
        error_key = f"{error_type}:{message}"

        # Only track if we haven't seen this exact error before
        if error_key not in self.seen_errors:
            self.seen_errors.add(error_key)
            self.error_counts[error_type] += 1

            if len(self.error_samples[error_type]) < self.max_samples:
                self.error_samples[error_type].append({
                    'message': message,
                    'context': context or {}
                })

    def log_summary(self, logger: logging.Logger) -> None:
        """Log error summary.

        Args:
            logger: Logger to use for output
        """
        if not self.error_counts:
            return

        logger.warning("Issue summary:")
        for error_type, count in self.error_counts.items():
            logger.warning(f"{error_type} ({count} occurrences):")

            for i, sample in enumerate(self.error_samples[error_type], 1):
                logger.warning(f"  Sample {i}: {sample['message']}")
                for key, value in sample['context'].items():
                    logger.warning(f"    {key}: {value}")
