"""
Logging configuration for the gazette matcher.
Provides consistent logging setup across the CLI and the HTTP service.
"""

import logging
import sys


class DebugFormatter(logging.Formatter):
    """Custom formatter for debug output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with timestamp and source."""
        # Add color if output is to terminal
        if sys.stderr.isatty():
            cyan = '\033[0;36m'
            reset = '\033[0m'
            return f"{cyan}[{record.created:.3f}] {record.name}: {record.getMessage()}{reset}"
        return f"[{record.created:.3f}] {record.name}: {record.getMessage()}"


def setup_logging(debug: bool = False, level: str = 'INFO') -> None:
    """Setup logging configuration.

    Args:
        debug: Enable debug logging
        level: Log level name used when debug is off
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(DebugFormatter())
    root_logger.addHandler(console_handler)

    # Keep third-party chatter at WARNING level
    logging.getLogger('pypdf').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)

    # Ensure handler uses debug formatter
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setFormatter(DebugFormatter())

    return logger
