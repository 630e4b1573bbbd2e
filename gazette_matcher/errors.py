"""Exception types raised by the matcher and its boundary layers."""


class MatcherError(Exception):
    """Base class for all gazette matcher errors."""


class InputError(MatcherError, ValueError):
    """Input records or files cannot be used for matching."""


class UnsupportedFileError(InputError):
    """File type is not one the readers know how to decode."""


class ConfigError(MatcherError, ValueError):
    """A configuration value is missing or out of range."""


class ReconciliationCancelled(MatcherError):
    """Reconciliation was aborted before every record was processed."""
