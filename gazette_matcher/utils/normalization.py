"""Name normalization utilities.

This module reduces names taken from the spreadsheet and from the gazette
text to one canonical form so the two sources can be compared directly.
"""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

ALIAS_RE = re.compile(r'\balias\b.*', re.DOTALL)
WHITESPACE_RE = re.compile(r'\s+')


def normalize_name(name: Any) -> str:
    """Normalize a person's name for consistent matching.

    Applies the following transformations in order:
    1. Convert to lowercase
    2. Drop everything from the first "alias" to the end of the string
       (e.g. "John Doe alias Jon Doe" -> "john doe")
    3. Collapse runs of whitespace to a single space
    4. Strip leading/trailing whitespace

    Args:
        name: The raw name value, usually a spreadsheet cell

    Returns:
        The normalized name, or an empty string for empty or non-string input

    Examples:
        >>> normalize_name("John Doe alias Jon Doe")
        'john doe'
        >>> normalize_name("  MARY   ANN\\tSMITH ")
        'mary ann smith'
        >>> normalize_name(None)
        ''
    """
    if not name or not isinstance(name, str):
        return ""

    name = name.lower()
    name = ALIAS_RE.sub("", name)
    name = WHITESPACE_RE.sub(" ", name)
    return name.strip()
