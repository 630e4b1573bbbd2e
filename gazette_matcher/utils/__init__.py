"""Utility functions and helpers."""

from .normalization import normalize_name
from .readers import read_document_text, read_records

__all__ = [
    'normalize_name',
    'read_document_text',
    'read_records'
]
