"""Decoding of spreadsheet rows and document text from files on disk."""

import logging
import zipfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..errors import InputError, UnsupportedFileError
from .sheet_normalization import dataframe_to_records, normalize_dataframe_columns, validate_required_columns

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {'.xlsx', '.xlsm'}
CSV_SUFFIXES = {'.csv'}
PDF_MAGIC = b'%PDF-'


def read_spreadsheet(path: Path, sheet: Optional[Union[str, int]] = None) -> pd.DataFrame:
    """Read the first (or named) worksheet of a spreadsheet into a DataFrame."""
    path = Path(path)
    suffix = path.suffix.lower()

    try:
        if suffix in EXCEL_SUFFIXES:
            df = pd.read_excel(path, sheet_name=sheet if sheet is not None else 0, engine='openpyxl')
        elif suffix in CSV_SUFFIXES:
            df = pd.read_csv(path)
        else:
            raise UnsupportedFileError(f"Unsupported spreadsheet type: {path.name}")
    except UnsupportedFileError:
        raise
    except pd.errors.EmptyDataError:
        df = pd.DataFrame()
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        raise InputError(f"Failed to read spreadsheet {path.name}: {e}") from e

    return normalize_dataframe_columns(df)


def read_records(
    path: Path,
    sheet: Optional[Union[str, int]] = None,
    required_columns: Optional[Sequence[str]] = None
) -> List[Dict[str, Any]]:
    """Read spreadsheet rows as JSON-safe dictionaries.

    Args:
        path: Path to an .xlsx, .xlsm or .csv file
        sheet: Worksheet name or index, defaults to the first sheet
        required_columns: Columns to warn about when missing

    Returns:
        One dictionary per row, keyed by normalized column name
    """
    df = read_spreadsheet(path, sheet)
    if required_columns:
        validate_required_columns(df, list(required_columns))
    records = dataframe_to_records(df)
    logger.info(f"Read {len(records)} rows from {Path(path).name}")
    return records


def is_pdf(path: Path) -> bool:
    """Recognise a PDF by its suffix or by its header bytes."""
    if path.suffix.lower() == '.pdf':
        return True
    with path.open('rb') as f:
        return f.read(len(PDF_MAGIC)) == PDF_MAGIC


def read_document_text(path: Path) -> str:
    """Extract text from a gazette document.

    PDFs are recognised by suffix or by their header bytes, so uploads
    without a file extension still decode. They are read page by page with
    pypdf and joined with newlines. Any other file is read as UTF-8 text.
    """
    path = Path(path)
    try:
        if is_pdf(path):
            reader = PdfReader(str(path))
            text = "\n".join(page.extract_text() or "" for page in reader.pages)
        else:
            text = path.read_text(encoding='utf-8', errors='replace')
    except (OSError, PdfReadError) as e:
        raise InputError(f"Failed to read document {path.name}: {e}") from e

    logger.info(f"Document text length: {len(text)}")
    return text
