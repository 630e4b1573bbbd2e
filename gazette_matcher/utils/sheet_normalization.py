"""Spreadsheet column and value normalization utilities."""

from typing import Any, Dict, List
import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def normalize_column_name(name: Any) -> str:
    """Normalize a spreadsheet column name.

    Normalizes by:
    - Replacing multiple spaces with single space
    - Stripping leading/trailing whitespace
    - Preserving special characters and case

    Args:
        name: Raw column header

    Returns:
        Normalized column name

    Examples:
        >>> normalize_column_name("Name of  The Deceased ")
        'Name of The Deceased'
    """
    return ' '.join(str(name).split())


def normalize_dataframe_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize all column names in a DataFrame."""
    return df.rename(columns=normalize_column_name)


def normalize_json_value(value: Any) -> Any:
    """Normalize a value for JSON serialization.

    Handles:
    - NaN/None/NaT -> None
    - numpy types -> Python native types
    - Timestamps -> ISO 8601 strings

    Examples:
        >>> normalize_json_value(np.nan) is None
        True
        >>> normalize_json_value(np.int64(42))
        42
    """
    if isinstance(value, np.ndarray):
        return value.tolist()

    if pd.isna(value):
        return None

    if isinstance(value, (np.integer, np.floating, np.bool_)):
        return value.item()

    if isinstance(value, pd.Timestamp):
        return value.isoformat()

    return value


def validate_json_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Ensure all values in a dict are JSON serializable."""
    return {
        str(k): normalize_json_value(v)
        for k, v in data.items()
    }


def dataframe_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a DataFrame into a list of JSON-safe row dictionaries."""
    df = normalize_dataframe_columns(df)
    return [validate_json_data(row) for row in df.to_dict(orient='records')]


def validate_required_columns(df: pd.DataFrame, required_columns: List[str]) -> bool:
    """Validate that all required columns are present after normalization."""
    missing = [col for col in required_columns if col not in df.columns]
    if missing:
        logger.warning(f"Missing required columns: {missing}")
        return False
    return True
