"""
Cell utilities for tabular sources.

Normalizes raw spreadsheet cells (pandas objects, NaN, floats) into the
plain strings and numbers carried by rows.
"""
import math
from typing import Optional, Union

import pandas as pd

Number = Union[int, float]


def is_blank(value) -> bool:
    """True for None, NaN/NaT and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ''
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def is_missing(value) -> bool:
    """True for None and NaN/NaT only; whitespace strings are values."""
    if value is None or isinstance(value, str):
        return value is None
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _integral(value):
    """Collapse integral floats (3.0) to int so they render as '3'."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def cell_to_text(value, strip: bool = False) -> Optional[str]:
    """
    Convert a cell to text.

    Args:
        value: Raw cell value
        strip: Trim surrounding whitespace; whitespace-only cells become None

    Returns:
        The text, or None if the cell is empty
    """
    if strip and is_blank(value):
        return None
    if is_missing(value) or value == '':
        return None
    text = str(_integral(value))
    return text.strip() if strip else text


def _parse_number(value) -> Number:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return _integral(value)
    if hasattr(value, 'item'):
        # numpy scalar
        return _integral(value.item())
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return _integral(float(text))


def cell_to_number(value) -> Optional[Number]:
    """
    Convert a cell to a finite number.

    Returns:
        int or float, or None if the cell is blank

    Raises:
        ValueError: If the cell holds text that is not a number, or NaN/infinity
    """
    if is_blank(value):
        return None
    number = _parse_number(value)
    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number
