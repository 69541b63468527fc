import math
import re
from dataclasses import dataclass

from . import settings

_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ColumnProfile:
    name: str
    non_empty: int
    numeric: int

    @property
    def ratio(self):
        if self.non_empty == 0:
            return 0.0
        return self.numeric / self.non_empty

    @property
    def is_numeric(self):
        return self.non_empty > 0 and self.ratio >= settings.NUMERIC_THRESHOLD


def is_empty(text):
    return text is None or text in settings.EMPTY_MARKERS


def is_numeric_text(text):
    """True when the whole trimmed cell is a finite number ("1e3" yes, "12 kg" no)."""
    if text is None:
        return False
    text = text.strip()
    if not text or "_" in text:
        return False
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value)


def leading_number(text):
    """Parse the numeric prefix of a cell, so "12 kg" reads as 12.0.

    Returns None when the cell does not start with a finite number.
    """
    if text is None:
        return None
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def profile_column(rows, column):
    non_empty = 0
    numeric = 0
    for row in rows:
        value = row.get(column)
        if is_empty(value):
            continue
        non_empty += 1
        if is_numeric_text(value):
            numeric += 1
    return ColumnProfile(name=column, non_empty=non_empty, numeric=numeric)


def profile_columns(dataset, rows=None):
    rows = dataset.rows if rows is None else rows
    return [profile_column(rows, header) for header in dataset.headers]


def numeric_columns(dataset, rows=None):
    return [profile.name for profile in profile_columns(dataset, rows) if profile.is_numeric]


def numeric_values(rows, column):
    values = []
    for row in rows:
        value = leading_number(row.get(column))
        if value is not None:
            values.append(value)
    return values
