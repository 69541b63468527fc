"""Date detection and inclusive date-range filtering for loaded rows.

Dates are expected in the German style ``DD.MM.YYYY`` with an optional
``, HH:MM`` time part, e.g. ``"03.11.2024, 14:05"``.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time

from . import i18n, settings

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"(\d{1,2})\.(\d{1,2})\.(\d{4})(?:,?\s*(\d{1,2}):(\d{2}))?")


@dataclass(frozen=True)
class DateFilterResult:
    """Rows that survived a date filter together with the unfiltered count."""

    rows: list
    total: int
    active: bool

    @property
    def filtered(self):
        return len(self.rows)

    def summary(self, locale=None):
        if self.filtered != self.total:
            return i18n.text("filtered", locale, filtered=self.filtered, total=self.total)
        return i18n.text("all_shown", locale, total=self.total)


def parse_date(value):
    """Parse a ``DD.MM.YYYY[, HH:MM]`` cell.

    Args:
        value: Raw cell text; surrounding quotes are ignored.

    Returns:
        The parsed datetime, or None when the cell holds no date or an
        impossible one such as ``31.02.2024``. A missing or out-of-range time
        (``24:00``, ``12:75``) leaves the date at midnight.
    """
    if not value or not isinstance(value, str):
        return None

    match = _DATE_PATTERN.search(value.replace('"', "").replace("'", ""))
    if match is None:
        return None

    day, month, year, hour, minute = match.groups()
    try:
        parsed = date(int(year), int(month), int(day))
    except ValueError:
        return None

    if hour is not None and int(hour) < 24 and int(minute) < 60:
        return datetime.combine(parsed, time(int(hour), int(minute)))
    return datetime.combine(parsed, time.min)


def detect_date_column(headers, candidates=None):
    """Return the first known date header present in ``headers``."""
    for name in candidates or settings.DATE_COLUMN_NAMES:
        if name in headers:
            logger.info("Detected date column: %s", name)
            return name
    return None


def date_bounds(rows, column):
    """Earliest and latest calendar day found in ``column``."""
    dates = sorted(
        parsed.date()
        for parsed in (parse_date(row.get(column)) for row in rows)
        if parsed is not None
    )
    if not dates:
        return None
    return dates[0], dates[-1]


def filter_rows_by_date(rows, column, date_from, date_to):
    """Filter rows by an inclusive date range.

    The lower bound starts at midnight and the upper bound runs to the end of
    its day. Rows whose date cell cannot be parsed are dropped. When either
    bound is missing nothing is filtered.
    """
    rows = list(rows)
    if date_from is None or date_to is None:
        return DateFilterResult(rows=rows, total=len(rows), active=False)

    start = datetime.combine(date_from, time.min)
    end = datetime.combine(date_to, time.max)

    kept = []
    for row in rows:
        parsed = parse_date(row.get(column))
        if parsed is not None and start <= parsed <= end:
            kept.append(row)

    logger.debug("Date filter %s..%s kept %d of %d rows", date_from, date_to, len(kept), len(rows))
    return DateFilterResult(rows=kept, total=len(rows), active=True)
