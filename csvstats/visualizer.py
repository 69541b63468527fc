"""The stateful side of the app: one loaded dataset and the last chart drawn from it."""

import logging
from dataclasses import dataclass
from datetime import date

import plotly.graph_objects as go
import requests

from . import settings
from .chart import ChartSpec, build_chart_spec, build_plotly_figure, render_png
from .columns import numeric_columns, numeric_values
from .dates import DateFilterResult, date_bounds, detect_date_column, filter_rows_by_date
from .parsing import decode_csv_bytes, parse_csv
from .stats import Stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    column: str
    stats: Stats
    spec: ChartSpec
    figure: go.Figure
    filter: DateFilterResult

    def to_png(self, dpi=None):
        return render_png(self.spec, dpi=dpi)


class Visualizer:
    """Holds the loaded CSV, its detected date column and the current chart.

    Every load replaces the dataset wholesale; nothing survives between files.
    """

    def __init__(self):
        self.dataset = None
        self.date_column = None
        self.chart = None

    @property
    def has_data(self):
        return self.dataset is not None

    def _swap(self, dataset, date_column):
        self.dataset = dataset
        self.date_column = date_column
        self.chart = None

    def replace(self, dataset, date_column=None):
        """Swap in an already parsed dataset; a no-op when it is the one already loaded."""
        if dataset == self.dataset:
            return False
        self._swap(dataset, date_column)
        return True

    def load_text(self, text, name=None):
        dataset = parse_csv(text, name=name)
        self._swap(dataset, detect_date_column(dataset.headers))
        return dataset

    def load_bytes(self, data, name=None):
        return self.load_text(decode_csv_bytes(data), name=name)

    def load_url(self, url):
        response = requests.get(url, stream=True, timeout=settings.URL_TIMEOUT)
        response.raise_for_status()
        data = b"".join(response.iter_content(8192))
        logger.info("Fetched %d bytes from %s", len(data), url)
        return self.load_bytes(data, name=url.rsplit("/", 1)[-1] or url)

    def _require_data(self):
        if self.dataset is None:
            raise RuntimeError("No CSV loaded yet.")
        return self.dataset

    def default_date_range(self):
        """Span of the date column, or today for both ends when there is nothing to span."""
        dataset = self._require_data()
        bounds = date_bounds(dataset.rows, self.date_column) if self.date_column else None
        if bounds is None:
            today = date.today()
            return today, today
        return bounds

    def filter(self, date_from=None, date_to=None):
        dataset = self._require_data()
        if self.date_column is None:
            return DateFilterResult(rows=list(dataset.rows), total=len(dataset), active=False)
        return filter_rows_by_date(dataset.rows, self.date_column, date_from, date_to)

    def numeric_columns(self, date_from=None, date_to=None):
        dataset = self._require_data()
        return numeric_columns(dataset, self.filter(date_from, date_to).rows)

    def render(self, column, *, date_from=None, date_to=None, mode=None, min_label="", max_label="", locale=None):
        """Run filter, aggregate and draw for one column and keep the result as the current chart."""
        dataset = self._require_data()
        if column not in dataset.headers:
            raise KeyError(column)

        filtered = self.filter(date_from, date_to)
        values = numeric_values(filtered.rows, column)
        spec = build_chart_spec(
            column,
            values,
            mode=mode,
            min_label=min_label,
            max_label=max_label,
            locale=locale,
        )
        logger.info(
            "Rendered %s: %d values from %d of %d rows, average=%.2f median=%.2f",
            column,
            len(values),
            filtered.filtered,
            filtered.total,
            spec.stats.average,
            spec.stats.median,
        )
        self.chart = RenderResult(
            column=column,
            stats=spec.stats,
            spec=spec,
            figure=build_plotly_figure(spec),
            filter=filtered,
        )
        return self.chart

    def clear_chart(self):
        self.chart = None
