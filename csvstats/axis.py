"""Categorical x axis for the histogram and placement of reference lines on it.

Bars sit on a category axis, so a statistic such as a median of 4.3 has no
slot of its own. Its position is interpolated between the neighbouring
category centres.
"""

import logging
import math
from dataclasses import dataclass

from . import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Axis:
    labels: list
    values: list
    counts: list
    mode: str


@dataclass(frozen=True)
class CategoryScale:
    """Linear mapping from category index to pixel, each category centred in its band."""

    left: float
    right: float
    count: int

    @classmethod
    def for_categories(cls, count):
        # Category i lands on coordinate i, the shape plotly and matplotlib use for bar charts
        return cls(left=-0.5, right=count - 0.5, count=count)

    @property
    def width(self):
        return self.right - self.left

    @property
    def band(self):
        return self.width / self.count if self.count else 0.0

    def pixel_for_index(self, index):
        return self.left + (index + 0.5) * self.band

    def contains(self, position):
        return position is not None and self.left <= position <= self.right


def format_label(value):
    """Render a number the way the axis labels it: ``3.0`` -> ``"3"``, ``2.5`` -> ``"2.5"``."""
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def build_axis(values, distribution, mode=None):
    """Build the category labels and bar heights for a column.

    Args:
        values: Numeric values of the column after filtering.
        distribution: Occurrence count per value.
        mode: ``"distinct"`` for one bar per distinct value, ``"integer"`` for a
            unit-spaced scale from ``min(data_min, 1)`` to ``max(data_max, 10)``.

    Returns:
        The axis with labels, numeric label values and counts. An integer scale
        wider than ``settings.MAX_AXIS_LABELS`` (or too wide to measure at all)
        falls back to distinct values.
    """
    mode = mode or settings.AXIS_MODE
    if mode not in settings.AXIS_MODES:
        raise ValueError(f"Unknown axis mode: {mode!r}")

    if mode == "integer":
        range_min = min(min(values, default=math.inf), 1)
        range_max = max(max(values, default=-math.inf), 10)
        span = range_max - range_min
        if math.isfinite(span) and span < settings.MAX_AXIS_LABELS:
            label_values = [range_min + step for step in range(math.floor(span) + 1)]
            return Axis(
                labels=[format_label(value) for value in label_values],
                values=label_values,
                counts=[distribution.get(value, 0) for value in label_values],
                mode="integer",
            )
        logger.warning(
            "Integer axis %s..%s is wider than %d labels, using distinct values",
            format_label(range_min),
            format_label(range_max),
            settings.MAX_AXIS_LABELS,
        )

    label_values = sorted(distribution)
    return Axis(
        labels=[format_label(value) for value in label_values],
        values=label_values,
        counts=[distribution[value] for value in label_values],
        mode="distinct",
    )


def position_for_value(labels, target, scale):
    """Map a statistic onto the category axis.

    An exact label match returns that category's centre. Otherwise the position
    is interpolated linearly between the nearest labels below and above the
    target. Targets outside the labels sit half a band beyond the first or
    last category.
    """

    if not labels:
        return None

    exact = format_label(target)
    if exact in labels:
        return scale.pixel_for_index(labels.index(exact))

    numeric_labels = [float(label) for label in labels]
    left_index = right_index = None
    for index, label_value in enumerate(numeric_labels):
        if label_value <= target:
            left_index = index
        if label_value >= target:
            right_index = index
            break

    if left_index is None and right_index is not None:
        return scale.pixel_for_index(right_index) - scale.band * 0.5
    if right_index is None and left_index is not None:
        return scale.pixel_for_index(left_index) + scale.band * 0.5
    if left_index is None or right_index is None:
        return None

    left_x = scale.pixel_for_index(left_index)
    right_x = scale.pixel_for_index(right_index)
    left_value = numeric_labels[left_index]
    right_value = numeric_labels[right_index]
    if left_value == right_value:
        return left_x

    ratio = (target - left_value) / (right_value - left_value)
    return left_x + (right_x - left_x) * ratio


def extreme_label_positions(labels, scale):
    """Positions of the smallest and largest label, used for the custom min/max captions."""

    if not labels:
        return None, None
    numeric_labels = [float(label) for label in labels]
    smallest = numeric_labels.index(min(numeric_labels))
    largest = numeric_labels.index(max(numeric_labels))
    return scale.pixel_for_index(smallest), scale.pixel_for_index(largest)
