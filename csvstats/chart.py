"""Histogram chart: a renderer-neutral spec plus plotly and matplotlib renderers."""

import io
import logging
import re
from dataclasses import dataclass, field

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import plotly.graph_objects as go  # noqa: E402

from . import i18n, settings  # noqa: E402
from .axis import Axis, CategoryScale, build_axis, extreme_label_positions, position_for_value  # noqa: E402
from .stats import Stats, calculate_stats, format_stat, get_distribution  # noqa: E402

logger = logging.getLogger(__name__)

# plotly dash names and the matching matplotlib on/off sequences
DASHES = {
    "dash": (5, 5),
    "longdash": (10, 5),
}


@dataclass(frozen=True)
class ReferenceLine:
    key: str
    value: float
    position: float
    text: str
    color: str
    dash: str
    # Label height above the plot area, in pixels
    offset: int

    @property
    def visible(self):
        return self.position is not None


@dataclass(frozen=True)
class ScaleLabel:
    text: str
    position: float


@dataclass(frozen=True)
class ChartSpec:
    title: str
    axis: Axis
    stats: Stats
    value_count: int
    locale: str
    lines: list = field(default_factory=list)
    scale_labels: list = field(default_factory=list)


def build_chart_spec(column, values, mode=None, min_label="", max_label="", locale=None):
    locale = locale or settings.LOCALE
    stats = calculate_stats(values)
    axis = build_axis(values, get_distribution(values), mode)
    scale = CategoryScale.for_categories(len(axis.labels))

    lines = []
    for key, value, color, dash, offset in (
        ("median", stats.median, settings.MEDIAN_COLOR, "dash", 20),
        ("average", stats.average, settings.AVERAGE_COLOR, "longdash", 50),
    ):
        position = position_for_value(axis.labels, value, scale)
        lines.append(ReferenceLine(
            key=key,
            value=value,
            position=position if scale.contains(position) else None,
            text=f"{i18n.text(key, locale)}: {format_stat(value)}",
            color=color,
            dash=dash,
            offset=offset,
        ))

    scale_labels = []
    min_x, max_x = extreme_label_positions(axis.labels, scale)
    if min_label and min_x is not None:
        scale_labels.append(ScaleLabel(text=min_label, position=min_x))
    if max_label and max_x is not None:
        scale_labels.append(ScaleLabel(text=max_label, position=max_x))

    return ChartSpec(
        title=column,
        axis=axis,
        stats=stats,
        value_count=len(values),
        locale=locale,
        lines=lines,
        scale_labels=scale_labels,
    )


def build_plotly_figure(spec):
    font = dict(family=settings.FONT_FAMILY, color=settings.TEXT_COLOR)
    # x is the category index so fractional line positions land between bars
    x = list(range(len(spec.axis.labels)))

    fig = go.Figure(
        go.Bar(
            x=x,
            y=spec.axis.counts,
            name=i18n.text("count", spec.locale),
            marker=dict(color=settings.BAR_FILL, line=dict(color=settings.BAR_BORDER, width=2)),
        )
    )

    for line in spec.lines:
        if not line.visible:
            continue
        fig.add_vline(x=line.position, line_color=line.color, line_width=4, line_dash=line.dash)
        fig.add_annotation(
            x=line.position,
            y=1,
            yref="paper",
            yshift=line.offset,
            text=f"<b>{line.text}</b>",
            showarrow=False,
            font=dict(font, size=20, color=line.color),
        )

    for label in spec.scale_labels:
        fig.add_annotation(
            x=label.position,
            y=0,
            yref="paper",
            yshift=-70,
            text=label.text,
            showarrow=False,
            font=dict(font, size=20),
        )

    fig.update_layout(
        showlegend=False,
        height=500,
        margin=dict(t=110, b=110),
        font=font,
        plot_bgcolor="white",
    )
    fig.update_xaxes(
        title=dict(text=i18n.text("value_axis", spec.locale), font=dict(size=24)),
        tickmode="array",
        tickvals=x,
        ticktext=spec.axis.labels,
        range=[-0.5, len(x) - 0.5],
        tickfont=dict(size=16),
    )
    fig.update_yaxes(
        title=dict(text=i18n.text("frequency_axis", spec.locale), font=dict(size=24)),
        rangemode="tozero",
        dtick=1 if max(spec.axis.counts, default=0) <= 20 else None,
        tickformat="d",
        tickfont=dict(size=16),
    )
    return fig


def render_png(spec, dpi=None):
    """Draw the chart with matplotlib and return PNG bytes."""
    x = list(range(len(spec.axis.labels)))
    fig, ax = plt.subplots(figsize=(16, 9))
    try:
        ax.bar(x, spec.axis.counts, width=0.8, color=(0, 140 / 255, 230 / 255, 0.6),
               edgecolor=settings.BAR_BORDER, linewidth=2)
        ax.set_xticks(x)
        ax.set_xticklabels(spec.axis.labels, fontsize=14, color=settings.TEXT_COLOR)
        if x:
            ax.set_xlim(-0.5, len(x) - 0.5)
        ax.set_ylim(bottom=0)
        ax.yaxis.get_major_locator().set_params(integer=True)
        ax.tick_params(axis="y", labelsize=14, colors=settings.TEXT_COLOR)
        ax.set_xlabel(i18n.text("value_axis", spec.locale), fontsize=18, color=settings.TEXT_COLOR)
        ax.set_ylabel(i18n.text("frequency_axis", spec.locale), fontsize=18, color=settings.TEXT_COLOR)
        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)

        for line in spec.lines:
            if not line.visible:
                continue
            ax.axvline(line.position, color=line.color, linewidth=3, linestyle=(0, DASHES[line.dash]))
            ax.annotate(
                line.text,
                xy=(line.position, 1),
                xycoords=("data", "axes fraction"),
                xytext=(0, line.offset),
                textcoords="offset points",
                ha="center",
                fontsize=16,
                fontweight="bold",
                color=line.color,
            )

        for label in spec.scale_labels:
            ax.annotate(
                label.text,
                xy=(label.position, 0),
                xycoords=("data", "axes fraction"),
                xytext=(0, -55),
                textcoords="offset points",
                ha="center",
                fontsize=16,
                color=settings.TEXT_COLOR,
            )

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=dpi or settings.EXPORT_DPI, bbox_inches="tight")
        buf.seek(0)
        return buf.read()
    finally:
        plt.close(fig)


def export_filename(column):
    return f"{re.sub(r'[^a-zA-Z0-9_-]', '_', column)}.png"
