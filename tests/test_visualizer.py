"""Unit tests for the Visualizer pipeline: load, filter, aggregate, draw."""

from __future__ import annotations

from datetime import date

import pytest

from csvstats import Visualizer

pytestmark = pytest.mark.unit


def test_load_detects_date_and_numeric_columns(visualizer: Visualizer) -> None:
    assert visualizer.has_data
    assert visualizer.date_column == "Datum"
    assert visualizer.dataset.name == "survey.csv"
    assert visualizer.numeric_columns() == ["Score"]


def test_default_date_range_spans_the_data(visualizer: Visualizer) -> None:
    assert visualizer.default_date_range() == (date(2024, 3, 1), date(2024, 3, 5))


def test_default_date_range_falls_back_to_today() -> None:
    loaded = Visualizer()
    loaded.load_text("Datum,v\nsoon,1")

    today = date.today()
    assert loaded.default_date_range() == (today, today)


def test_filter_applies_date_range(visualizer: Visualizer) -> None:
    result = visualizer.filter(date(2024, 3, 1), date(2024, 3, 2))

    assert result.filtered == 2
    assert result.total == 5


def test_numeric_columns_follow_the_date_filter(visualizer: Visualizer) -> None:
    """On 05.03. only 'n/a' is left in Score, so it stops counting as numeric."""

    assert visualizer.numeric_columns(date(2024, 3, 5), date(2024, 3, 5)) == []


def test_render_computes_stats_over_all_rows(visualizer: Visualizer) -> None:
    result = visualizer.render("Score", mode="integer")

    assert result.stats.average == pytest.approx(6.25)
    assert result.stats.median == pytest.approx(6.0)
    assert result.spec.value_count == 4
    assert visualizer.chart is result


def test_render_within_date_range(visualizer: Visualizer) -> None:
    result = visualizer.render("Score", date_from=date(2024, 3, 1), date_to=date(2024, 3, 3), mode="distinct")

    assert result.filter.filtered == 3
    assert result.stats.median == pytest.approx(5.0)
    assert result.spec.axis.labels == ["4", "5", "7"]


def test_render_unknown_column_raises(visualizer: Visualizer) -> None:
    with pytest.raises(KeyError):
        visualizer.render("Nope")


def test_render_before_load_raises() -> None:
    with pytest.raises(RuntimeError):
        Visualizer().render("Score")


def test_reload_replaces_dataset_and_clears_chart(visualizer: Visualizer) -> None:
    visualizer.render("Score")

    visualizer.load_text("a,b\n1,2")

    assert visualizer.dataset.headers == ["a", "b"]
    assert visualizer.date_column is None
    assert visualizer.chart is None
    assert visualizer.filter().filtered == 1


def test_clear_chart(visualizer: Visualizer) -> None:
    visualizer.render("Score")
    visualizer.clear_chart()

    assert visualizer.chart is None


def test_load_bytes_decodes_upload() -> None:
    loaded = Visualizer()
    loaded.load_bytes(b"\xef\xbb\xbfDate,v\n01.01.2024,3")

    assert loaded.dataset.headers == ["Date", "v"]
    assert loaded.date_column == "Date"


def test_load_url_fetches_csv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remote CSVs go through the same pipeline as uploads."""

    class StubResponse:
        def raise_for_status(self) -> None:
            return None

        def iter_content(self, chunk_size: int):
            yield b"v\n1\n"
            yield b"2\n"

    calls = []

    def stub_get(url, **kwargs):  # type: ignore[no-untyped-def]
        calls.append((url, kwargs))
        return StubResponse()

    monkeypatch.setattr("csvstats.visualizer.requests.get", stub_get)

    loaded = Visualizer()
    loaded.load_url("https://example.com/data/scores.csv")

    assert loaded.dataset.name == "scores.csv"
    assert loaded.dataset.column("v") == ["1", "2"]
    assert calls[0][1]["timeout"] == 60


def test_render_result_to_png(visualizer: Visualizer) -> None:
    result = visualizer.render("Score")

    assert result.to_png(dpi=20).startswith(b"\x89PNG")


def test_render_integer_axis_with_extreme_values() -> None:
    """Huge but finite values render on the distinct-value axis instead of failing."""

    loaded = Visualizer()
    loaded.load_text("v\n1e308\n-1e308\n")

    result = loaded.render("v", mode="integer")

    assert result.spec.axis.mode == "distinct"
    assert result.spec.value_count == 2


def test_replace_swaps_in_a_parsed_dataset(visualizer: Visualizer) -> None:
    """Cached uploads hand over a parsed dataset; the same one twice keeps the chart."""

    chart = visualizer.render("Score")
    assert not visualizer.replace(visualizer.dataset, visualizer.date_column)
    assert visualizer.chart is chart

    other = Visualizer()
    other.load_text("a,b\n1,2", name="other.csv")

    assert visualizer.replace(other.dataset)
    assert visualizer.dataset.name == "other.csv"
    assert visualizer.date_column is None
    assert visualizer.chart is None
