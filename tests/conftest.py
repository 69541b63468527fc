"""Pytest fixtures shared across the CSV visualizer tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from csvstats import Visualizer

SAMPLE_CSV = """Datum,Score,Comment
"01.03.2024, 09:15",4,ok
"02.03.2024, 18:40",7,"late, but fine"
03.03.2024,5,-
04.03.2024,9,
05.03.2024,n/a,missing
"""


@pytest.fixture
def sample_csv() -> str:
    """Return a small survey export with a German date column."""

    return SAMPLE_CSV


@pytest.fixture
def visualizer(sample_csv: str) -> Visualizer:
    """Return a Visualizer with the sample CSV already loaded."""

    loaded = Visualizer()
    loaded.load_text(sample_csv, name="survey.csv")
    return loaded


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Streamlit runtime or network.
    - `integration`: tests that run the Streamlit pages.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
