from dataclasses import dataclass

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class Stats:
    average: float
    median: float


def calculate_stats(values):
    """Mean and median of the values; both are 0.0 when there is nothing to average."""
    if len(values) == 0:
        return Stats(average=0.0, median=0.0)
    data = np.asarray(values, dtype=float)
    return Stats(average=float(data.mean()), median=float(np.median(data)))


def get_distribution(values):
    """Occurrences per value, keys in first-seen order."""
    if len(values) == 0:
        return {}
    counts = pd.Series(values, dtype=float).value_counts(sort=False)
    return {float(value): int(count) for value, count in counts.items()}


def format_stat(value):
    return f"{value:.2f}"
