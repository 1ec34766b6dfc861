"""
Path-level descriptive statistics.
"""

from collections.abc import Sequence

import numpy as np

from path_synthesis.data.schemas import PathSummary


def calculate_summary(values: Sequence[float] | np.ndarray) -> PathSummary:
    """
    Summarize displayed values of a path.

    [T1] volatility = sqrt(Σ(x - x̄)² / n)  (population standard deviation)

    Parameters
    ----------
    values : array-like
        Displayed values in time order

    Returns
    -------
    PathSummary
        min, max, mean and population standard deviation
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise ValueError("CRITICAL: cannot summarize an empty path")

    return PathSummary(
        min=float(arr.min()),
        max=float(arr.max()),
        mean=float(arr.mean()),
        volatility=float(arr.std()),
    )
