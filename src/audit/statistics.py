"""
Descriptive statistics for the outlier detection pass.

Population (not sample) variance: the categories of one statement are the
whole population being compared.
"""
from typing import List, Sequence

import numpy as np


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        raise ValueError("mean() requires at least one value")
    return float(np.mean(np.asarray(values, dtype=float)))


def variance(values: Sequence[float]) -> float:
    if len(values) == 0:
        raise ValueError("variance() requires at least one value")
    return float(np.var(np.asarray(values, dtype=float), ddof=0))


def std_dev(values: Sequence[float]) -> float:
    return float(np.sqrt(variance(values)))


def z_scores(values: Sequence[float]) -> List[float]:
    """
    Absolute z-score of each value.

    Returns all zeros when the standard deviation is zero (identical
    values cannot be outliers).
    """
    arr = np.asarray(values, dtype=float)
    sigma = std_dev(arr)
    if sigma == 0.0:
        return [0.0] * len(arr)
    return [float(z) for z in np.abs(arr - arr.mean()) / sigma]
