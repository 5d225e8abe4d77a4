"""
corrdot/core/stats
~~~~~~~~~~~~~~~~~~

Pairwise and cross correlation matrices for dot plots.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import numpy as np
import pandas as pd
from scipy.stats import kendalltau, pearsonr, spearmanr

from ..util.warnings import warn

_MIN_OBSERVATIONS = 3


def _pearson(a: np.ndarray, b: np.ndarray) -> Tuple[float, float]:
    res = pearsonr(a, b)
    return float(res[0]), float(res[1])


def _spearman(a: np.ndarray, b: np.ndarray) -> Tuple[float, float]:
    res = spearmanr(a, b)
    return float(res[0]), float(res[1])


def _kendall(a: np.ndarray, b: np.ndarray) -> Tuple[float, float]:
    res = kendalltau(a, b)
    return float(res[0]), float(res[1])


_METHODS: Dict[str, Callable[[np.ndarray, np.ndarray], Tuple[float, float]]] = {
    "pearson": _pearson,
    "spearman": _spearman,
    "kendall": _kendall,
}


@dataclass(frozen=True)
class CorrelationResult:
    """
    Data class for a coefficient matrix and its matching two-sided p-values.
    """

    r: pd.DataFrame
    p: pd.DataFrame
    method: str
    n_obs: pd.DataFrame

    @property
    def is_square(self) -> bool:
        return self.r.shape[0] == self.r.shape[1]


def _numeric_frame(data: pd.DataFrame, name: str) -> pd.DataFrame:
    """
    Validates a table of observations (rows) by variables (columns).

    Args:
        data (pd.DataFrame): Observations table.
        name (str): Argument name for error messages.

    Returns:
        pd.DataFrame: Float-valued copy.

    Raises:
        TypeError: If `data` is not a DataFrame.
        ValueError: If it has no columns or non-numeric columns.
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(f"{name} must be a pandas DataFrame of observations by variables")
    if data.shape[1] == 0:
        raise ValueError(f"{name} has no variables (columns)")
    bad = [c for c, dtype in data.dtypes.items() if not pd.api.types.is_numeric_dtype(dtype)]
    if bad:
        raise ValueError(f"{name} has non-numeric columns: {bad}")
    return data.astype(float)


def correlate(
    x: pd.DataFrame,
    y: Optional[pd.DataFrame] = None,
    *,
    method: str = "pearson",
) -> CorrelationResult:
    """
    Computes correlation coefficients and p-values between variables.

    With only `x`, every pair of its columns is correlated (square result). With `y`,
    each column of `x` is correlated against each column of `y` (cross result, rows
    follow `x`, columns follow `y`). Observations with missing values are dropped per
    pair.

    Args:
        x (pd.DataFrame): Observations (rows) by variables (columns).
        y (Optional[pd.DataFrame]): Second table for cross correlation, with the same
            observation labels (row index) as `x`, in any order. Defaults to None.

    Kwargs:
        method (str): One of {"pearson", "spearman", "kendall"}. Defaults to "pearson".

    Returns:
        CorrelationResult: Coefficients, p-values, and per-pair observation counts.

    Raises:
        ValueError: If the method is unknown or the tables do not share observation labels.
    """
    func = _METHODS.get(method)
    if func is None:
        raise ValueError(f"method must be one of {sorted(_METHODS)}, got {method!r}")
    left = _numeric_frame(x, "x")
    right = left if y is None else _numeric_frame(y, "y")
    if y is not None:
        if len(left) != len(right):
            raise ValueError("x and y must have the same number of observations (rows)")
        if not left.index.equals(right.index):
            # Observations are paired by label, never by position
            same_labels = (
                left.index.is_unique
                and right.index.is_unique
                and set(left.index) == set(right.index)
            )
            if not same_labels:
                raise ValueError("x and y must share the same unique observation labels (row index)")
            right = right.reindex(left.index)

    r = np.full((left.shape[1], right.shape[1]), np.nan)
    p = np.full_like(r, np.nan)
    n_obs = np.zeros(r.shape, dtype=int)
    short_pairs = 0
    for i, col_a in enumerate(left.columns):
        a = left[col_a].to_numpy()
        for j, col_b in enumerate(right.columns):
            # Square case is symmetric; reuse the mirrored pair
            if y is None and j < i:
                r[i, j], p[i, j], n_obs[i, j] = r[j, i], p[j, i], n_obs[j, i]
                continue
            b = right[col_b].to_numpy()
            keep = ~(np.isnan(a) | np.isnan(b))
            n_obs[i, j] = int(keep.sum())
            if n_obs[i, j] < _MIN_OBSERVATIONS:
                short_pairs += 1
                continue
            r[i, j], p[i, j] = func(a[keep], b[keep])

    if short_pairs:
        warn(
            f"{short_pairs} variable pair(s) had fewer than {_MIN_OBSERVATIONS} complete "
            "observations; their coefficients are NaN"
        )
    index = [str(c) for c in left.columns]
    columns = [str(c) for c in right.columns]
    return CorrelationResult(
        r=pd.DataFrame(r, index=index, columns=columns),
        p=pd.DataFrame(p, index=index, columns=columns),
        method=method,
        n_obs=pd.DataFrame(n_obs, index=index, columns=columns),
    )
