"""
corrdot/core/matrix
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np
import pandas as pd

from ..util.warnings import warn


class Matrix:
    """
    Immutable container for a matrix of statistical values.

    Note: this object should be treated as immutable. Layouts and renderers
    assume matrix contents are frozen. NaN marks an absent entry; zero is a
    regular value and is plotted.
    """

    def __init__(self, data: Any) -> None:
        """
        Initializes Matrix.

        Args:
            data (Any): pandas DataFrame, numpy array, or nested sequence of numbers.
                DataFrame index and columns become the default row and column labels;
                other inputs default to empty labels.

        Raises:
            ValueError: If the matrix is empty, not 2-D, or not numeric.
        """
        if isinstance(data, pd.DataFrame):
            self.df = data.copy()
        else:
            try:
                arr = np.asarray(data, dtype=float)
            except (TypeError, ValueError) as exc:
                raise ValueError("Matrix values must be numeric") from exc
            if arr.ndim != 2:
                raise ValueError(f"Matrix must be 2-D, got {arr.ndim} dimension(s)")
            self.df = pd.DataFrame(arr, index=[""] * arr.shape[0], columns=[""] * arr.shape[1])

        self._validate()
        self.values = self.df.to_numpy(dtype=float, copy=True)
        # Infinite entries cannot be sized or colored; treat them as absent
        inf_mask = np.isinf(self.values)
        if inf_mask.any():
            warn("Matrix contains infinite values; they are treated as absent", RuntimeWarning)
            self.values[inf_mask] = np.nan
        self.values.flags.writeable = False
        self.row_labels = np.array([str(v) for v in self.df.index], dtype=object)
        self.col_labels = np.array([str(v) for v in self.df.columns], dtype=object)

    def _validate(self) -> None:
        """
        Validates matrix contents and properties.

        Raises:
            ValueError: If matrix is invalid.
        """
        if self.df.shape[0] == 0 or self.df.shape[1] == 0:
            raise ValueError("Matrix must have at least one row and one column")
        bad = [
            col
            for col, dtype in self.df.dtypes.items()
            if pd.api.types.is_bool_dtype(dtype) or not pd.api.types.is_numeric_dtype(dtype)
        ]
        if bad:
            raise ValueError(f"Matrix values must be numeric; offending columns: {bad}")

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.n_rows, self.n_cols)

    @property
    def n_rows(self) -> int:
        return int(self.values.shape[0])

    @property
    def n_cols(self) -> int:
        return int(self.values.shape[1])

    @property
    def is_square(self) -> bool:
        return self.n_rows == self.n_cols

    @classmethod
    def coerce(cls, data: Any) -> "Matrix":
        """
        Returns `data` unchanged if it is already a Matrix, otherwise wraps it.

        Args:
            data (Any): Matrix or matrix-like input.

        Returns:
            Matrix: Matrix instance.
        """
        if isinstance(data, cls):
            return data
        return cls(data)
