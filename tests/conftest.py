"""
tests/conftest
~~~~~~~~~~~~~~
"""

import matplotlib
import numpy as np
import pandas as pd
import pytest

from corrdot import Matrix

# Headless rendering for every plotting test
matplotlib.use("Agg", force=True)


@pytest.fixture(scope="session")
def corr3():
    """
    Returns a 3x3 symmetric correlation matrix.

    Returns:
        list: Nested list of correlation coefficients.
    """
    return [[1.0, 0.5, 0.2], [0.5, 1.0, 0.3], [0.2, 0.3, 1.0]]


@pytest.fixture(scope="session")
def corr3_df(corr3):
    """
    Returns the 3x3 correlation matrix as a labeled DataFrame.

    Args:
        corr3 (list): Nested list of coefficients.

    Returns:
        pd.DataFrame: Labeled correlation matrix.
    """
    labels = ["a", "b", "c"]
    return pd.DataFrame(corr3, index=labels, columns=labels)


@pytest.fixture(scope="session")
def square5():
    """
    Returns a labeled 5x5 matrix with distinct non-zero entries.

    Returns:
        Matrix: Matrix with labels a..e on both axes.
    """
    labels = list("abcde")
    values = np.arange(1, 26, dtype=float).reshape(5, 5) / 25.0
    return Matrix(pd.DataFrame(values, index=labels, columns=labels))


@pytest.fixture
def close_figures():
    """
    Closes all Matplotlib figures after a test.
    """
    import matplotlib.pyplot as plt

    yield
    plt.close("all")
