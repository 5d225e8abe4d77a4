"""
tests/test_layout_triangular
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

import numpy as np
import pytest

from corrdot import (
    InvalidModeForShapeError,
    Matrix,
    OffsetOutOfRangeError,
    compute_layout,
)
from corrdot.util.warnings import DotPlotWarning


def _segments(arr):
    return [tuple(map(tuple, seg)) for seg in np.asarray(arr).tolist()]


def _cells(layout):
    grid = layout.coordinates
    return set(zip(grid.rows.tolist(), grid.cols.tolist()))


@pytest.mark.api
def test_lower_zero_keeps_diagonal_and_below(corr3):
    """
    Ensures lower(0) on a 3x3 matrix plots the six cells on or below the diagonal.

    Args:
        corr3 (list): Nested list of coefficients.
    """
    layout = compute_layout(corr3, mode="lower", diagonal_offset=0)
    # 0-based equivalents of (1,1), (2,1), (2,2), (3,1), (3,2), (3,3)
    assert _cells(layout) == {(0, 0), (1, 0), (1, 1), (2, 0), (2, 1), (2, 2)}
    assert len(layout.visible_row_labels) == 3
    assert len(layout.visible_col_labels) == 3
    assert np.isnan(layout.masked_matrix[0, 1])
    assert layout.masked_matrix[1, 0] == 0.5


@pytest.mark.api
def test_lower_zero_staircase(corr3):
    """
    Ensures lower(0) grid lines trace the staircase from its free end to x = 1.

    Args:
        corr3 (list): Nested list of coefficients.
    """
    layout = compute_layout(corr3, mode="lower")
    assert _segments(layout.major.horizontal) == [
        ((2.0, 4.0), (1.0, 4.0)),
        ((3.0, 3.0), (1.0, 3.0)),
        ((4.0, 2.0), (1.0, 2.0)),
        ((4.0, 1.0), (1.0, 1.0)),
    ]
    assert _segments(layout.major.vertical) == [
        ((4.0, 2.0), (4.0, 1.0)),
        ((3.0, 3.0), (3.0, 1.0)),
        ((2.0, 4.0), (2.0, 1.0)),
        ((1.0, 4.0), (1.0, 1.0)),
    ]
    assert _segments(layout.minor.horizontal) == [
        ((2.0, 3.5), (1.0, 3.5)),
        ((3.0, 2.5), (1.0, 2.5)),
        ((4.0, 1.5), (1.0, 1.5)),
    ]
    assert _segments(layout.minor.vertical) == [
        ((3.5, 2.0), (3.5, 1.0)),
        ((2.5, 3.0), (2.5, 1.0)),
        ((1.5, 4.0), (1.5, 1.0)),
    ]
    assert layout.row_label_anchors.tolist() == [[0.5, 3.5], [0.5, 2.5], [0.5, 1.5]]
    assert layout.col_label_anchors.tolist() == [[1.5, 4.5], [2.5, 3.5], [3.5, 2.5]]


@pytest.mark.api
def test_lower_negative_offset_trims_labels(corr3_df):
    """
    Ensures lower(-1) drops the first row and last column together with their labels.

    Args:
        corr3_df (pd.DataFrame): Labeled correlation matrix.
    """
    layout = compute_layout(corr3_df, mode="lower", diagonal_offset=-1)
    assert _cells(layout) == {(1, 0), (2, 0), (2, 1)}
    assert layout.visible_row_labels == ("b", "c")
    assert layout.visible_col_labels == ("a", "b")
    assert layout.row_label_anchors.tolist() == [[0.5, 2.5], [0.5, 1.5]]
    assert layout.col_label_anchors.tolist() == [[1.5, 3.5], [2.5, 2.5]]
    assert _segments(layout.major.horizontal) == [
        ((2.0, 3.0), (1.0, 3.0)),
        ((3.0, 2.0), (1.0, 2.0)),
        ((3.0, 1.0), (1.0, 1.0)),
    ]
    assert _segments(layout.minor.horizontal) == [
        ((2.0, 2.5), (1.0, 2.5)),
        ((3.0, 1.5), (1.0, 1.5)),
    ]


@pytest.mark.api
def test_lower_positive_offset_keeps_all_labels(corr3):
    """
    Ensures lower(1) includes the first superdiagonal and keeps every label.

    Args:
        corr3 (list): Nested list of coefficients.
    """
    layout = compute_layout(corr3, mode="lower", diagonal_offset=1)
    assert len(layout.coordinates) == 8
    assert (0, 2) not in _cells(layout)
    assert layout.visible_rows.tolist() == [0, 1, 2]
    assert layout.visible_cols.tolist() == [0, 1, 2]
    assert layout.col_label_anchors[:, 1].tolist() == [4.5, 4.5, 3.5]
    assert _segments(layout.major.horizontal) == [
        ((3.0, 4.0), (1.0, 4.0)),
        ((4.0, 3.0), (1.0, 3.0)),
        ((4.0, 2.0), (1.0, 2.0)),
        ((4.0, 1.0), (1.0, 1.0)),
    ]


@pytest.mark.unit
def test_lower_offset_two_on_four_by_four():
    """
    Ensures the staircase saturates at the right frame edge for larger offsets.
    """
    layout = compute_layout(np.ones((4, 4)), mode="lower", diagonal_offset=2)
    tops = np.asarray(layout.major.horizontal)[:, 0, 0].tolist()
    assert tops == [4.0, 5.0, 5.0, 5.0, 5.0]
    assert layout.col_label_anchors[:, 1].tolist() == [5.5, 5.5, 5.5, 4.5]


@pytest.mark.api
def test_lower_minus_one_on_five_by_five(square5):
    """
    Ensures a 5x5 lower(-1) layout has exactly four visible rows and row labels.

    Args:
        square5 (Matrix): Labeled 5x5 matrix.
    """
    layout = compute_layout(square5, mode="lower", diagonal_offset=-1)
    assert len(layout.visible_rows) == 4
    assert layout.visible_row_labels == ("b", "c", "d", "e")
    assert layout.visible_col_labels == ("a", "b", "c", "d")
    assert len(layout.row_label_anchors) == 4
    assert len(layout.col_label_anchors) == 4


@pytest.mark.api
def test_upper_zero_staircase(corr3):
    """
    Ensures upper(0) grid lines run from the staircase to the right frame edge.

    Args:
        corr3 (list): Nested list of coefficients.
    """
    layout = compute_layout(corr3, mode="upper")
    assert _cells(layout) == {(0, 0), (0, 1), (0, 2), (1, 1), (1, 2), (2, 2)}
    assert _segments(layout.major.horizontal) == [
        ((1.0, 4.0), (4.0, 4.0)),
        ((1.0, 3.0), (4.0, 3.0)),
        ((2.0, 2.0), (4.0, 2.0)),
        ((3.0, 1.0), (4.0, 1.0)),
    ]
    assert _segments(layout.major.vertical) == [
        ((4.0, 1.0), (4.0, 4.0)),
        ((3.0, 1.0), (3.0, 4.0)),
        ((2.0, 2.0), (2.0, 4.0)),
        ((1.0, 3.0), (1.0, 4.0)),
    ]
    assert _segments(layout.minor.horizontal) == [
        ((1.0, 3.5), (4.0, 3.5)),
        ((2.0, 2.5), (4.0, 2.5)),
        ((3.0, 1.5), (4.0, 1.5)),
    ]
    assert layout.row_label_anchors.tolist() == [[1.0, 3.5], [2.0, 2.5], [3.0, 1.5]]
    assert layout.col_label_anchors.tolist() == [[1.5, 4.0], [2.5, 4.0], [3.5, 4.0]]


@pytest.mark.api
def test_upper_positive_offset_trims_labels(corr3_df):
    """
    Ensures upper(1) drops the last row and first column together with their labels.

    Args:
        corr3_df (pd.DataFrame): Labeled correlation matrix.
    """
    layout = compute_layout(corr3_df, mode="upper", diagonal_offset=1)
    assert _cells(layout) == {(0, 1), (0, 2), (1, 2)}
    assert layout.visible_row_labels == ("a", "b")
    assert layout.visible_col_labels == ("b", "c")
    assert layout.row_label_anchors.tolist() == [[2.0, 3.5], [3.0, 2.5]]
    assert layout.col_label_anchors.tolist() == [[2.5, 4.0], [3.5, 4.0]]
    assert _segments(layout.major.horizontal) == [
        ((2.0, 4.0), (4.0, 4.0)),
        ((2.0, 3.0), (4.0, 3.0)),
        ((3.0, 2.0), (4.0, 2.0)),
    ]


@pytest.mark.api
def test_upper_negative_offset_keeps_all_labels(corr3):
    """
    Ensures upper(-1) includes the first subdiagonal and keeps every label.

    Args:
        corr3 (list): Nested list of coefficients.
    """
    layout = compute_layout(corr3, mode="upper", diagonal_offset=-1)
    assert len(layout.coordinates) == 8
    assert (2, 0) not in _cells(layout)
    assert layout.row_label_anchors[:, 0].tolist() == [1.0, 1.0, 2.0]
    starts = np.asarray(layout.major.horizontal)[:, 0, 0].tolist()
    assert starts == [1.0, 1.0, 1.0, 2.0]


@pytest.mark.api
@pytest.mark.parametrize("n", [1, 2, 4, 6])
def test_lower_and_upper_zero_partition_matrix(n):
    """
    Ensures lower(0) and upper(0) cover every cell, overlapping only on the diagonal.

    Args:
        n (int): Matrix size.
    """
    values = np.arange(1, n * n + 1, dtype=float).reshape(n, n)
    lower = compute_layout(values, mode="lower").region
    upper = compute_layout(values, mode="upper").region
    assert np.all(lower | upper)
    assert np.array_equal(lower & upper, np.eye(n, dtype=bool))


@pytest.mark.api
@pytest.mark.parametrize("mode", ["lower", "upper"])
@pytest.mark.parametrize("k", [-3, -2, -1, 0, 1, 2, 3])
def test_label_counts_match_visible_rows_and_columns(mode, k):
    """
    Ensures label lists always match rows/columns with at least one cell in the region.

    Args:
        mode (str): Triangular mode name.
        k (int): Diagonal offset.
    """
    values = np.full((3, 3), 0.5)
    if (mode == "lower" and k == -3) or (mode == "upper" and k == 3):
        with pytest.warns(DotPlotWarning):
            layout = compute_layout(values, mode=mode, diagonal_offset=k)
    else:
        layout = compute_layout(values, mode=mode, diagonal_offset=k)
    rows_with_cells = np.flatnonzero(layout.region.any(axis=1)).tolist()
    cols_with_cells = np.flatnonzero(layout.region.any(axis=0)).tolist()
    assert layout.visible_rows.tolist() == rows_with_cells
    assert layout.visible_cols.tolist() == cols_with_cells
    assert len(layout.visible_row_labels) == len(rows_with_cells)
    assert len(layout.visible_col_labels) == len(cols_with_cells)
    assert layout.row_label_anchors.shape == (len(rows_with_cells), 2)
    assert layout.col_label_anchors.shape == (len(cols_with_cells), 2)


@pytest.mark.api
@pytest.mark.parametrize("mode", ["lower", "upper"])
@pytest.mark.parametrize("k", [-2, -1, 0, 1, 2])
def test_vertical_lines_mirror_horizontal_lines(mode, k):
    """
    Ensures vertical grid lines are the horizontal ones with x and y swapped.

    Args:
        mode (str): Triangular mode name.
        k (int): Diagonal offset.
    """
    layout = compute_layout(np.ones((4, 4)), mode=mode, diagonal_offset=k)
    for lines in (layout.major, layout.minor):
        np.testing.assert_array_equal(lines.vertical, lines.horizontal[:, :, ::-1])


@pytest.mark.api
@pytest.mark.parametrize("mode", ["lower", "upper"])
@pytest.mark.parametrize("k", [-2, -1, 0, 1, 2])
def test_minor_lines_pass_through_plotted_rows(mode, k):
    """
    Ensures each minor horizontal line sits on a row of markers and spans exactly its cells.

    Args:
        mode (str): Triangular mode name.
        k (int): Diagonal offset.
    """
    layout = compute_layout(np.ones((4, 4)), mode=mode, diagonal_offset=k)
    grid = layout.coordinates
    for seg in layout.minor.horizontal:
        (xa, y), (xb, _) = seg
        on_row = grid.y == y
        assert on_row.any()
        assert min(xa, xb) == grid.x[on_row].min() - 0.5
        assert max(xa, xb) == grid.x[on_row].max() + 0.5


@pytest.mark.api
def test_empty_region_warns_and_draws_nothing(corr3):
    """
    Ensures an offset that excludes every cell yields an empty layout and a warning.

    Args:
        corr3 (list): Nested list of coefficients.
    """
    with pytest.warns(DotPlotWarning, match="no cells"):
        layout = compute_layout(corr3, mode="lower", diagonal_offset=-3)
    assert len(layout.coordinates) == 0
    assert len(layout.major) == 0
    assert len(layout.minor) == 0
    assert layout.visible_row_labels == ()
    assert layout.row_label_anchors.shape == (0, 2)


@pytest.mark.api
def test_triangular_mode_errors():
    """
    Ensures shape and offset errors are raised before any layout is produced.
    """
    with pytest.raises(InvalidModeForShapeError):
        compute_layout(np.ones((2, 3)), mode="upper")
    with pytest.raises(OffsetOutOfRangeError):
        compute_layout(Matrix(np.ones((3, 3))), mode="lower", diagonal_offset=4)
    with pytest.raises(OffsetOutOfRangeError):
        compute_layout(np.ones((3, 3)), mode="upper", diagonal_offset=-4)
