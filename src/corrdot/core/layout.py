"""
corrdot/core/layout
~~~~~~~~~~~~~~~~~~~

Pure geometry for dot plots. Rows are counted from the top and columns from
the left; cell (row, col) (1-based) is centered at x = col + 0.5 and
y = rows - row + 1.5, so every cell occupies a unit square with integer edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .matrix import Matrix
from .options import DotPlotOptions, Overlay, RenderMode
from ..util.warnings import warn

# Segment arrays have shape (n_segments, 2 endpoints, 2 coordinates)
_EMPTY_SEGMENTS = np.empty((0, 2, 2), dtype=float)
_EMPTY_ANCHORS = np.empty((0, 2), dtype=float)


@dataclass(frozen=True)
class CoordinateGrid:
    """
    Data class for the plotted cells: 0-based indices, marker centers, and values,
    in row-major order.
    """

    rows: np.ndarray
    cols: np.ndarray
    x: np.ndarray
    y: np.ndarray
    values: np.ndarray

    def __len__(self) -> int:
        return int(self.values.size)

    def sizes(self, dot_scale: float = 1.0) -> np.ndarray:
        """
        Returns marker areas, proportional to the absolute value of each cell.

        Args:
            dot_scale (float): Area per unit of absolute value. Defaults to 1.0.

        Returns:
            np.ndarray: Non-negative marker areas.
        """
        return np.abs(self.values) * abs(float(dot_scale))


@dataclass(frozen=True)
class GridLineSet:
    """
    Data class for one family of grid lines (major or minor), split by orientation.
    """

    horizontal: np.ndarray
    vertical: np.ndarray

    @property
    def segments(self) -> np.ndarray:
        return np.concatenate([self.horizontal, self.vertical], axis=0)

    def __len__(self) -> int:
        return int(self.horizontal.shape[0] + self.vertical.shape[0])


@dataclass(frozen=True)
class LayoutResult:
    """
    Data class holding everything a renderer needs to draw a dot plot. All arrays are
    read-only.
    """

    mode: RenderMode
    shape: Tuple[int, int]
    region: np.ndarray
    masked_matrix: np.ndarray
    coordinates: CoordinateGrid
    major: GridLineSet
    minor: GridLineSet
    row_label_anchors: np.ndarray
    col_label_anchors: np.ndarray
    visible_rows: np.ndarray
    visible_cols: np.ndarray
    visible_row_labels: Tuple[str, ...]
    visible_col_labels: Tuple[str, ...]
    value_text: Optional[Tuple[str, ...]] = None

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """
        Returns the (x0, x1, y0, y1) frame enclosing every cell of the matrix.
        """
        n_rows, n_cols = self.shape
        return (1.0, float(n_cols + 1), 1.0, float(n_rows + 1))

    def to_frame(self) -> pd.DataFrame:
        """
        Returns the plotted cells as a DataFrame.

        Returns:
            pd.DataFrame: One row per plotted cell with columns row, col, x, y, value,
                and text when value overlays are enabled.
        """
        grid = self.coordinates
        df = pd.DataFrame(
            {
                "row": grid.rows,
                "col": grid.cols,
                "x": grid.x,
                "y": grid.y,
                "value": grid.values,
            }
        )
        if self.value_text is not None:
            df["text"] = list(self.value_text)
        return df


# ------------------------------------------------------------
# Coordinate mapping
# ------------------------------------------------------------


def cell_center(
    row: Union[int, np.ndarray], col: Union[int, np.ndarray], n_rows: int
) -> Tuple[Any, Any]:
    """
    Maps 0-based cell indices to marker centers.

    Args:
        row (Union[int, np.ndarray]): 0-based row index (from the top).
        col (Union[int, np.ndarray]): 0-based column index (from the left).
        n_rows (int): Number of matrix rows.

    Returns:
        Tuple[Any, Any]: (x, y) center coordinates.
    """
    return np.add(col, 1.5), np.subtract(n_rows + 0.5, row)


def cell_from_center(
    x: Union[float, np.ndarray], y: Union[float, np.ndarray], n_rows: int
) -> Tuple[Any, Any]:
    """
    Inverse of `cell_center`: maps marker centers back to 0-based cell indices.

    Args:
        x (Union[float, np.ndarray]): Marker x coordinate.
        y (Union[float, np.ndarray]): Marker y coordinate.
        n_rows (int): Number of matrix rows.

    Returns:
        Tuple[Any, Any]: (row, col) 0-based indices as integers.
    """
    row = np.rint(np.subtract(n_rows + 0.5, y)).astype(int)
    col = np.rint(np.subtract(x, 1.5)).astype(int)
    return row, col


# ------------------------------------------------------------
# Region masks
# ------------------------------------------------------------


def region_mask(shape: Tuple[int, int], mode: RenderMode) -> np.ndarray:
    """
    Returns the boolean mask of cells kept by `mode`.

    Args:
        shape (Tuple[int, int]): Matrix shape.
        mode (RenderMode): Render mode.

    Returns:
        np.ndarray: Boolean mask, True where a cell belongs to the region.
    """
    ones = np.ones(shape, dtype=bool)
    if mode.kind == "lower":
        return np.tril(ones, mode.k)
    if mode.kind == "upper":
        return np.triu(ones, mode.k)
    return ones


# ------------------------------------------------------------
# Grid geometry
# ------------------------------------------------------------


def _as_segments(segments: List[Tuple[Tuple[float, float], Tuple[float, float]]]) -> np.ndarray:
    if not segments:
        return _EMPTY_SEGMENTS.copy()
    return np.asarray(segments, dtype=float).reshape(-1, 2, 2)


def _swap_axes(segments: np.ndarray) -> np.ndarray:
    return segments[:, :, ::-1].copy()


def _full_grid(n_rows: int, n_cols: int) -> Tuple[GridLineSet, GridLineSet]:
    """
    Computes the rectangular lattice for full mode.

    Args:
        n_rows (int): Number of rows.
        n_cols (int): Number of columns.

    Returns:
        Tuple[GridLineSet, GridLineSet]: (major, minor) grid lines.
    """
    x0, x1 = 1.0, float(n_cols + 1)
    y0, y1 = 1.0, float(n_rows + 1)
    major = GridLineSet(
        horizontal=_as_segments([((x0, y), (x1, y)) for y in range(1, n_rows + 2)]),
        vertical=_as_segments([((x, y0), (x, y1)) for x in range(1, n_cols + 2)]),
    )
    # Minor lines pass through dot centers; rows listed top to bottom
    minor = GridLineSet(
        horizontal=_as_segments([((x0, n_rows - r + 0.5), (x1, n_rows - r + 0.5)) for r in range(n_rows)]),
        vertical=_as_segments([((c + 1.5, y0), (c + 1.5, y1)) for c in range(n_cols)]),
    )
    return major, minor


def _row_extents(n: int, mode: RenderMode) -> List[Optional[Tuple[int, int]]]:
    """
    Returns the [start, stop) x-extent of each row's visible cells in a triangular mode.

    Args:
        n (int): Matrix size.
        mode (RenderMode): Triangular render mode.

    Returns:
        List[Optional[Tuple[int, int]]]: One entry per row (top to bottom); None for rows
            with no visible cells.
    """
    extents: List[Optional[Tuple[int, int]]] = []
    for r in range(1, n + 1):
        if mode.kind == "lower":
            count = min(max(r + mode.k, 0), n)
            extents.append((1, 1 + count) if count > 0 else None)
        else:
            start = max(1, r + mode.k)
            extents.append((start, n + 1) if start <= n else None)
    return extents


def _staircase_grid(n: int, mode: RenderMode) -> Tuple[GridLineSet, GridLineSet]:
    """
    Computes staircase grid lines for a triangular mode.

    Horizontal lines run from the free end of the staircase to the frame edge the
    triangle hangs from (x = 1 for lower, x = n + 1 for upper). Triangular regions of a
    square matrix are symmetric under swapping x and y, so vertical lines are the
    horizontal ones with their coordinates swapped.

    Args:
        n (int): Matrix size.
        mode (RenderMode): Triangular render mode.

    Returns:
        Tuple[GridLineSet, GridLineSet]: (major, minor) grid lines.
    """
    anchored_left = mode.kind == "lower"
    extents = _row_extents(n, mode)
    visible = [r for r, ext in enumerate(extents, start=1) if ext is not None]
    if not visible:
        empty = GridLineSet(_EMPTY_SEGMENTS.copy(), _EMPTY_SEGMENTS.copy())
        return empty, GridLineSet(_EMPTY_SEGMENTS.copy(), _EMPTY_SEGMENTS.copy())

    def _segment(ext: Tuple[int, int], y: float) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        start, stop = ext
        if anchored_left:
            return ((float(stop), y), (float(start), y))
        return ((float(start), y), (float(stop), y))

    first, last = visible[0], visible[-1]
    major_h = []
    # Boundary y = Y lies between row n + 1 - Y (above) and row n + 2 - Y (below)
    for y in range(n + 2 - first, n - last, -1):
        adjacent = [
            extents[r - 1]
            for r in (n + 1 - y, n + 2 - y)
            if 1 <= r <= n and extents[r - 1] is not None
        ]
        span = (min(e[0] for e in adjacent), max(e[1] for e in adjacent))
        major_h.append(_segment(span, float(y)))
    minor_h = [_segment(extents[r - 1], n - r + 1.5) for r in visible]

    major_h_arr = _as_segments(major_h)
    minor_h_arr = _as_segments(minor_h)
    major = GridLineSet(horizontal=major_h_arr, vertical=_swap_axes(major_h_arr))
    minor = GridLineSet(horizontal=minor_h_arr, vertical=_swap_axes(minor_h_arr))
    return major, minor


# ------------------------------------------------------------
# Labels
# ------------------------------------------------------------


def _label_geometry(
    n_rows: int, n_cols: int, mode: RenderMode
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Computes visible row/column indices and their label anchors.

    Args:
        n_rows (int): Number of rows.
        n_cols (int): Number of columns.
        mode (RenderMode): Render mode.

    Returns:
        Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
            (visible_rows, visible_cols, row_anchors, col_anchors), indices 0-based.
    """
    k = mode.k
    if mode.kind == "full":
        rows = np.arange(n_rows)
        cols = np.arange(n_cols)
        row_xy = [(0.5, n_rows - r + 0.5) for r in rows]
        col_xy = [(c + 1.5, float(n_rows + 1)) for c in cols]
    elif mode.kind == "lower":
        n = n_rows
        rows = np.array([r for r in range(n) if r + 1 + k >= 1], dtype=int)
        cols = np.array([c for c in range(n) if c + 1 <= n + k], dtype=int)
        # Lower labels sit half a cell off the staircase
        row_xy = [(0.5, n - r + 0.5) for r in rows]
        col_xy = [(c + 1.5, n + 2 - max(1, c + 1 - k) + 0.5) for c in cols]
    else:
        n = n_rows
        rows = np.array([r for r in range(n) if r + 1 <= n - k], dtype=int)
        cols = np.array([c for c in range(n) if c + 1 >= 1 + k], dtype=int)
        # Upper row labels sit flush against the first visible cell
        row_xy = [(float(max(1, r + 1 + k)), n - r + 0.5) for r in rows]
        col_xy = [(c + 1.5, float(n + 1)) for c in cols]
    row_anchors = np.asarray(row_xy, dtype=float).reshape(-1, 2) if row_xy else _EMPTY_ANCHORS.copy()
    col_anchors = np.asarray(col_xy, dtype=float).reshape(-1, 2) if col_xy else _EMPTY_ANCHORS.copy()
    return rows.astype(int), cols.astype(int), row_anchors, col_anchors


# ------------------------------------------------------------
# Value text
# ------------------------------------------------------------


def format_value(value: float, precision: int) -> str:
    """
    Formats a value rounded to `precision` decimal places.

    Args:
        value (float): Value to format.
        precision (int): Number of decimal places.

    Returns:
        str: Formatted value; negative zero prints as zero.
    """
    text = f"{round(float(value), precision):.{precision}f}"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text


def overlay_text(values: np.ndarray, overlay: Overlay, precision: int) -> Optional[Tuple[str, ...]]:
    """
    Builds value text for plotted cells.

    Args:
        values (np.ndarray): Values of plotted cells.
        overlay (Overlay): Overlay selection.
        precision (int): Number of decimal places.

    Returns:
        Optional[Tuple[str, ...]]: One string per cell, or None when overlays are off.
            Significant-only overlays blank cells with abs(value) <= threshold but keep
            their slot so text stays aligned with coordinates.
    """
    if overlay.kind == "none":
        return None
    texts = []
    for value in values:
        if overlay.kind == "sigonly" and abs(value) <= overlay.threshold:
            texts.append("")
        else:
            texts.append(format_value(value, precision))
    return tuple(texts)


# ------------------------------------------------------------
# Entry point
# ------------------------------------------------------------


def compute_layout(
    matrix: Any,
    options: Optional[DotPlotOptions] = None,
    **kwargs: Any,
) -> LayoutResult:
    """
    Computes marker coordinates, grid lines, and labels for a dot plot.

    Args:
        matrix (Any): Matrix or matrix-like input (DataFrame, array, nested sequence).
        options (Optional[DotPlotOptions]): Validated options. Defaults to None.

    Kwargs:
        **kwargs: Passed to `DotPlotOptions.build` when `options` is None.

    Returns:
        LayoutResult: Complete layout for the renderer.

    Raises:
        TypeError: If both `options` and keyword options are given.
        InvalidModeForShapeError: If a triangular mode is used on a non-square matrix.
        OffsetOutOfRangeError: If the diagonal offset lies outside [-rows, cols].
        MalformedLabelLengthError: If label counts do not match the matrix.
    """
    if options is None:
        options = DotPlotOptions.build(**kwargs)
    elif kwargs:
        raise TypeError("pass either `options` or keyword options, not both")
    matrix = Matrix.coerce(matrix)
    options.validate(matrix)

    n_rows, n_cols = matrix.shape
    mode = options.mode
    region = region_mask(matrix.shape, mode)
    masked = np.where(region, matrix.values, np.nan)
    plotted = ~np.isnan(masked)
    if not region.any():
        warn(f"{mode.kind}({mode.k}) keeps no cells; the plot will be empty")

    rows, cols = np.nonzero(plotted)
    x, y = cell_center(rows, cols, n_rows)
    values = masked[rows, cols]
    coordinates = CoordinateGrid(
        rows=_frozen(rows.astype(int)),
        cols=_frozen(cols.astype(int)),
        x=_frozen(np.array(x, dtype=float)),
        y=_frozen(np.array(y, dtype=float)),
        values=_frozen(values),
    )

    if mode.is_triangular:
        major, minor = _staircase_grid(n_rows, mode)
    else:
        major, minor = _full_grid(n_rows, n_cols)

    vis_rows, vis_cols, row_anchors, col_anchors = _label_geometry(n_rows, n_cols, mode)
    row_labels, col_labels = options.resolve_labels(matrix)

    return LayoutResult(
        mode=mode,
        shape=(n_rows, n_cols),
        region=_frozen(region),
        masked_matrix=_frozen(masked),
        coordinates=coordinates,
        major=_frozen_lines(major),
        minor=_frozen_lines(minor),
        row_label_anchors=_frozen(row_anchors),
        col_label_anchors=_frozen(col_anchors),
        visible_rows=_frozen(vis_rows),
        visible_cols=_frozen(vis_cols),
        visible_row_labels=_take(row_labels, vis_rows),
        visible_col_labels=_take(col_labels, vis_cols),
        value_text=overlay_text(values, options.overlay, options.precision),
    )


def _take(labels: Sequence[str], indices: np.ndarray) -> Tuple[str, ...]:
    return tuple(labels[int(i)] for i in indices)


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def _frozen_lines(lines: GridLineSet) -> GridLineSet:
    return GridLineSet(horizontal=_frozen(lines.horizontal), vertical=_frozen(lines.vertical))
