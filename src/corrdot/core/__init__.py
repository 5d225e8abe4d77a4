"""
corrdot/core
~~~~~~~~~~~~
"""

from .errors import (
    DotPlotError,
    InvalidModeForShapeError,
    InvalidOverlayThresholdError,
    MalformedLabelLengthError,
    OffsetOutOfRangeError,
)
from .layout import (
    CoordinateGrid,
    GridLineSet,
    LayoutResult,
    cell_center,
    cell_from_center,
    compute_layout,
)
from .matrix import Matrix
from .options import DotPlotOptions, Overlay, RenderMode
from .stats import CorrelationResult, correlate

__all__ = [
    "Matrix",
    "RenderMode",
    "Overlay",
    "DotPlotOptions",
    "CoordinateGrid",
    "GridLineSet",
    "LayoutResult",
    "cell_center",
    "cell_from_center",
    "compute_layout",
    "CorrelationResult",
    "correlate",
    "DotPlotError",
    "InvalidModeForShapeError",
    "OffsetOutOfRangeError",
    "InvalidOverlayThresholdError",
    "MalformedLabelLengthError",
]
