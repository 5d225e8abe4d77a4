"""
corrdot
~~~~~~~

Dot plots for matrices of statistical values (correlations, p-values).
"""

from .core.errors import (
    DotPlotError,
    InvalidModeForShapeError,
    InvalidOverlayThresholdError,
    MalformedLabelLengthError,
    OffsetOutOfRangeError,
)
from .core.layout import LayoutResult, compute_layout
from .core.matrix import Matrix
from .core.options import DotPlotOptions, Overlay, RenderMode
from .core.stats import CorrelationResult, correlate
from .plot.plotter import DotPlotHandles, DotPlotter, dot_plot

__all__ = [
    "Matrix",
    "RenderMode",
    "Overlay",
    "DotPlotOptions",
    "LayoutResult",
    "compute_layout",
    "CorrelationResult",
    "correlate",
    "DotPlotHandles",
    "DotPlotter",
    "dot_plot",
    "DotPlotError",
    "InvalidModeForShapeError",
    "OffsetOutOfRangeError",
    "InvalidOverlayThresholdError",
    "MalformedLabelLengthError",
]

__version__ = "0.1.0"
