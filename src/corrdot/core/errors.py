"""
corrdot/core/errors
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations


class DotPlotError(ValueError):
    """
    Base class for invalid dot plot arguments. Raised before any drawing occurs.
    """


class InvalidModeForShapeError(DotPlotError):
    """
    Raised when a triangular mode is requested for a non-square matrix.
    """


class OffsetOutOfRangeError(DotPlotError):
    """
    Raised when the diagonal offset falls outside [-rows, cols].
    """


class InvalidOverlayThresholdError(DotPlotError):
    """
    Raised when significant-only overlays are requested without a numeric threshold.
    """


class MalformedLabelLengthError(DotPlotError):
    """
    Raised when row or column labels do not match the matrix dimensions.
    """
