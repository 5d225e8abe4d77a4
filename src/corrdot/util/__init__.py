"""
corrdot/util
~~~~~~~~~~~~
"""

from .warnings import DotPlotWarning, warn

__all__ = ["DotPlotWarning", "warn"]
