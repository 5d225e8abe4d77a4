"""
corrdot/plot
~~~~~~~~~~~~
"""

from .plotter import DotPlotHandles, DotPlotter, dot_plot
from .style import DEFAULT_STYLE, StyleConfig

__all__ = ["DotPlotHandles", "DotPlotter", "dot_plot", "DEFAULT_STYLE", "StyleConfig"]
