"""
corrdot/plot/renderers/grid
~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Dict, Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from .base import add_segments

if TYPE_CHECKING:
    from ...core.layout import GridLineSet, LayoutResult
    from ...core.options import DotPlotOptions
    from ..style import StyleConfig


class GridRenderer:
    """
    Class for rendering one grid line family (major frame lines or minor center lines).
    """

    def __init__(self, kind: str) -> None:
        """
        Initializes the GridRenderer instance.

        Args:
            kind (str): Either "major" or "minor".

        Raises:
            ValueError: If `kind` is unknown.
        """
        if kind not in {"major", "minor"}:
            raise ValueError("grid kind must be 'major' or 'minor'")
        self.kind = kind

    def render(
        self,
        ax: plt.Axes,
        layout: LayoutResult,
        options: DotPlotOptions,
        style: StyleConfig,
        **kwargs: Any,
    ) -> Dict[str, Optional[LineCollection]]:
        """
        Renders horizontal and vertical lines of this family.

        Args:
            ax (plt.Axes): Target axes.
            layout (LayoutResult): Precomputed layout.
            options (DotPlotOptions): Validated options.
            style (StyleConfig): Style configuration.

        Returns:
            Dict[str, Optional[LineCollection]]: {"ylines": horizontal, "xlines": vertical};
                both None when this family is disabled.
        """
        enabled = options.major_grid if self.kind == "major" else options.minor_grid
        if not enabled:
            return {"ylines": None, "xlines": None}
        lines: GridLineSet = layout.major if self.kind == "major" else layout.minor
        # Minor lines sit under the dots, major lines above them
        zorder = 3 if self.kind == "major" else 1
        line_style = {
            "color": style.get(f"{self.kind}_grid_color"),
            "lw": float(style.get(f"{self.kind}_grid_lw")),
            "zorder": zorder,
        }
        return {
            "ylines": add_segments(ax, lines.horizontal, **line_style),
            "xlines": add_segments(ax, lines.vertical, **line_style),
        }
