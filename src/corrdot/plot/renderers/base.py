"""
corrdot/plot/renderers/base
~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Union, TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.colors import to_rgba

if TYPE_CHECKING:
    from ...core.layout import LayoutResult
    from ...core.options import DotPlotOptions
    from ..style import StyleConfig


class Renderer(Protocol):
    """
    Class for defining the renderer interface used by dot plot layers.
    Protocol only; implement in concrete renderers.
    """

    def render(
        self,
        ax: plt.Axes,
        layout: LayoutResult,
        options: DotPlotOptions,
        style: StyleConfig,
        **kwargs: Any,
    ) -> Any:
        """
        Executes rendering logic and returns the created artist(s).

        Args:
            ax (plt.Axes): Target axes.
            layout (LayoutResult): Precomputed layout.
            options (DotPlotOptions): Validated options.
            style (StyleConfig): Style configuration.

        Kwargs:
            **kwargs: Renderer keyword arguments. Defaults to {}.
        """
        # Protocol stub; no runtime implementation
        ...


def add_segments(
    ax: plt.Axes,
    segments: np.ndarray,
    *,
    color: Union[str, Sequence[float]],
    lw: float,
    alpha: float = 1.0,
    zorder: int = 2,
) -> Optional[LineCollection]:
    """
    Adds a family of line segments to the axes as one LineCollection.

    Args:
        ax (plt.Axes): Axes to render on.
        segments (np.ndarray): Segment array of shape (n, 2, 2).

    Kwargs:
        color (Union[str, Sequence[float]]): Line color.
        lw (float): Line width.
        alpha (float): Line alpha (opacity). Defaults to 1.0.
        zorder (int): Z-order for rendering. Defaults to 2.

    Returns:
        Optional[LineCollection]: The added collection, or None when there are no segments.
    """
    if segments.shape[0] == 0:
        return None
    collection = LineCollection(
        segments,
        linewidths=lw,
        colors=[to_rgba(color, alpha)],
        zorder=zorder,
    )
    ax.add_collection(collection)
    return collection
