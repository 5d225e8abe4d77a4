"""
corrdot/plot/renderers/dots
~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PathCollection
from matplotlib.colors import Normalize, TwoSlopeNorm

if TYPE_CHECKING:
    from ...core.layout import LayoutResult
    from ...core.options import DotPlotOptions
    from ..style import StyleConfig


def _resolve_color_normalization(
    values: np.ndarray,
    *,
    center: Optional[float] = None,
    vmin: Optional[float] = None,
    vmax: Optional[float] = None,
) -> Normalize:
    """
    Resolves color normalization for dot colors.

    Args:
        values (np.ndarray): Values of plotted cells.

    Kwargs:
        center (Optional[float]): Center value for diverging normalization. Defaults to None.
        vmin (Optional[float]): Minimum value override. Defaults to None.
        vmax (Optional[float]): Maximum value override. Defaults to None.

    Returns:
        Normalize: Normalization shared by the dots and the colorbar.

    Raises:
        ValueError: If `center` does not lie strictly between the color limits.
    """
    finite = values[np.isfinite(values)]
    vmin_ = vmin if vmin is not None else (float(finite.min()) if finite.size else None)
    vmax_ = vmax if vmax is not None else (float(finite.max()) if finite.size else None)
    if center is not None:
        if vmin_ is None or vmax_ is None:
            # No plotted values to anchor a diverging scale around
            return Normalize(vmin=vmin_, vmax=vmax_)
        if not vmin_ < center < vmax_:
            raise ValueError(f"center={center} must lie strictly between vmin and vmax")
        return TwoSlopeNorm(vmin=vmin_, vcenter=center, vmax=vmax_)
    return Normalize(vmin=vmin_, vmax=vmax_)


class DotsRenderer:
    """
    Class for rendering value-encoded circular markers.
    """

    def __init__(
        self,
        *,
        cmap: Optional[str] = None,
        center: Optional[float] = None,
        vmin: Optional[float] = None,
        vmax: Optional[float] = None,
        edgecolor: str = "none",
        **kwargs: Any,
    ) -> None:
        """
        Initializes the DotsRenderer instance.

        Kwargs:
            cmap (Optional[str]): Colormap override; falls back to style "cmap". Defaults to None.
            center (Optional[float]): Center value for diverging normalization. Defaults to None.
            vmin (Optional[float]): Minimum value override. Defaults to None.
            vmax (Optional[float]): Maximum value override. Defaults to None.
            edgecolor (str): Marker edge color. Defaults to "none".
            **kwargs: Extra keyword arguments for `Axes.scatter`. Defaults to {}.
        """
        self.cmap = cmap
        self.center = center
        self.vmin = vmin
        self.vmax = vmax
        self.edgecolor = edgecolor
        self._extra = dict(kwargs)

    def resolve_norm(self, layout: LayoutResult) -> Normalize:
        """
        Resolves the color normalization for a layout without drawing anything.

        Args:
            layout (LayoutResult): Precomputed layout.

        Returns:
            Normalize: Normalization shared by the dots and the colorbar.

        Raises:
            ValueError: If `center` does not lie strictly between the color limits.
        """
        return _resolve_color_normalization(
            layout.coordinates.values,
            center=self.center,
            vmin=self.vmin,
            vmax=self.vmax,
        )

    def render(
        self,
        ax: plt.Axes,
        layout: LayoutResult,
        options: DotPlotOptions,
        style: StyleConfig,
        **kwargs: Any,
    ) -> PathCollection:
        """
        Renders one filled circle per plotted cell.

        Marker area is abs(value) * dot_scale; color follows the signed value.

        Args:
            ax (plt.Axes): Target axes.
            layout (LayoutResult): Precomputed layout.
            options (DotPlotOptions): Validated options.
            style (StyleConfig): Style configuration.

        Kwargs:
            norm (Optional[Normalize]): Normalization from `resolve_norm`. Defaults to None
                (resolved here).

        Returns:
            PathCollection: Scatter collection of the dots.
        """
        grid = layout.coordinates
        norm = kwargs.get("norm")
        if norm is None:
            norm = self.resolve_norm(layout)
        return ax.scatter(
            grid.x,
            grid.y,
            s=grid.sizes(options.dot_scale),
            c=grid.values,
            cmap=self.cmap if self.cmap is not None else style.get("cmap", "viridis"),
            norm=norm,
            alpha=options.alpha,
            marker="o",
            edgecolors=self.edgecolor,
            zorder=2,
            **self._extra,
        )
