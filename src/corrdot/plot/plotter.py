"""
corrdot/plot/plotter
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Any, List, Mapping, Optional, Union

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection, PathCollection
from matplotlib.colorbar import Colorbar
from matplotlib.text import Text

from ..core.layout import LayoutResult, compute_layout
from ..core.matrix import Matrix
from ..core.options import DotPlotOptions
from .renderers import ColorbarRenderer, DotsRenderer, GridRenderer, LabelsRenderer
from .style import StyleConfig, StyleValue


@dataclass
class DotPlotHandles:
    """
    Handles to every artist of a rendered dot plot, for further customization.

    Fields for disabled elements are None (e.g. `value_text` without overlays,
    `minor_xlines`/`minor_ylines` without the minor grid).
    """

    figure: plt.Figure
    axes: plt.Axes
    points: PathCollection
    major_xlines: Optional[LineCollection]
    major_ylines: Optional[LineCollection]
    minor_xlines: Optional[LineCollection]
    minor_ylines: Optional[LineCollection]
    row_labels: List[Text]
    col_labels: List[Text]
    value_text: Optional[List[Text]]
    colorbar: Optional[Colorbar]
    layout: LayoutResult


class DotPlotter:
    """
    Dot plot builder.

    The plotter validates options once, computes the layout eagerly, and never
    mutates the input matrix. Drawing happens in `plot()`; nothing is drawn if
    validation fails.
    """

    def __init__(
        self,
        matrix: Any,
        options: Optional[DotPlotOptions] = None,
        *,
        style: Optional[Union[StyleConfig, Mapping[str, StyleValue]]] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initializes the DotPlotter instance.

        Args:
            matrix (Any): Matrix or matrix-like input (DataFrame, array, nested sequence).
            options (Optional[DotPlotOptions]): Validated options. Defaults to None.

        Kwargs:
            style (Optional[Union[StyleConfig, Mapping[str, StyleValue]]]): Style config or
                overrides. Defaults to None.
            **kwargs: Passed to `DotPlotOptions.build` when `options` is None.

        Raises:
            DotPlotError: If options are invalid for the matrix.
        """
        self.matrix = Matrix.coerce(matrix)
        if options is None:
            options = DotPlotOptions.build(**kwargs)
        elif kwargs:
            raise TypeError("pass either `options` or keyword options, not both")
        self.options = options
        self.style = style if isinstance(style, StyleConfig) else StyleConfig(style)
        self.layout = compute_layout(self.matrix, self.options)
        self._fig: Optional[plt.Figure] = None

    def plot(
        self,
        ax: Optional[plt.Axes] = None,
        *,
        colorbar: bool = True,
        cmap: Optional[str] = None,
        center: Optional[float] = None,
        vmin: Optional[float] = None,
        vmax: Optional[float] = None,
        colorbar_label: Optional[str] = None,
        tick_decimals: Optional[int] = None,
    ) -> DotPlotHandles:
        """
        Draws the dot plot.

        Args:
            ax (Optional[plt.Axes]): Axes to draw into; a new figure is created when None.
                Defaults to None.

        Kwargs:
            colorbar (bool): Whether to draw the colorbar. Defaults to True.
            cmap (Optional[str]): Colormap override. Defaults to None (style "cmap").
            center (Optional[float]): Center for a diverging color scale. Defaults to None.
            vmin (Optional[float]): Lower color limit. Defaults to None.
            vmax (Optional[float]): Upper color limit. Defaults to None.
            colorbar_label (Optional[str]): Colorbar label. Defaults to None.
            tick_decimals (Optional[int]): Maximum colorbar tick decimals. Defaults to None.

        Returns:
            DotPlotHandles: Handles to all drawn artists.

        Raises:
            ValueError: If `center` does not lie strictly between the color limits, or
                `tick_decimals` is negative. Nothing is drawn in that case.
        """
        # Resolve color and colorbar arguments before touching any figure
        dots = DotsRenderer(cmap=cmap, center=center, vmin=vmin, vmax=vmax)
        norm = dots.resolve_norm(self.layout)
        colorbar_renderer = (
            ColorbarRenderer(label=colorbar_label, tick_decimals=tick_decimals) if colorbar else None
        )
        if ax is None:
            fig, ax = plt.subplots(figsize=self.style.get("figsize"))
        else:
            fig = ax.figure
        background = self.style.get("background", None)
        if background is not None:
            fig.patch.set_facecolor(background)

        layout = self.layout
        minor = GridRenderer("minor").render(ax, layout, self.options, self.style)
        points = dots.render(ax, layout, self.options, self.style, norm=norm)
        major = GridRenderer("major").render(ax, layout, self.options, self.style)
        row_labels = LabelsRenderer("row_labels").render(ax, layout, self.options, self.style)
        col_labels = LabelsRenderer("col_labels").render(ax, layout, self.options, self.style)
        value_text = LabelsRenderer("values").render(ax, layout, self.options, self.style)

        self._finalize_axes(ax)
        cbar = colorbar_renderer.render(fig, ax, points, self.style) if colorbar_renderer else None
        self._fig = fig
        return DotPlotHandles(
            figure=fig,
            axes=ax,
            points=points,
            major_xlines=major["xlines"],
            major_ylines=major["ylines"],
            minor_xlines=minor["xlines"],
            minor_ylines=minor["ylines"],
            row_labels=row_labels,
            col_labels=col_labels,
            value_text=value_text,
            colorbar=cbar,
            layout=layout,
        )

    def _finalize_axes(self, ax: plt.Axes) -> None:
        """
        Fixes limits and aspect, hides the axes, and leaves headroom for column labels.

        Args:
            ax (plt.Axes): Dot plot axes.
        """
        x0, x1, y0, y1 = self.layout.extent
        ax.set_xlim(x0, x1)
        ax.set_ylim(y0, y1)
        ax.set_aspect("equal")
        ax.set_axis_off()
        # Shrink height by (s - 1) / s, s = largest dimension, so rotated column labels fit
        s = max(self.layout.shape)
        if s > 1:
            pos = ax.get_position()
            ax.set_position([pos.x0, pos.y0, pos.width, pos.height * (s - 1) / s])

    def show(self) -> None:
        """
        Shows the last rendered figure, drawing it first if needed.
        """
        if self._fig is None:
            self.plot()
        plt.show()

    def save(self, path: Union[str, PathLike[str]], **kwargs: Any) -> None:
        """
        Saves the last rendered figure with its background color.

        Args:
            path (Union[str, PathLike[str]]): Output path for the figure.

        Kwargs:
            **kwargs: Additional matplotlib savefig options. Defaults to {}.

        Raises:
            RuntimeError: If nothing has been rendered yet.
        """
        if self._fig is None:
            raise RuntimeError("Nothing to save; call plot() first.")
        self._fig.savefig(
            path,
            facecolor=self._fig.get_facecolor(),
            **kwargs,
        )


def dot_plot(
    matrix: Any,
    *,
    ax: Optional[plt.Axes] = None,
    style: Optional[Union[StyleConfig, Mapping[str, StyleValue]]] = None,
    colorbar: bool = True,
    cmap: Optional[str] = None,
    center: Optional[float] = None,
    vmin: Optional[float] = None,
    vmax: Optional[float] = None,
    colorbar_label: Optional[str] = None,
    tick_decimals: Optional[int] = None,
    **options: Any,
) -> DotPlotHandles:
    """
    Builds and draws a dot plot in one call.

    Args:
        matrix (Any): Matrix or matrix-like input (DataFrame, array, nested sequence).

    Kwargs:
        ax (Optional[plt.Axes]): Axes to draw into. Defaults to None (new figure).
        style (Optional[Union[StyleConfig, Mapping[str, StyleValue]]]): Style config or
            overrides. Defaults to None.
        colorbar (bool): Whether to draw the colorbar. Defaults to True.
        cmap (Optional[str]): Colormap override. Defaults to None.
        center (Optional[float]): Center for a diverging color scale. Defaults to None.
        vmin (Optional[float]): Lower color limit. Defaults to None.
        vmax (Optional[float]): Upper color limit. Defaults to None.
        colorbar_label (Optional[str]): Colorbar label. Defaults to None.
        tick_decimals (Optional[int]): Maximum colorbar tick decimals. Defaults to None.
        **options: Layout options for `DotPlotOptions.build` (mode, diagonal_offset,
            major_grid, minor_grid, dot_scale, alpha, row_labels, col_labels, overlay,
            overlay_threshold, precision).

    Returns:
        DotPlotHandles: Handles to all drawn artists.

    Raises:
        DotPlotError: If options are invalid for the matrix.
    """
    plotter = DotPlotter(matrix, style=style, **options)
    return plotter.plot(
        ax,
        colorbar=colorbar,
        cmap=cmap,
        center=center,
        vmin=vmin,
        vmax=vmax,
        colorbar_label=colorbar_label,
        tick_decimals=tick_decimals,
    )
