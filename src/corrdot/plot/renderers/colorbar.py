"""
corrdot/plot/renderers/colorbar
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.cm import ScalarMappable
from matplotlib.colorbar import Colorbar
from matplotlib.ticker import FuncFormatter

if TYPE_CHECKING:
    from ..style import StyleConfig


def _max_decimal_formatter(max_decimals: int) -> FuncFormatter:
    """
    Creates a formatter that caps decimal precision and trims trailing zeros.

    Args:
        max_decimals (int): Maximum number of decimal places.

    Returns:
        FuncFormatter: Matplotlib tick formatter.
    """

    def _format_value(value: float, _pos: int) -> str:
        text = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
        return "0" if text == "-0" else text

    return FuncFormatter(_format_value)


class ColorbarRenderer:
    """
    Class for rendering the color legend bound to the dot colors.
    """

    def __init__(
        self,
        *,
        label: Optional[str] = None,
        tick_decimals: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initializes the ColorbarRenderer instance.

        Kwargs:
            label (Optional[str]): Colorbar label; falls back to style "colorbar_label".
                Defaults to None.
            tick_decimals (Optional[int]): Maximum tick decimals; falls back to style
                "colorbar_tick_decimals". Defaults to None.
            **kwargs: Extra keyword arguments for `Figure.colorbar`. Defaults to {}.

        Raises:
            TypeError: If tick_decimals is not an integer.
            ValueError: If tick_decimals is negative.
        """
        if tick_decimals is not None:
            if isinstance(tick_decimals, bool) or not isinstance(tick_decimals, int):
                raise TypeError("tick_decimals must be an integer or None")
            if tick_decimals < 0:
                raise ValueError("tick_decimals must be non-negative")
        self.label = label
        self.tick_decimals = tick_decimals
        self._extra = dict(kwargs)

    def render(
        self,
        fig: plt.Figure,
        ax: plt.Axes,
        mappable: ScalarMappable,
        style: StyleConfig,
    ) -> Colorbar:
        """
        Renders the colorbar next to the dot axes.

        Args:
            fig (plt.Figure): Matplotlib Figure.
            ax (plt.Axes): Dot plot axes.
            mappable (ScalarMappable): Dot collection providing colormap and norm.
            style (StyleConfig): Plot style for defaults.

        Returns:
            Colorbar: The created colorbar.
        """
        cbar = fig.colorbar(mappable, ax=ax, **self._extra)
        tick_decimals = (
            self.tick_decimals
            if self.tick_decimals is not None
            else style.get("colorbar_tick_decimals", None)
        )
        if tick_decimals is not None:
            cbar.formatter = _max_decimal_formatter(int(tick_decimals))
            cbar.update_ticks()
        label = self.label if self.label is not None else style.get("colorbar_label", None)
        if label:
            cbar.set_label(label, color=style.get("text_color", "black"))
        cbar.ax.tick_params(labelsize=style.get("label_fontsize", 9), colors=style.get("text_color", "black"))
        return cbar
