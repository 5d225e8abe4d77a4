"""Row/column label and value overlay renderers."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.text import Text


def _place_texts(
    ax: plt.Axes,
    anchors: np.ndarray,
    texts: Sequence[str],
    **text_kwargs: Any,
) -> List[Text]:
    if len(texts) != anchors.shape[0]:
        raise ValueError(f"{len(texts)} texts for {anchors.shape[0]} anchors")
    return [ax.text(x, y, label, **text_kwargs) for (x, y), label in zip(anchors, texts)]


class LabelsRenderer:
    """
    Class for rendering row labels, column labels, and value text.
    """

    def __init__(self, kind: str, **kwargs: Any) -> None:
        self.kind = kind
        self.kwargs = dict(kwargs)

    def render(
        self,
        ax: plt.Axes,
        layout: Any,
        options: Any,
        style: Any,
        **kwargs: Any,
    ) -> Optional[List[Text]]:
        if self.kind == "row_labels":
            return self._render_row_labels(ax, layout, style)
        if self.kind == "col_labels":
            return self._render_col_labels(ax, layout, style)
        if self.kind == "values":
            return self._render_values(ax, layout, style)
        raise NotImplementedError(f"Unknown label layer: {self.kind}")

    def _text_style(self, style: Any) -> dict:
        font = self.kwargs.get("font", None)
        text_style = {
            "fontsize": self.kwargs.get("fontsize", style.get("label_fontsize", 9)),
            "color": self.kwargs.get("color", style.get("text_color", "black")),
        }
        if font is not None:
            text_style["fontname"] = font
        return text_style

    def _render_row_labels(self, ax: plt.Axes, layout: Any, style: Any) -> List[Text]:
        return _place_texts(
            ax,
            layout.row_label_anchors,
            layout.visible_row_labels,
            ha="right",
            va="center",
            **self._text_style(style),
        )

    def _render_col_labels(self, ax: plt.Axes, layout: Any, style: Any) -> List[Text]:
        # Rotated 270 degrees, right-aligned: text hangs above its anchor, reading downward
        return _place_texts(
            ax,
            layout.col_label_anchors,
            layout.visible_col_labels,
            ha="right",
            va="center",
            rotation=270,
            rotation_mode="anchor",
            **self._text_style(style),
        )

    def _render_values(self, ax: plt.Axes, layout: Any, style: Any) -> Optional[List[Text]]:
        if layout.value_text is None:
            return None
        grid = layout.coordinates
        anchors = np.column_stack([grid.x, grid.y]) if len(grid) else np.empty((0, 2))
        return _place_texts(
            ax,
            anchors,
            layout.value_text,
            ha="center",
            va="center",
            fontsize=self.kwargs.get("fontsize", style.get("value_fontsize", 7)),
            color=self.kwargs.get("color", style.get("value_color", "black")),
            zorder=4,
        )
