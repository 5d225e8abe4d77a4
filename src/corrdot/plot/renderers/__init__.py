"""Plot layer renderers."""

from .base import Renderer, add_segments
from .colorbar import ColorbarRenderer
from .dots import DotsRenderer
from .grid import GridRenderer
from .labels import LabelsRenderer

__all__ = [
    "ColorbarRenderer",
    "DotsRenderer",
    "GridRenderer",
    "LabelsRenderer",
    "Renderer",
    "add_segments",
]
