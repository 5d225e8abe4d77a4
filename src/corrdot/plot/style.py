"""
corrdot/plot/style
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence, Tuple, TypeAlias, TypedDict, Union

from matplotlib.colors import Colormap

# Type alias for style values
StyleValue: TypeAlias = Union[
    str,
    float,
    int,
    bool,
    None,
    Sequence[float],
    Colormap,
]


class StyleDefaults(TypedDict):
    """
    Type class for dot plot style defaults.
    """

    figsize: Tuple[float, float]
    background: str
    cmap: Union[str, Colormap]
    major_grid_color: str
    major_grid_lw: float
    minor_grid_color: Sequence[float]
    minor_grid_lw: float
    text_color: str
    label_fontsize: float
    value_fontsize: float
    value_color: str
    colorbar_tick_decimals: Optional[int]
    colorbar_label: Optional[str]


DEFAULT_STYLE: StyleDefaults = {
    # Figure layout
    "figsize": (6, 6),
    "background": "white",
    # Dot colors
    "cmap": "viridis",
    # Frame lines enclosing plotted cells
    "major_grid_color": "black",
    "major_grid_lw": 0.8,
    # Light lines through dot centers
    "minor_grid_color": (0.8, 0.8, 0.8),
    "minor_grid_lw": 0.5,
    # Row/column labels
    "text_color": "black",
    "label_fontsize": 9,
    # Value overlay text
    "value_fontsize": 7,
    "value_color": "black",
    # Colorbar; None keeps Matplotlib's tick formatting
    "colorbar_tick_decimals": None,
    "colorbar_label": None,
}


class StyleConfig:
    """
    Class for storing dot plot style defaults and overrides.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, StyleValue]] = None,
        *,
        defaults: Optional[Mapping[str, StyleValue]] = None,
    ) -> None:
        """
        Initializes the StyleConfig instance.

        Args:
            overrides (Optional[Mapping[str, StyleValue]]): Initial overrides. Defaults to None.

        Kwargs:
            defaults (Optional[Mapping[str, StyleValue]]): Base style defaults. Defaults to None
                (DEFAULT_STYLE).

        Raises:
            KeyError: If an override names an unknown style key.
        """
        if defaults is None:
            defaults = DEFAULT_STYLE
        self._defaults: Dict[str, StyleValue] = dict(defaults)
        self._overrides: Dict[str, StyleValue] = {}
        if overrides:
            self.update(overrides)

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        """
        Gets a style value with override priority.

        Args:
            key (str): Style key.
            default (Optional[StyleValue]): Default value if key not found. Defaults to None.

        Returns:
            StyleValue: Resolved style value.
        """
        if key in self._overrides:
            return self._overrides[key]
        return self._defaults.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        """
        Overrides a style value.

        Args:
            key (str): Style key.
            value (StyleValue): Style value to set.

        Raises:
            KeyError: If `key` is not a known style key.
        """
        if key not in self._defaults:
            raise KeyError(f"Unknown style key {key!r}; known keys: {sorted(self._defaults)}")
        self._overrides[key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        """
        Applies multiple overrides at once.

        Args:
            overrides (Mapping[str, StyleValue]): Mapping of style keys to values.
        """
        for key, value in overrides.items():
            self.set(key, value)

    def as_dict(self) -> Dict[str, StyleValue]:
        """
        Returns a merged view of defaults and overrides.

        Returns:
            Dict[str, StyleValue]: Merged style dictionary.
        """
        merged = dict(self._defaults)
        merged.update(self._overrides)
        return merged

    def __getitem__(self, key: str) -> StyleValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides or key in self._defaults
