"""
corrdot/util/warnings
"""

from __future__ import annotations

import warnings
from typing import Type


class DotPlotWarning(UserWarning):
    """
    Warning category for non-fatal dot plot conditions (empty regions, dropped values).
    """


def warn(message: str, category: Type[Warning] = DotPlotWarning, stacklevel: int = 2) -> None:
    """
    Emits a warning with a default stacklevel.

    Args:
        message (str): Warning message text.
        category (Type[Warning]): Warning category class. Defaults to DotPlotWarning.
        stacklevel (int): Stacklevel to report. Defaults to 2.
    """
    warnings.warn(message, category=category, stacklevel=stacklevel + 1)
