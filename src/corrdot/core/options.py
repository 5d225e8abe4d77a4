"""
corrdot/core/options
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Any, Optional, Sequence, Tuple, Union, TYPE_CHECKING

from .errors import (
    InvalidModeForShapeError,
    InvalidOverlayThresholdError,
    MalformedLabelLengthError,
    OffsetOutOfRangeError,
)

if TYPE_CHECKING:
    from .matrix import Matrix

_MODE_KINDS = ("full", "lower", "upper")
_OVERLAY_KINDS = ("none", "all", "sigonly")


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class RenderMode:
    """
    Tagged variant selecting which cells are drawn: full, lower(k), or upper(k).

    `k` follows numpy `tril`/`triu` semantics: 0 keeps the main diagonal, negative values
    move the boundary below it, positive values above it.
    """

    kind: str = "full"
    k: int = 0

    def __post_init__(self) -> None:
        if self.kind not in _MODE_KINDS:
            raise ValueError(f"mode must be one of {_MODE_KINDS}, got {self.kind!r}")
        if not _is_int(self.k):
            raise TypeError(f"diagonal offset must be an integer, got {self.k!r}")
        if self.kind == "full" and self.k != 0:
            raise ValueError("diagonal offset only applies to 'lower' and 'upper' modes")
        object.__setattr__(self, "k", int(self.k))

    @classmethod
    def full(cls) -> "RenderMode":
        return cls("full", 0)

    @classmethod
    def lower(cls, k: int = 0) -> "RenderMode":
        return cls("lower", k)

    @classmethod
    def upper(cls, k: int = 0) -> "RenderMode":
        return cls("upper", k)

    @classmethod
    def parse(cls, value: Union[str, "RenderMode", None], k: Optional[int] = None) -> "RenderMode":
        """
        Builds a RenderMode from a mode name or passes an existing one through.

        Args:
            value (Union[str, RenderMode, None]): Mode name ("full", "lower", "upper",
                case-insensitive), a RenderMode, or None for full.
            k (Optional[int]): Diagonal offset for triangular names. Defaults to None (0).

        Returns:
            RenderMode: Parsed mode.

        Raises:
            TypeError: If `value` is neither a string nor a RenderMode.
        """
        if value is None:
            value = "full"
        if isinstance(value, RenderMode):
            if k is not None and k != value.k:
                raise ValueError("diagonal offset given twice with different values")
            return value
        if not isinstance(value, str):
            raise TypeError(f"mode must be a string or RenderMode, got {type(value).__name__}")
        kind = value.strip().lower()
        if kind == "full":
            if k not in (None, 0):
                raise ValueError("diagonal offset only applies to 'lower' and 'upper' modes")
            return cls.full()
        return cls(kind, 0 if k is None else k)

    @property
    def is_triangular(self) -> bool:
        return self.kind != "full"


@dataclass(frozen=True)
class Overlay:
    """
    Tagged variant controlling value text: none, all, or significant-only with a threshold.
    """

    kind: str = "none"
    threshold: Optional[float] = None

    def __post_init__(self) -> None:
        if self.kind not in _OVERLAY_KINDS:
            raise ValueError(f"overlay must be one of {_OVERLAY_KINDS}, got {self.kind!r}")
        if self.kind == "sigonly":
            if not _is_real(self.threshold) or self.threshold != self.threshold:
                raise InvalidOverlayThresholdError(
                    f"significant-only overlay requires a numeric threshold, got {self.threshold!r}"
                )
            # Threshold is symmetric around zero
            object.__setattr__(self, "threshold", abs(float(self.threshold)))
        elif self.threshold is not None:
            raise InvalidOverlayThresholdError(f"overlay {self.kind!r} does not take a threshold")

    @classmethod
    def none(cls) -> "Overlay":
        return cls("none")

    @classmethod
    def all(cls) -> "Overlay":
        return cls("all")

    @classmethod
    def significant_only(cls, threshold: float) -> "Overlay":
        return cls("sigonly", threshold)

    @classmethod
    def parse(cls, value: Union[str, "Overlay", None], threshold: Optional[float] = None) -> "Overlay":
        """
        Builds an Overlay from a name or passes an existing one through.

        Args:
            value (Union[str, Overlay, None]): "none", "all", "sigonly" (case-insensitive),
                an Overlay, or None.
            threshold (Optional[float]): Threshold for "sigonly". Defaults to None.

        Returns:
            Overlay: Parsed overlay.
        """
        if value is None:
            value = "none"
        if isinstance(value, Overlay):
            return value
        if not isinstance(value, str):
            raise TypeError(f"overlay must be a string or Overlay, got {type(value).__name__}")
        kind = value.strip().lower()
        if kind == "sigonly":
            return cls.significant_only(threshold)
        return cls(kind, threshold)


@dataclass(frozen=True)
class DotPlotOptions:
    """
    Validated options for a dot plot layout.

    Shape-independent checks run at construction; `validate()` checks the options
    against a specific matrix.
    """

    mode: RenderMode = field(default_factory=RenderMode.full)
    major_grid: bool = True
    minor_grid: bool = False
    dot_scale: float = 1.0
    alpha: float = 0.8
    row_labels: Optional[Tuple[str, ...]] = None
    col_labels: Optional[Tuple[str, ...]] = None
    overlay: Overlay = field(default_factory=Overlay.none)
    precision: int = 2

    def __post_init__(self) -> None:
        if not isinstance(self.mode, RenderMode):
            raise TypeError("mode must be a RenderMode; use DotPlotOptions.build() for strings")
        if not isinstance(self.overlay, Overlay):
            raise TypeError("overlay must be an Overlay; use DotPlotOptions.build() for strings")
        for name in ("major_grid", "minor_grid"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be a bool")
        if not _is_real(self.dot_scale):
            raise TypeError("dot_scale must be a real number")
        if not self.dot_scale > 0:
            raise ValueError(f"dot_scale must be positive, got {self.dot_scale}")
        if not _is_real(self.alpha):
            raise TypeError("alpha must be a real number")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must lie in [0, 1], got {self.alpha}")
        if not _is_int(self.precision):
            raise TypeError("precision must be an integer")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        object.__setattr__(self, "dot_scale", float(self.dot_scale))
        object.__setattr__(self, "alpha", float(self.alpha))
        object.__setattr__(self, "precision", int(self.precision))
        for name in ("row_labels", "col_labels"):
            labels = getattr(self, name)
            if labels is None:
                continue
            if isinstance(labels, (str, bytes)):
                raise TypeError(f"{name} must be a sequence of labels, not a string")
            object.__setattr__(self, name, tuple(str(label) for label in labels))

    @classmethod
    def build(
        cls,
        *,
        mode: Union[str, RenderMode, None] = None,
        diagonal_offset: Optional[int] = None,
        major_grid: bool = True,
        minor_grid: bool = False,
        dot_scale: float = 1.0,
        alpha: float = 0.8,
        row_labels: Optional[Sequence[str]] = None,
        col_labels: Optional[Sequence[str]] = None,
        overlay: Union[str, Overlay, None] = None,
        overlay_threshold: Optional[float] = None,
        precision: int = 2,
    ) -> "DotPlotOptions":
        """
        Builds options from plain keyword values.

        Kwargs:
            mode (Union[str, RenderMode, None]): "full", "lower", "upper", or a RenderMode.
                Defaults to None (full).
            diagonal_offset (Optional[int]): Offset k for triangular modes. Defaults to None (0).
            major_grid (bool): Draw frame lines around plotted cells. Defaults to True.
            minor_grid (bool): Draw light lines through dot centers. Defaults to False.
            dot_scale (float): Marker area per unit of absolute value. Defaults to 1.0.
            alpha (float): Marker opacity in [0, 1]. Defaults to 0.8.
            row_labels (Optional[Sequence[str]]): One label per matrix row. Defaults to None.
            col_labels (Optional[Sequence[str]]): One label per matrix column. Defaults to None.
            overlay (Union[str, Overlay, None]): "none", "all", "sigonly", or an Overlay.
                Defaults to None (no text).
            overlay_threshold (Optional[float]): Threshold for "sigonly". Defaults to None.
            precision (int): Decimal places for value text. Defaults to 2.

        Returns:
            DotPlotOptions: Validated options.
        """
        return cls(
            mode=RenderMode.parse(mode, diagonal_offset),
            major_grid=bool(major_grid),
            minor_grid=bool(minor_grid),
            dot_scale=dot_scale,
            alpha=alpha,
            row_labels=row_labels,
            col_labels=col_labels,
            overlay=Overlay.parse(overlay, overlay_threshold),
            precision=precision,
        )

    def validate(self, matrix: Matrix) -> None:
        """
        Checks these options against a matrix.

        Args:
            matrix (Matrix): Matrix to be plotted.

        Raises:
            InvalidModeForShapeError: If a triangular mode is used on a non-square matrix.
            OffsetOutOfRangeError: If the diagonal offset lies outside [-rows, cols].
            MalformedLabelLengthError: If label counts do not match the matrix dimensions.
        """
        n_rows, n_cols = matrix.shape
        if self.mode.is_triangular:
            if not matrix.is_square:
                raise InvalidModeForShapeError(
                    f"'{self.mode.kind}' mode requires a square matrix, got {n_rows}x{n_cols}"
                )
            if not -n_rows <= self.mode.k <= n_cols:
                raise OffsetOutOfRangeError(
                    f"diagonal offset {self.mode.k} outside [{-n_rows}, {n_cols}]"
                )
        if self.row_labels is not None and len(self.row_labels) != n_rows:
            raise MalformedLabelLengthError(
                f"row_labels has {len(self.row_labels)} entries; matrix has {n_rows} rows"
            )
        if self.col_labels is not None and len(self.col_labels) != n_cols:
            raise MalformedLabelLengthError(
                f"col_labels has {len(self.col_labels)} entries; matrix has {n_cols} columns"
            )

    def resolve_labels(self, matrix: Matrix) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        """
        Returns row and column labels, falling back to the matrix's own labels.

        Args:
            matrix (Matrix): Matrix to be plotted.

        Returns:
            Tuple[Tuple[str, ...], Tuple[str, ...]]: (row labels, column labels).
        """
        rows = self.row_labels if self.row_labels is not None else tuple(matrix.row_labels)
        cols = self.col_labels if self.col_labels is not None else tuple(matrix.col_labels)
        return rows, cols
