"""
tests/test_options
~~~~~~~~~~~~~~~~~~
"""

import numpy as np
import pytest

from corrdot import (
    DotPlotOptions,
    InvalidModeForShapeError,
    InvalidOverlayThresholdError,
    MalformedLabelLengthError,
    Matrix,
    OffsetOutOfRangeError,
    Overlay,
    RenderMode,
)


@pytest.mark.api
def test_options_defaults():
    """
    Ensures default options match the documented defaults.
    """
    options = DotPlotOptions()
    assert options.mode == RenderMode.full()
    assert options.major_grid is True
    assert options.minor_grid is False
    assert options.dot_scale == 1.0
    assert options.alpha == 0.8
    assert options.row_labels is None
    assert options.col_labels is None
    assert options.overlay == Overlay.none()
    assert options.precision == 2


@pytest.mark.api
def test_build_parses_mode_names_case_insensitively():
    """
    Ensures mode strings and offsets are parsed into RenderMode values.
    """
    assert DotPlotOptions.build(mode="Lower", diagonal_offset=-1).mode == RenderMode.lower(-1)
    assert DotPlotOptions.build(mode="UPPER").mode == RenderMode.upper(0)
    assert DotPlotOptions.build(mode="full").mode == RenderMode.full()
    assert DotPlotOptions.build().mode == RenderMode.full()


@pytest.mark.api
def test_build_rejects_unknown_mode_and_offset_on_full():
    """
    Ensures unknown modes and offsets with full mode are rejected.
    """
    with pytest.raises(ValueError, match="mode"):
        DotPlotOptions.build(mode="diagonal")
    with pytest.raises(ValueError, match="offset"):
        DotPlotOptions.build(mode="full", diagonal_offset=1)
    with pytest.raises(TypeError):
        RenderMode.lower(0.5)
    with pytest.raises(TypeError):
        RenderMode.lower(True)


@pytest.mark.api
def test_build_parses_overlay():
    """
    Ensures overlay names and thresholds are parsed; thresholds are made positive.
    """
    assert DotPlotOptions.build(overlay="all").overlay == Overlay.all()
    overlay = DotPlotOptions.build(overlay="sigonly", overlay_threshold=-0.05).overlay
    assert overlay.kind == "sigonly"
    assert overlay.threshold == pytest.approx(0.05)


@pytest.mark.api
@pytest.mark.parametrize("threshold", [None, "0.05", True, float("nan")])
def test_sigonly_requires_numeric_threshold(threshold):
    """
    Ensures significant-only overlays reject missing or non-numeric thresholds.

    Args:
        threshold (Any): Invalid threshold value.
    """
    with pytest.raises(InvalidOverlayThresholdError):
        DotPlotOptions.build(overlay="sigonly", overlay_threshold=threshold)


@pytest.mark.api
def test_threshold_without_sigonly_is_rejected():
    """
    Ensures a threshold on a non-thresholded overlay is reported.
    """
    with pytest.raises(InvalidOverlayThresholdError):
        Overlay("all", 0.05)


@pytest.mark.api
@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"dot_scale": 0}, ValueError),
        ({"dot_scale": -2.0}, ValueError),
        ({"dot_scale": "big"}, TypeError),
        ({"alpha": 1.5}, ValueError),
        ({"alpha": -0.1}, ValueError),
        ({"precision": -1}, ValueError),
        ({"precision": 1.5}, TypeError),
        ({"precision": True}, TypeError),
        ({"row_labels": "abc"}, TypeError),
    ],
)
def test_options_reject_invalid_scalars(kwargs, error):
    """
    Ensures shape-independent checks run at construction.

    Args:
        kwargs (dict): Invalid option values.
        error (type): Expected exception type.
    """
    with pytest.raises(error):
        DotPlotOptions.build(**kwargs)


@pytest.mark.api
def test_options_accept_numpy_scalars():
    """
    Ensures numpy integer and float scalars are accepted.
    """
    options = DotPlotOptions.build(
        mode="lower", diagonal_offset=np.int64(-1), dot_scale=np.float64(50.0), precision=np.int32(3)
    )
    assert options.mode.k == -1
    assert options.precision == 3


@pytest.mark.api
def test_validate_triangular_requires_square():
    """
    Ensures triangular modes fail on non-square matrices.
    """
    matrix = Matrix([[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]])
    DotPlotOptions.build().validate(matrix)
    for mode in ("lower", "upper"):
        with pytest.raises(InvalidModeForShapeError):
            DotPlotOptions.build(mode=mode).validate(matrix)


@pytest.mark.api
@pytest.mark.parametrize("mode", ["lower", "upper"])
def test_validate_offset_range(mode, corr3):
    """
    Ensures offsets inside [-rows, cols] pass and offsets outside fail.

    Args:
        mode (str): Triangular mode name.
        corr3 (list): Nested list of coefficients.
    """
    matrix = Matrix(corr3)
    for k in (-3, 0, 3):
        DotPlotOptions.build(mode=mode, diagonal_offset=k).validate(matrix)
    for k in (-4, 4):
        with pytest.raises(OffsetOutOfRangeError):
            DotPlotOptions.build(mode=mode, diagonal_offset=k).validate(matrix)


@pytest.mark.api
def test_validate_label_lengths(corr3):
    """
    Ensures label counts must match the matrix dimensions.

    Args:
        corr3 (list): Nested list of coefficients.
    """
    matrix = Matrix(corr3)
    DotPlotOptions.build(row_labels=["x", "y", "z"], col_labels=("x", "y", "z")).validate(matrix)
    with pytest.raises(MalformedLabelLengthError):
        DotPlotOptions.build(row_labels=["x", "y"]).validate(matrix)
    with pytest.raises(MalformedLabelLengthError):
        DotPlotOptions.build(col_labels=["x", "y", "z", "w"]).validate(matrix)


@pytest.mark.api
def test_errors_are_value_errors():
    """
    Ensures all option errors can be caught as ValueError.
    """
    for error in (
        InvalidModeForShapeError,
        OffsetOutOfRangeError,
        InvalidOverlayThresholdError,
        MalformedLabelLengthError,
    ):
        assert issubclass(error, ValueError)


@pytest.mark.unit
def test_resolve_labels_prefers_explicit_labels(corr3_df):
    """
    Ensures explicit labels override matrix labels.

    Args:
        corr3_df (pd.DataFrame): Labeled correlation matrix.
    """
    matrix = Matrix(corr3_df)
    rows, cols = DotPlotOptions.build(row_labels=[1, 2, 3]).resolve_labels(matrix)
    assert rows == ("1", "2", "3")
    assert cols == ("a", "b", "c")
