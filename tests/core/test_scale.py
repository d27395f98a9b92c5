"""Tests for VMAF scale selection."""

import pytest

from vmafgraph.core.scale import compute_scale, minimally_scale
from vmafgraph.core.types import ScaleTarget, VmafModel, VmafScale


def test_minimally_scale_horizontal():
    """Test wider sources are scaled by width."""
    assert minimally_scale((1280, 720), (1920, 1080)) == ScaleTarget(1920, -1)
    assert minimally_scale((1920, 800), (3840, 2160)) == (3840, -1)


def test_minimally_scale_vertical():
    """Test taller sources are scaled by height."""
    assert minimally_scale((720, 1280), (1920, 1080)) == ScaleTarget(-1, 1080)
    assert minimally_scale((1440, 1080), (1920, 1080)) == (-1, 1080)


def test_minimally_scale_equal_factors():
    """Test equal ratios scale horizontally."""
    assert minimally_scale((960, 540), (1920, 1080)) == (1920, -1)


def test_minimally_scale_downscale():
    """Test the dimension with the larger source/target ratio is fixed."""
    assert minimally_scale((1280, 720), (123, 720)) == (123, -1)
    assert minimally_scale((1280, 720), (3000, 720)) == (-1, 720)


def test_compute_scale_none():
    """Test 'none' never scales."""
    scale = VmafScale.none()
    assert compute_scale(scale, None, (640, 360)) is None
    assert compute_scale(scale, VmafModel.VMAF_4K, (1280, 720)) is None
    assert compute_scale(scale, None, None) is None


def test_compute_scale_auto_unknown_resolution():
    """Test auto does nothing without a resolution."""
    assert compute_scale(VmafScale.auto(), None, None) is None
    assert compute_scale(VmafScale.auto(), VmafModel.VMAF_4K, None) is None


@pytest.mark.parametrize("model", [None, VmafModel.VMAF_1K])
@pytest.mark.parametrize("res, expected", [
    ((1280, 720), (1920, -1)),
    ((640, 480), (-1, 1080)),
    ((1727, 971), (1920, -1)),
    ((1728, 720), None),
    ((1280, 972), None),
    ((1920, 1080), None),
])
def test_compute_scale_auto_1k(model, res, expected):
    """Test auto upscales small resolutions to 1080p for the 1k model."""
    assert compute_scale(VmafScale.auto(), model, res) == expected


@pytest.mark.parametrize("res, expected", [
    ((3008, 1692), (3840, -1)),
    ((1280, 720), (3840, -1)),
    ((3455, 1943), (3840, -1)),
    ((3456, 1692), None),
    ((3840, 2160), None),
])
def test_compute_scale_auto_4k(res, expected):
    """Test auto upscales small resolutions to 4k for the 4k model."""
    assert compute_scale(VmafScale.auto(), VmafModel.VMAF_4K, res) == expected


def test_compute_scale_auto_custom_model():
    """Test custom models are never scaled automatically."""
    assert compute_scale(VmafScale.auto(), VmafModel.CUSTOM, (640, 360)) is None


def test_compute_scale_custom():
    """Test custom scale with and without a known resolution."""
    scale = VmafScale.custom(123, 720)
    assert compute_scale(scale, VmafModel.CUSTOM, (1280, 720)) == (123, -1)
    assert compute_scale(scale, None, (1280, 720)) == (123, -1)
    assert compute_scale(scale, None, None) == ScaleTarget(123, 720)
    assert compute_scale(VmafScale.custom(1920, 1080), None, (1920, 1080)) == (1920, -1)
