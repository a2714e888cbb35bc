import matplotlib.pyplot as plt
import numpy as np
import pytest

from localcontrast.filters import clahe_u8
from localcontrast.summary import (
    contrast_gain,
    grid_before_after,
    local_contrast_map,
    show_contrast_maps,
)


def test_local_contrast_map_flat_image_is_zero():
    img = np.full((20, 30), 77, dtype=np.uint8)

    c = local_contrast_map(img, size=5)

    assert c.dtype == np.float32
    assert c.shape == img.shape
    np.testing.assert_allclose(c, 0.0, atol=0.1)


def test_local_contrast_map_checkerboard():
    img = (np.indices((32, 32)).sum(axis=0) % 2 * 200).astype(np.uint8)

    c = local_contrast_map(img, size=4)

    # even window over a 0/200 checkerboard: std is exactly 100
    np.testing.assert_allclose(c[8:24, 8:24], 100.0, rtol=1e-3)


def test_local_contrast_map_rejects_bad_input():
    with pytest.raises(ValueError):
        local_contrast_map(np.zeros((2, 4, 4)))
    with pytest.raises(ValueError):
        local_contrast_map(np.zeros((4, 4)), size=0)


def test_contrast_gain_increases_after_clahe(textured_image):
    enhanced = clahe_u8(textured_image, tiles=(4, 4))

    assert contrast_gain(textured_image, enhanced) > 1.0
    assert contrast_gain(textured_image, textured_image) == pytest.approx(1.0)


def test_contrast_gain_shape_mismatch():
    with pytest.raises(ValueError):
        contrast_gain(np.zeros((4, 4)), np.zeros((4, 5)))


def test_grid_before_after_draws_tile_grid(textured_image):
    enhanced = clahe_u8(textured_image, tiles=(4, 2))

    fig = grid_before_after(textured_image, enhanced, tiles=(4, 2), suptitle="CLAHE")
    try:
        axes = fig.axes
        assert len(axes) == 2
        for ax in axes:
            assert len(ax.lines) == 4 + 2
        assert axes[1].get_title() == "After"
    finally:
        plt.close(fig)


def test_grid_before_after_without_grid(textured_image):
    fig = grid_before_after(textured_image, textured_image)
    try:
        assert all(len(ax.lines) == 0 for ax in fig.axes)
    finally:
        plt.close(fig)


def test_grid_before_after_rejects_3d():
    with pytest.raises(ValueError):
        grid_before_after(np.zeros((2, 4, 4)), np.zeros((4, 4)))


def test_show_contrast_maps_returns_figure(textured_image):
    fig = show_contrast_maps(textured_image, clahe_u8(textured_image, tiles=(4, 4)), size=7)
    try:
        assert len(fig.axes) == 3  # two panels + colorbar
    finally:
        plt.close(fig)
