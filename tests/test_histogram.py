import numpy as np
import pytest

from localcontrast.filters import (
    build_cdf_table,
    clip_count,
    clip_histogram,
    histogram_cdf,
    tile_histogram,
)


def test_tile_histogram_counts_every_pixel():
    tile = np.array([[0, 0, 7], [255, 7, 7]], dtype=np.uint8)

    hist = tile_histogram(tile)

    assert hist.shape == (256,)
    assert hist.sum() == tile.size
    assert hist[0] == 2 and hist[7] == 3 and hist[255] == 1


def test_tile_histogram_rejects_non_uint8():
    with pytest.raises(TypeError):
        tile_histogram(np.zeros((2, 2), dtype=np.int32))


@pytest.mark.parametrize(
    "clip_limit, tile_w, tile_h, expected",
    [
        (2.0, 8, 8, 1),
        (2.0, 64, 64, 32),
        (3.5, 16, 16, 3),
        (-1.0, 16, 16, 1),
    ],
)
def test_clip_count(clip_limit, tile_w, tile_h, expected):
    assert clip_count(clip_limit, tile_w, tile_h) == expected


def test_clip_histogram_two_peaks():
    hist = np.zeros(256, dtype=np.int64)
    hist[0] = 32
    hist[255] = 32
    before = hist.copy()

    out = clip_histogram(hist, 1)

    # excess 62 -> no increment, remainder 62 spread at i*256//62
    assert out.sum() == 64
    assert out.min() >= 0
    assert out[0] == 2
    assert out[4] == 1
    assert out[1] == 0
    assert out[251] == 1
    assert out[255] == 1
    np.testing.assert_array_equal(hist, before)


def test_clip_histogram_increment_and_remainder():
    hist = np.zeros(256, dtype=np.int64)
    hist[0] = 1000

    out = clip_histogram(hist, 2)

    # excess 998 = 3 * 256 + 230
    assert out.sum() == 1000
    assert out[0] == 2 + 3 + 1
    assert out.min() >= 3


def test_clip_histogram_below_clip_is_unchanged():
    hist = np.full(256, 4, dtype=np.int64)
    np.testing.assert_array_equal(clip_histogram(hist, 4), hist)


def test_clip_histogram_rejects_wrong_length():
    with pytest.raises(ValueError):
        clip_histogram(np.zeros(10), 1)


def test_histogram_cdf_is_monotone_and_reaches_255():
    rng = np.random.default_rng(1)
    hist = rng.integers(0, 5, size=256)
    n = int(hist.sum())

    cdf = histogram_cdf(hist, n)

    assert cdf.dtype == np.uint8
    assert np.all(np.diff(cdf.astype(int)) >= 0)
    assert cdf[-1] == 255


def test_histogram_cdf_rejects_empty_tile():
    with pytest.raises(ValueError):
        histogram_cdf(np.zeros(256), 0)


def test_build_cdf_table_split_tile(split_tile_image):
    cdfs = build_cdf_table(split_tile_image, tiles=(2, 2), clip_limit=2.0)

    assert cdfs.shape == (2, 2, 256)
    assert cdfs[0, 0, 0] == 7
    assert cdfs[0, 0, 255] == 255
    # uniform 128 tile: bin 0 only holds one redistributed unit
    assert cdfs[1, 0, 0] == 3
    assert cdfs[1, 0, 128] == 131
    np.testing.assert_array_equal(cdfs[0, 1], cdfs[1, 1])


def test_build_cdf_table_ignores_uncovered_pixels():
    rng = np.random.default_rng(2)
    img = rng.integers(0, 256, size=(10, 10), dtype=np.uint8)
    other = img.copy()
    other[9, :] = 255
    other[:, 9] = 0

    a = build_cdf_table(img, tiles=(3, 3))
    b = build_cdf_table(other, tiles=(3, 3))

    np.testing.assert_array_equal(a, b)


def test_build_cdf_table_rejects_empty_tiles():
    with pytest.raises(ValueError):
        build_cdf_table(np.zeros((4, 4), dtype=np.uint8), tiles=(8, 8))
