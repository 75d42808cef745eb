"""Tests for dither() dispatch and the algorithm enum."""

import numpy as np
import pytest

from dithering import dither
from dithering.error_diffusion import floyd_steinberg
from dithering.ordered import ordered
from dithering.pattern_table import PatternTable
from models import DitherAlgorithm


@pytest.fixture
def gradient():
    width, height = 16, 9
    gray = np.tile(np.linspace(0, 255, width), height)
    return gray, width, height


@pytest.mark.parametrize("algorithm", list(DitherAlgorithm))
def test_mask_length_matches_buffer(algorithm, gradient):
    gray, width, height = gradient
    mask = dither(algorithm, gray, width, height, 128)
    assert mask.shape == (width * height,)
    assert mask.dtype == bool


@pytest.mark.parametrize("algorithm", list(DitherAlgorithm))
def test_repeated_calls_are_identical(algorithm, gradient):
    gray, width, height = gradient
    table = PatternTable()
    first = dither(algorithm, gray, width, height, 90, table)
    second = dither(algorithm, gray, width, height, 90, table)
    assert np.array_equal(first, second)


@pytest.mark.parametrize("algorithm", list(DitherAlgorithm))
def test_one_by_one_image(algorithm):
    assert dither(algorithm, [255], 1, 1, 128).tolist() == [True]


def test_dispatch_matches_direct_calls(gradient):
    gray, width, height = gradient
    assert np.array_equal(
        dither(DitherAlgorithm.FLOYD_STEINBERG, gray, width, height, 128),
        floyd_steinberg(gray, width, height, 128),
    )
    assert np.array_equal(
        dither(DitherAlgorithm.ORDERED, gray, width, height, 128),
        ordered(gray, width, height, 128),
    )


def test_table_only_affects_horizontal_line(gradient):
    gray, width, height = gradient
    empty = PatternTable([[255] * 4 for _ in range(4)])
    assert not dither(DitherAlgorithm.HORIZONTAL_LINE, gray, width, height, 128, empty).any()
    assert dither(DitherAlgorithm.ORDERED, gray, width, height, 128, empty).any()


@pytest.mark.parametrize("threshold", [-20, 0, 300])
@pytest.mark.parametrize("algorithm", list(DitherAlgorithm))
def test_out_of_range_threshold_is_accepted(algorithm, threshold, gradient):
    gray, width, height = gradient
    mask = dither(algorithm, gray, width, height, threshold, PatternTable())
    assert mask.shape == (width * height,)


def test_zero_threshold_makes_every_white_pixel_foreground():
    assert dither(DitherAlgorithm.STUCKI, [255] * 20, 5, 4, 0).all()


class TestDitherAlgorithm:
    def test_lookup_by_value(self):
        assert DitherAlgorithm("horizontal-line") is DitherAlgorithm.HORIZONTAL_LINE
        with pytest.raises(ValueError):
            DitherAlgorithm("random")

    def test_every_member_has_names(self):
        for algorithm in DitherAlgorithm:
            assert algorithm.display_name
            assert algorithm.description
