"""Tests for the error-diffusion kernels."""

import numpy as np
import pytest

from dithering.error_diffusion import (
    ATKINSON,
    FLOYD_STEINBERG,
    STUCKI,
    EdgePolicy,
    atkinson,
    diffuse_error,
    floyd_steinberg,
    stucki,
)

KERNEL_FUNCTIONS = [floyd_steinberg, atkinson, stucki]


def test_floyd_steinberg_two_pixels():
    source = [100, 200]
    mask = floyd_steinberg(source, 2, 1, 150)
    assert mask.tolist() == [False, True]
    assert source == [100, 200]


def test_floyd_steinberg_leaves_numpy_source_untouched():
    source = np.array([[100.0, 200.0, 30.0], [90.0, 10.0, 250.0]])
    before = source.copy()
    floyd_steinberg(source, 3, 2, 128)
    assert np.array_equal(source, before)


def test_floyd_steinberg_three_pixels():
    # 100 -> 0, pushes 43.75 right; 143.75 -> 255, pushes -48.67 right
    assert floyd_steinberg([100, 100, 100], 3, 1, 120).tolist() == [False, True, False]


def test_atkinson_three_pixels():
    # Each neighbour gets error / 8: 100 -> 112.5 -> 126.56
    assert atkinson([100, 100, 100], 3, 1, 120).tolist() == [False, False, True]


def test_stucki_three_pixels():
    # 100 + 100*8/42 = 119.05 stays below 120; last pixel collects 132.2
    assert stucki([100, 100, 100], 3, 1, 120).tolist() == [False, False, True]


def test_value_equal_to_threshold_is_foreground():
    assert floyd_steinberg([150], 1, 1, 150).tolist() == [True]
    assert floyd_steinberg([149], 1, 1, 150).tolist() == [False]


def test_out_of_bounds_share_is_dropped():
    # Single column: only the (0, +1) share of 5/16 lands on the image.
    # Redistributing the full error would push the second pixel to 200.
    mask = floyd_steinberg([100, 100], 1, 2, 150)
    assert mask.tolist() == [False, False]


class TestAllKernels:
    @pytest.mark.parametrize("fn", KERNEL_FUNCTIONS)
    def test_mask_length(self, fn):
        gray = np.linspace(0, 255, 7 * 5)
        mask = fn(gray, 7, 5, 128)
        assert mask.dtype == bool
        assert mask.shape == (35,)

    @pytest.mark.parametrize("fn", KERNEL_FUNCTIONS)
    def test_all_white_is_all_foreground(self, fn):
        mask = fn([255] * 30, 6, 5, 200)
        assert mask.all()

    @pytest.mark.parametrize("fn", KERNEL_FUNCTIONS)
    def test_all_black_is_all_background(self, fn):
        mask = fn([0] * 30, 6, 5, 1)
        assert not mask.any()

    @pytest.mark.parametrize("fn", KERNEL_FUNCTIONS)
    def test_below_threshold_without_amplification(self, fn):
        # Total injected error is 64, far from lifting any pixel to 255
        mask = fn([1] * 64, 8, 8, 255)
        assert not mask.any()

    @pytest.mark.parametrize("fn", KERNEL_FUNCTIONS)
    def test_deterministic(self, fn):
        rng = np.random.default_rng(7)
        gray = rng.uniform(0, 255, 12 * 9)
        first = fn(gray, 12, 9, 128)
        second = fn(gray, 12, 9, 128)
        assert np.array_equal(first, second)

    @pytest.mark.parametrize("fn", KERNEL_FUNCTIONS)
    def test_mid_gray_is_roughly_half(self, fn):
        mask = fn([128] * 400, 20, 20, 128)
        assert 0.3 < mask.mean() < 0.7


def test_kernel_weight_totals():
    # Atkinson passes on only 6/8 of the error
    for kernel in (FLOYD_STEINBERG, STUCKI):
        assert sum(w for *_, w in kernel.weights) == kernel.divisor
    assert sum(w for *_, w in ATKINSON.weights) == 6
    assert ATKINSON.divisor == 8


def test_kernels_never_point_backwards():
    for kernel in (FLOYD_STEINBERG, ATKINSON, STUCKI):
        for dx, dy, _ in kernel.weights:
            assert dy > 0 or (dy == 0 and dx > 0)


def test_edge_policy_name():
    assert EdgePolicy.DROP.value == "drop-out-of-bounds-error-share"
    mask = diffuse_error([10, 240], 2, 1, 128, STUCKI, edge_policy=EdgePolicy.DROP)
    assert mask.tolist() == [False, True]
