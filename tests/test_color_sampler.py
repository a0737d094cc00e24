"""
Unit tests for sign_library/analysis/color_sampler.py
"""

import numpy as np
import pytest

from sign_library.analysis.color_sampler import (
    DominantColorSampler,
    SamplingError,
    decode_image,
)
from tests.helpers import RED, YELLOW, make_png


class TestDecodeImage:

    def test_decodes_to_rgba(self):
        pixels = decode_image(make_png(RED, size=(5, 3)))
        assert pixels.shape == (3, 5, 4)
        assert tuple(pixels[0, 0]) == (*RED, 255)

    def test_downscales_long_side(self):
        pixels = decode_image(make_png(RED, size=(1000, 10)), max_dimension=400)
        assert pixels.shape == (4, 400, 4)

    def test_garbage_raises_sampling_error(self):
        with pytest.raises(SamplingError):
            decode_image(b"definitely not a png")

    def test_empty_raises_sampling_error(self):
        with pytest.raises(SamplingError):
            decode_image(b"")


class TestSamplePixels:

    def test_solid_color_is_exact(self):
        sampler = DominantColorSampler()
        assert sampler.sample_bytes(make_png(YELLOW)) == YELLOW

    def test_grayscale_image(self):
        sampler = DominantColorSampler()
        assert sampler.sample_bytes(make_png(90, mode="L")) == (90, 90, 90)

    def test_sqrt_average_leans_bright(self):
        pixels = np.array([[0, 0, 0], [200, 200, 200]])
        assert DominantColorSampler("sqrt").sample_pixels(pixels) == (141, 141, 141)

    def test_simple_average(self):
        pixels = np.array([[0, 0, 0], [200, 200, 200]])
        assert DominantColorSampler("simple").sample_pixels(pixels) == (100, 100, 100)

    def test_transparent_pixels_are_ignored(self):
        pixels = np.array([[255, 0, 0, 255], [0, 0, 255, 0]])
        assert DominantColorSampler().sample_pixels(pixels) == (255, 0, 0)

    def test_fully_transparent_samples_black(self):
        pixels = np.zeros((4, 4, 4), dtype=np.uint8)
        pixels[..., 2] = 255
        assert DominantColorSampler().sample_pixels(pixels) == (0, 0, 0)

    def test_step_subsamples(self):
        pixels = np.array([[10, 10, 10], [250, 250, 250]] * 4)
        assert DominantColorSampler("simple", step=2).sample_pixels(pixels) == (10, 10, 10)

    def test_dominant_picks_largest_cluster(self):
        pixels = np.array([[255, 0, 0]] * 30 + [[0, 0, 255]] * 10)
        assert DominantColorSampler("dominant").sample_pixels(pixels) == (255, 0, 0)

    def test_dominant_single_color(self):
        pixels = np.array([[12, 34, 56]] * 8)
        assert DominantColorSampler("dominant").sample_pixels(pixels) == (12, 34, 56)

    def test_deterministic(self):
        rng = np.random.default_rng(7)
        pixels = rng.integers(0, 256, size=(20, 20, 3))
        sampler = DominantColorSampler()
        assert sampler.sample_pixels(pixels) == sampler.sample_pixels(pixels.copy())

    def test_rejects_bad_layout(self):
        with pytest.raises(SamplingError):
            DominantColorSampler().sample_pixels(np.zeros((4, 4, 2)))

    def test_rejects_unknown_algorithm(self):
        with pytest.raises(ValueError):
            DominantColorSampler("median")

    def test_rejects_bad_step(self):
        with pytest.raises(ValueError):
            DominantColorSampler(step=0)
