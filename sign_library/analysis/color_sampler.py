"""Sample a representative color from sign images."""

from collections import Counter
from io import BytesIO
from typing import Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError


ALGORITHMS = ("sqrt", "simple", "dominant")


class SamplingError(Exception):
    """Raised when a single file cannot be decoded or sampled."""


def decode_image(data: bytes, max_dimension: int = 0) -> np.ndarray:
    """
    Decode raw image bytes into an RGBA pixel array.

    Args:
        data: Encoded image content (PNG, JPEG, GIF, WEBP, ...)
        max_dimension: Downscale so the longest side fits (0 = keep size)

    Returns:
        uint8 array of shape (height, width, 4)
    """
    if not data:
        raise SamplingError("empty file")

    try:
        with Image.open(BytesIO(data)) as img:
            img.load()

            # Convert to RGBA (handles palette, grayscale, CMYK, etc.)
            if img.mode != 'RGBA':
                img = img.convert('RGBA')

            if max_dimension and max(img.size) > max_dimension:
                ratio = max_dimension / max(img.size)
                new_size = tuple(max(1, int(dim * ratio)) for dim in img.size)
                img = img.resize(new_size, Image.Resampling.LANCZOS)

            return np.array(img)

    except UnidentifiedImageError as e:
        raise SamplingError(f"not a decodable image: {e}") from e
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise SamplingError(f"decode failed: {e}") from e


class DominantColorSampler:
    """
    Extract one representative RGB triple per image.

    Algorithms:
    - sqrt: alpha-weighted root mean square of each channel (default)
    - simple: alpha-weighted arithmetic mean
    - dominant: centre of the largest k-means cluster

    The result only depends on the pixel data, so the same image always
    samples to the same color.
    """

    def __init__(
        self,
        algorithm: str = "sqrt",
        step: int = 1,
        max_dimension: int = 400,
        clusters: int = 5
    ):
        """
        Initialize color sampler.

        Args:
            algorithm: One of ALGORITHMS
            step: Sample every Nth pixel (1 = all pixels)
            max_dimension: Downscale decoded images to this size first (0 = off)
            clusters: Number of k-means clusters for the dominant algorithm
        """
        if algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown sampling algorithm: {algorithm}")
        if step < 1:
            raise ValueError("step must be >= 1")

        self.algorithm = algorithm
        self.step = step
        self.max_dimension = max_dimension
        self.clusters = clusters

    def sample_bytes(self, data: bytes) -> Tuple[int, int, int]:
        """Decode image bytes and sample them."""
        pixels = decode_image(data, self.max_dimension)
        return self.sample_pixels(pixels)

    def sample_pixels(self, pixels) -> Tuple[int, int, int]:
        """
        Sample decoded pixel data.

        Args:
            pixels: Array-like of shape (H, W, 3|4) or (N, 3|4), channels 0-255

        Returns:
            (r, g, b) tuple of ints
        """
        arr = np.asarray(pixels)

        if arr.ndim < 2 or arr.shape[-1] not in (3, 4):
            raise SamplingError(f"unsupported pixel layout: {arr.shape}")

        flat = arr.reshape(-1, arr.shape[-1]).astype(np.float64)[::self.step]
        if flat.size == 0:
            raise SamplingError("image has no pixels")

        rgb = flat[:, :3]
        if flat.shape[1] == 4:
            weights = flat[:, 3] / 255.0
        else:
            weights = np.ones(len(flat))

        total = weights.sum()

        # Nothing visible: same fallback as an all-black sample
        if total == 0:
            return (0, 0, 0)

        if self.algorithm == "sqrt":
            values = np.sqrt((rgb ** 2 * weights[:, None]).sum(axis=0) / total)
        elif self.algorithm == "simple":
            values = (rgb * weights[:, None]).sum(axis=0) / total
        else:
            values = self._dominant_cluster(rgb[weights > 0])

        return self._to_rgb(values)

    def _dominant_cluster(self, rgb: np.ndarray) -> np.ndarray:
        """Centre of the most populated k-means cluster."""
        from sklearn.cluster import KMeans

        k = min(self.clusters, len(np.unique(rgb, axis=0)))
        if k <= 1:
            return rgb[0]

        kmeans = KMeans(n_clusters=k, random_state=42, n_init=10)
        kmeans.fit(rgb)

        label_counts = Counter(kmeans.labels_)
        # Ties resolve to the lowest label so the pick stays deterministic
        best_label = max(sorted(label_counts), key=lambda label: label_counts[label])

        return kmeans.cluster_centers_[best_label]

    @staticmethod
    def _to_rgb(values: np.ndarray) -> Tuple[int, int, int]:
        """Round half up and clamp to 0-255."""
        rounded = np.clip(np.floor(values + 0.5), 0, 255)
        return tuple(int(c) for c in rounded)
