"""Color analysis for uploaded sign images."""

from .color_classifier import COLOR_CODES, COLOR_LABELS, categorize_color, color_label
from .color_sampler import DominantColorSampler, SamplingError, decode_image

__all__ = [
    'COLOR_CODES',
    'COLOR_LABELS',
    'categorize_color',
    'color_label',
    'DominantColorSampler',
    'SamplingError',
    'decode_image'
]
