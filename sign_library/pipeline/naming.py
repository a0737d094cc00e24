"""Deterministic per-color file naming for one upload batch."""

from typing import Dict, Iterable

from ..analysis.color_classifier import COLOR_CODES


class ColorCounterTable:
    """
    Next free counter for each color code.

    One table belongs to exactly one staging batch and is thrown away
    afterwards; counters only ever increase.
    """

    def __init__(self, codes: Iterable[str] = COLOR_CODES):
        self._counters: Dict[str, int] = {code: 1 for code in codes}

    def peek(self, color_code: str) -> int:
        return self._counters[color_code]

    def take(self, color_code: str) -> int:
        """Return the current counter for a code and advance it."""
        if color_code not in self._counters:
            raise ValueError(f"Unknown color code: {color_code}")

        value = self._counters[color_code]
        self._counters[color_code] = value + 1
        return value

    def snapshot(self) -> Dict[str, int]:
        return dict(self._counters)


def file_extension(file_name: str) -> str:
    """Text after the last dot, case preserved."""
    return file_name.rsplit(".", 1)[-1]


def allocate_name(color_code: str, counters: ColorCounterTable, extension: str) -> str:
    """
    Allocate the next name for a color, e.g. ``R007.png``.

    Args:
        color_code: Color code of the asset
        counters: The batch's counter table (mutated)
        extension: File extension, used verbatim

    Returns:
        "<code><counter:03d>.<extension>"
    """
    counter = counters.take(color_code)
    return f"{color_code}{counter:03d}.{extension}"
