"""Map a sampled RGB color to one of the sign library's color codes."""

from typing import Dict, Tuple


YELLOW = "Y"
GREEN = "G"
RED = "R"
BLUE = "B"
WHITE = "W"
BLACK = "K"
OTHER = "O"

# Library order, also the order the picker shows its filters in
COLOR_CODES: Tuple[str, ...] = (YELLOW, GREEN, RED, BLUE, WHITE, BLACK, OTHER)

COLOR_LABELS: Dict[str, str] = {
    YELLOW: "Yellow",
    GREEN: "Green",
    RED: "Red",
    BLUE: "Blue",
    WHITE: "White",
    BLACK: "Black",
    OTHER: "Other",
}


def categorize_color(r: float, g: float, b: float) -> str:
    """
    Categorize an RGB triple into a single color code.

    The checks overlap in RGB space, so their order is part of the result.
    Thresholds are tuned for road-sign palettes (red, yellow, green, blue,
    white and black dominate); green is deliberately the most lenient to
    catch dark highway greens.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)

    Returns:
        One of COLOR_CODES
    """
    # White (bright on every channel)
    if r > 200 and g > 200 and b > 200:
        return WHITE

    # Black (dark on every channel)
    if r < 60 and g < 60 and b < 60:
        return BLACK

    highest = max(r, g, b)
    lowest = min(r, g, b)
    diff = highest - lowest
    brightness = (r + g + b) / 3

    # Yellow (high red AND high green) - checked before red/green
    if r > 150 and g > 150 and b < 130:
        return YELLOW

    # Orange counts as yellow for traffic signs
    if r >= 180 and 80 < g < 180 and b < 100:
        return YELLOW

    # Muted colors: small spread, mid brightness
    if diff < 30 and 60 < brightness < 200:
        if g > r and g > b and g > 70:
            return GREEN
        if r > g and r > b and r > 70:
            return RED
        if b > g and b > r and b > 70:
            return BLUE

    if r == highest and r > 70:
        if r > g + 20 and r > b + 20:
            return RED

    if g == highest and g > 60:
        if g > r + 15 and g > b + 15:
            return GREEN

    if b == highest and b > 70:
        if b > r + 20 and b > g + 20:
            return BLUE

    # Last attempt: whichever channel is strongest
    if diff > 15:
        if g > r and g > b:
            return GREEN
        if r > g and r > b:
            return RED
        if b > r and b > g:
            return BLUE

    return OTHER


def color_label(code: str) -> str:
    """Human-friendly name for a color code (unknown codes are returned as-is)."""
    return COLOR_LABELS.get(code, code)
