"""
hsvcolor - Harmony Table

Collects every color scheme for a single base color, keyed by scheme name,
and provides hue distance helpers for comparing the results.
"""

from typing import Dict, List

from loguru import logger

from .color import Color, HUE_CIRCLE, Number

HARMONY_SCHEMES = (
    "complementary",
    "split_complementary",
    "triadic",
    "tetradic",
    "monochromatic",
    "analogous",
)


def generate_harmonies(color: Color, n: Number = 3) -> Dict[str, List[Color]]:
    """
    Generate all harmony schemes for a base color.

    Args:
        color: Base color
        n: Count passed to the monochromatic (brighter direction) and
           analogous schemes

    Returns:
        Dictionary mapping scheme names to lists of derived colors, in
        HARMONY_SCHEMES order
    """
    harmonies = {
        "complementary": [color.complementary()],
        "split_complementary": color.split_complementary(),
        "triadic": color.triadic(),
        "tetradic": color.tetradic(),
        "monochromatic": color.monochromatic(n, 1),
        "analogous": color.analogous(n),
    }

    logger.debug(f"Generated {sum(len(c) for c in harmonies.values())} "
                 f"harmony colors for {color}")

    return harmonies


def get_hue_separation(h1: Number, h2: Number) -> float:
    """
    Calculate the minimum angular separation between two hues.

    Hues outside [0, 360), including the negative hues produced by
    backward rotations, are wrapped before comparing.

    Args:
        h1: First hue (degrees)
        h2: Second hue (degrees)

    Returns:
        Minimum separation in degrees [0, 180]
    """
    diff = (h1 - h2) % HUE_CIRCLE

    # Consider wraparound (smaller of direct or wraparound distance)
    return float(min(diff, HUE_CIRCLE - diff))
