"""
hsvcolor - HSV Color Value Type

This module implements a single color in the HSV color space together with the
color theory rules (complementary, split-complementary, triadic, tetradic,
monochromatic and analogous) used to derive related colors from it.
"""

import math
from dataclasses import dataclass
from typing import List, Union

from loguru import logger

Number = Union[int, float]

HUE_CIRCLE = 360
ANALOGOUS_STEP_DEGREES = 30
MONOCHROMATIC_FLOOR = 0.2
MONOCHROMATIC_CEILING = 1


class InvalidArgumentError(ValueError):
    """Raised when a derivation is called with an unsupported argument."""
    pass


def hue_remainder(value: Number, modulus: Number = HUE_CIRCLE) -> Number:
    """
    Truncating remainder used for all hue arithmetic.

    The result carries the sign of ``value`` (``-30`` stays ``-30``), unlike
    Python's floored ``%``. Integer inputs produce an integer result.

    Args:
        value: Hue after applying an offset (degrees)
        modulus: Size of the hue circle

    Returns:
        Remainder of value / modulus with the sign of value
    """
    if isinstance(value, int) and isinstance(modulus, int):
        remainder = abs(value) % abs(modulus)
        return -remainder if value < 0 else remainder
    return math.fmod(value, modulus)


def round_half_up(x: Number) -> int:
    """Round to the nearest integer, with .5 going towards +infinity."""
    return math.floor(x + 0.5)


def _counted(limit: Number) -> range:
    # 1..limit inclusive; empty when limit < 1
    return range(1, math.floor(limit) + 1)


def format_component(x: Number) -> str:
    """
    Render one HSV component for the ``hsv(...)`` text form.

    Integral floats below 1e21 drop their fractional part so that ``1.0``
    renders as ``1``; everything else uses the shortest round-trip
    representation, so large and tiny magnitudes keep Python's exponent
    form (``1e+21``, ``1e-07``).
    """
    if isinstance(x, float) and x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    return str(x)


@dataclass(frozen=True)
class Color:
    """
    A color in the HSV color space.

    Components are stored verbatim; nothing is clamped or validated.

    Attributes:
        h: Hue in degrees, conventionally [0, 360)
        s: Saturation, conventionally [0, 1]
        v: Value (brightness), conventionally [0, 1]
    """
    h: Number
    s: Number
    v: Number

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """
        Text form of the color.

        Returns:
            String ``hsv(H,S,V)`` built from the raw stored values,
            e.g. ``Color(180, 0.5, 0.5)`` gives ``hsv(180,0.5,0.5)``
        """
        return f"hsv({format_component(self.h)},{format_component(self.s)},{format_component(self.v)})"

    def rotate(self, degrees: Number) -> "Color":
        """
        Return a copy of this color with the hue shifted by ``degrees``.

        Saturation and value are carried over unchanged.
        """
        return Color(hue_remainder(self.h + degrees), self.s, self.v)

    def complementary(self) -> "Color":
        """
        Generate the complementary color (+180° hue rotation).

        Returns:
            The color directly across the color wheel
        """
        return self.rotate(180)

    def split_complementary(self) -> List["Color"]:
        """
        Generate the two colors adjacent to the complementary color.

        Returns:
            Colors at +150° and +210°, in that order
        """
        return [self.rotate(150), self.rotate(210)]

    def triadic(self) -> List["Color"]:
        """
        Generate the two colors that complete an evenly spaced triad.

        Returns:
            Colors at +120° and +240°, in that order
        """
        return [self.rotate(120), self.rotate(240)]

    def tetradic(self) -> List["Color"]:
        """
        Generate the three colors that complete a tetradic (square) scheme.

        Returns:
            Colors at +90°, +180° and +270°, in that order
        """
        return [self.rotate(90), self.rotate(180), self.rotate(270)]

    def monochromatic(self, n: Number = 3, d: int = 1) -> List["Color"]:
        """
        Generate ``n`` colors sharing this color's hue.

        Saturation and value are stepped linearly towards 1 (``d=1``) or
        towards 0.2 (``d=-1``). The last color reaches the target (up to
        floating-point rounding); results are not clamped.

        Args:
            n: Number of colors to generate
            d: Direction, 1 (brighter) or -1 (duller)

        Returns:
            List of colors, closest to this color first

        Raises:
            InvalidArgumentError: If d is not 1 or -1
        """
        if isinstance(d, bool) or d not in (1, -1):
            logger.warning(f"Rejected monochromatic direction d={d!r}")
            raise InvalidArgumentError("d must be -1 or 1")

        indices = _counted(n)
        if not indices:
            return []

        if d == -1:
            s_step = (self.s - MONOCHROMATIC_FLOOR) / n
            v_step = (self.v - MONOCHROMATIC_FLOOR) / n
        else:
            s_step = (MONOCHROMATIC_CEILING - self.s) / n
            v_step = (MONOCHROMATIC_CEILING - self.v) / n

        logger.debug(f"Monochromatic from {self}: n={n} d={d} "
                     f"s_step={s_step} v_step={v_step}")

        return [
            Color(self.h, self.s + d * s_step * i, self.v + d * v_step * i)
            for i in indices
        ]

    def analogous(self, n: Number = 3) -> List["Color"]:
        """
        Generate ``n`` colors at 30° steps around this color's hue.

        Half of the colors (rounded half up) are rotated forwards, the rest
        backwards. Large ``n`` may produce overlapping hues, which are kept.

        Args:
            n: Number of colors to generate

        Returns:
            Forward rotations (+30°, +60°, ...) followed by backward
            rotations (-30°, -60°, ...)
        """
        half = round_half_up(n / 2)
        forward = [self.rotate(ANALOGOUS_STEP_DEGREES * i) for i in _counted(half)]
        backward = [self.rotate(-ANALOGOUS_STEP_DEGREES * i) for i in _counted(n - half)]

        logger.debug(f"Analogous from {self}: n={n} forward={len(forward)} "
                     f"backward={len(backward)}")

        return forward + backward
