"""Numeric encoders — depth value -> ordered two-digit symbol codes.

Digits are extracted from a depth scaled to whole tenths with div/mod, never
from a formatted string. Each band maps successive decimal digits onto its
own offset range; the caller prepends the symbol family (``SOUNDS``,
``SOUNDG``, ``SAFCON``) and formats the code as two digits.
"""

from __future__ import annotations

import math

# Absorbs binary representation error, e.g. 8.2 * 10 = 81.99999999999999.
_EPS = 1e-6


def _tenths(value: float) -> int:
    return int(math.floor(abs(value) * 10 + _EPS))


def _digit(n: int, position: int) -> int:
    return n // 10**position % 10


def sounding_codes(depth: float) -> list[int]:
    """Symbol codes for a sounding figure. Works on the magnitude of ``depth``.

    Bands (whole metres):
      < 10            units+10, tenths+50
      < 31, tenths>0  tens+20, units+10, tenths+50
      < 100           tens+10, units
      < 1000          hundreds+20, tens+10, units
      < 10000         thousands+20, hundreds+10, tens, units+40
      otherwise       ten-thousands+30, thousands+20, hundreds+10, tens, units+40
    """
    whole, fraction = divmod(_tenths(depth), 10)

    if whole < 10:
        return [whole + 10, fraction + 50]
    if whole < 31 and fraction != 0:
        return [_digit(whole, 1) + 20, _digit(whole, 0) + 10, fraction + 50]

    # Fraction is dropped from here on
    if whole < 100:
        return [_digit(whole, 1) + 10, _digit(whole, 0)]
    if whole < 1000:
        return [_digit(whole, 2) + 20, _digit(whole, 1) + 10, _digit(whole, 0)]
    if whole < 10000:
        return [
            _digit(whole, 3) + 20,
            _digit(whole, 2) + 10,
            _digit(whole, 1),
            _digit(whole, 0) + 40,
        ]
    return [
        _digit(whole, 4) + 30,
        _digit(whole, 3) + 20,
        _digit(whole, 2) + 10,
        _digit(whole, 1),
        _digit(whole, 0) + 40,
    ]


def contour_label_codes(depth: float) -> list[int]:
    """Symbol codes for a safety/depth contour label.

    Only the < 10 m and < 100 m bands have symbols; deeper labels and
    negative values yield no codes.
    """
    if depth < 0 or depth >= 100:
        return []

    whole, fraction = divmod(_tenths(depth), 10)
    if whole < 10:
        return [whole, fraction + 60]

    codes = [_digit(whole, 1) + 20, _digit(whole, 0) + 10]
    # Any fractional part earns the tenths code, even one below a tenth
    if whole < 31 and depth % 1 != 0:
        codes.append(fraction + 50)
    return codes
