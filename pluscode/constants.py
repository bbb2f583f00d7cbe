from __future__ import annotations

"""Process-wide Open Location Code constants.

Everything here is read-only; tuples and strings only so the values can be
shared freely between threads.
"""

# Separator inserted after the eighth pair digit.
SEPARATOR = "+"
SEPARATOR_POSITION = 8

# Pads intentionally short codes up to the separator.
PADDING_CHARACTER = "0"

CODE_ALPHABET = "23456789CFGHJMPQRVWX"
ENCODING_BASE = len(CODE_ALPHABET)

LATITUDE_MAX = 90
LONGITUDE_MAX = 180

# Digits encoded as lat/lng pairs; anything beyond uses the grid method.
PAIR_CODE_LENGTH = 10

# Place value (degrees) of each lat/lng pair position.
PAIR_RESOLUTIONS: tuple[float, ...] = (20.0, 1.0, 0.05, 0.0025, 0.000125)

GRID_COLUMNS = 4
GRID_ROWS = 5
GRID_SIZE_DEGREES = 0.000125

MIN_TRIMMABLE_CODE_LENGTH = 6

# Shortening only trims when the reference is within this fraction of the
# cell resolution (0.5 would be the hard limit).
SHORTEN_SAFETY_FACTOR = 0.3

_DIGIT_VALUES = {c: i for i, c in enumerate(CODE_ALPHABET)}


def digit_value(character: str) -> int:
    """Return the alphabet index of an (upper-case) code character, or -1."""

    return _DIGIT_VALUES.get(character, -1)
