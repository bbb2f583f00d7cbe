from __future__ import annotations

"""Syntactic checks for Open Location Codes.

None of these raise: malformed input of any kind is simply "not valid".
"""

from typing import Any

from pluscode.constants import (
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_value,
)


def is_valid(code: Any) -> bool:
    """Return True if `code` is a syntactically valid full or short code.

    - exactly one separator, at an even offset no later than position 8;
    - padding only as an even run that ends at the separator, never leading,
      and only in codes that end with the separator;
    - zero or at least two characters after the separator;
    - everything else from the code alphabet (case-insensitive).
    """

    if not isinstance(code, str) or not code:
        return False

    sep = code.find(SEPARATOR)
    if sep == -1 or sep != code.rfind(SEPARATOR):
        return False
    if len(code) == 1:
        return False
    if sep > SEPARATOR_POSITION or sep % 2 == 1:
        return False

    pad = code.find(PADDING_CHARACTER)
    if pad != -1:
        if pad == 0:
            return False
        run = code[pad:sep]
        # One contiguous run, directly before the separator.
        if run.strip(PADDING_CHARACTER):
            return False
        if len(run) % 2 == 1 or len(run) > SEPARATOR_POSITION - 2:
            return False
        if code[-1] != SEPARATOR:
            return False

    if len(code) - sep - 1 == 1:
        return False

    digits = code[:pad] if pad != -1 else code.replace(SEPARATOR, "")
    return all(digit_value(c) != -1 for c in digits.upper())


def is_short(code: Any) -> bool:
    """A valid code with fewer than 8 digits before the separator."""

    if not is_valid(code):
        return False
    return code.find(SEPARATOR) < SEPARATOR_POSITION


def is_full(code: Any) -> bool:
    """A valid, non-short code whose leading digits stay inside the globe."""

    if not is_valid(code) or is_short(code):
        return False

    code = code.upper()
    # First latitude digit; >= 180 would decode to a latitude >= 90.
    if digit_value(code[0]) * ENCODING_BASE >= LATITUDE_MAX * 2:
        return False
    if len(code) > 1:
        if digit_value(code[1]) * ENCODING_BASE >= LONGITUDE_MAX * 2:
            return False
    return True
