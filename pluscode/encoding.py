from __future__ import annotations

"""Encode coordinates into Open Location Codes and decode them back.

The first 10 digits are lat/lng pairs in base 20, each pair shrinking the area
by a factor of 400. Beyond that every digit picks one cell of a 4x5 grid.
A 10 digit code is roughly 13.5x13.5m at the equator; 11 digits ~2.8x3.5m.
"""

import logging
import math

from pluscode.area import CodeArea
from pluscode.constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SIZE_DEGREES,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_value,
)
from pluscode.core.errors import InvalidArgumentError
from pluscode.core.settings import get_settings
from pluscode.validation import is_full


logger = logging.getLogger(__name__)


def clip_latitude(latitude: float) -> float:
    return min(float(LATITUDE_MAX), max(-float(LATITUDE_MAX), latitude))


def normalize_longitude(longitude: float) -> float:
    """Normalize into [-180, 180)."""

    while longitude < -LONGITUDE_MAX:
        longitude += 360
    while longitude >= LONGITUDE_MAX:
        longitude -= 360
    return longitude


def compute_latitude_precision(code_length: int) -> float:
    """Height in degrees of the cell for a code of `code_length` digits.

    Up to 10 digits latitude and longitude share a precision; the grid has
    fewer columns than rows so longer codes diverge.
    """

    if code_length <= PAIR_CODE_LENGTH:
        return 20.0 ** (2 - code_length // 2)
    return 20.0**-3 / GRID_ROWS ** (code_length - PAIR_CODE_LENGTH)


def resolve_code_length(code_length: int) -> int:
    """Apply the default for non-positive lengths and reject unusable ones."""

    if code_length <= 0:
        code_length = int(get_settings().default_code_length)
    # Odd pair-only lengths would give cells with a 20:1 aspect ratio.
    if code_length < 2 or (
        code_length < SEPARATOR_POSITION and code_length % 2 == 1
    ):
        logger.debug("Rejected code length %s", code_length)
        raise InvalidArgumentError(
            code="INVALID_CODE_LENGTH",
            message=f"Invalid Open Location Code length: {code_length}",
            details={"code_length": code_length},
        )
    return code_length


def encode(latitude: float, longitude: float, code_length: int = 0) -> str:
    """Encode a location into an Open Location Code.

    `code_length` is the number of significant digits, not counting the
    separator or padding; 0 means the configured default (10). Latitude is
    clipped to [-90, 90] and longitude normalized to [-180, 180).
    """

    code_length = resolve_code_length(code_length)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    # Keep the code decodable: the upper bound of a cell is exclusive.
    if latitude == LATITUDE_MAX:
        latitude -= compute_latitude_precision(code_length)

    symbols = _encode_pairs(
        latitude, longitude, min(code_length, PAIR_CODE_LENGTH)
    )
    if code_length > PAIR_CODE_LENGTH:
        symbols.extend(
            _encode_grid(latitude, longitude, code_length - PAIR_CODE_LENGTH)
        )
    return "".join(symbols)


def _bounded(digit: int, limit: int) -> int:
    # Float noise can leave a remainder a hair outside [0, place value).
    return min(max(digit, 0), limit - 1)


def _encode_pairs(latitude: float, longitude: float, code_length: int) -> list[str]:
    symbols: list[str] = []
    adjusted_lat = latitude + LATITUDE_MAX
    adjusted_lon = longitude + LONGITUDE_MAX

    digit_count = 0
    while digit_count < code_length:
        place_value = PAIR_RESOLUTIONS[digit_count // 2]

        digit = _bounded(math.floor(adjusted_lat / place_value), ENCODING_BASE)
        adjusted_lat -= digit * place_value
        symbols.append(CODE_ALPHABET[digit])
        digit_count += 1

        digit = _bounded(math.floor(adjusted_lon / place_value), ENCODING_BASE)
        adjusted_lon -= digit * place_value
        symbols.append(CODE_ALPHABET[digit])
        digit_count += 1

        if digit_count == SEPARATOR_POSITION and digit_count < code_length:
            symbols.append(SEPARATOR)

    if len(symbols) < SEPARATOR_POSITION:
        symbols.extend(PADDING_CHARACTER * (SEPARATOR_POSITION - len(symbols)))
    if len(symbols) == SEPARATOR_POSITION:
        symbols.append(SEPARATOR)
    return symbols


def _encode_grid(latitude: float, longitude: float, code_length: int) -> list[str]:
    symbols: list[str] = []
    lat_place = GRID_SIZE_DEGREES
    lon_place = GRID_SIZE_DEGREES
    # Only the offset inside the last pair cell matters here.
    adjusted_lat = (latitude + LATITUDE_MAX) % lat_place
    adjusted_lon = (longitude + LONGITUDE_MAX) % lon_place

    for _ in range(code_length):
        row = _bounded(
            math.floor(adjusted_lat / (lat_place / GRID_ROWS)), GRID_ROWS
        )
        col = _bounded(
            math.floor(adjusted_lon / (lon_place / GRID_COLUMNS)), GRID_COLUMNS
        )
        lat_place /= GRID_ROWS
        lon_place /= GRID_COLUMNS
        adjusted_lat -= row * lat_place
        adjusted_lon -= col * lon_place
        symbols.append(CODE_ALPHABET[row * GRID_COLUMNS + col])
    return symbols


def decode(code: str) -> CodeArea:
    """Decode a full code into its bounding box.

    Raises InvalidArgumentError if `code` is not a valid full code.
    """

    if not is_full(code):
        logger.debug("Rejected decode of %r", code)
        raise InvalidArgumentError(
            code="INVALID_CODE",
            message=f"Passed Open Location Code is not a valid full code: {code}",
            details={"code": code},
        )

    digits = code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "").upper()
    area = _decode_pairs(digits[:PAIR_CODE_LENGTH])
    if len(digits) <= PAIR_CODE_LENGTH:
        return area

    grid = _decode_grid(digits[PAIR_CODE_LENGTH:])
    return CodeArea(
        latitude_lo=area.latitude_lo + grid.latitude_lo,
        longitude_lo=area.longitude_lo + grid.longitude_lo,
        latitude_hi=area.latitude_lo + grid.latitude_hi,
        longitude_hi=area.longitude_lo + grid.longitude_hi,
        code_length=area.code_length + grid.code_length,
    )


def _decode_pairs(digits: str) -> CodeArea:
    lat_lo, lat_hi = _decode_pairs_sequence(digits, 0)
    lon_lo, lon_hi = _decode_pairs_sequence(digits, 1)
    return CodeArea(
        latitude_lo=lat_lo - LATITUDE_MAX,
        longitude_lo=lon_lo - LONGITUDE_MAX,
        latitude_hi=lat_hi - LATITUDE_MAX,
        longitude_hi=lon_hi - LONGITUDE_MAX,
        code_length=len(digits),
    )


def _decode_pairs_sequence(digits: str, offset: int) -> tuple[float, float]:
    """Return (low, high) for every second digit starting at `offset`.

    Values are still in the positive (+90/+180) range.
    """

    value = 0.0
    i = 0
    while i * 2 + offset < len(digits):
        value += digit_value(digits[i * 2 + offset]) * PAIR_RESOLUTIONS[i]
        i += 1
    return value, value + PAIR_RESOLUTIONS[i - 1]


def _decode_grid(digits: str) -> CodeArea:
    lat_lo = 0.0
    lon_lo = 0.0
    lat_place = GRID_SIZE_DEGREES
    lon_place = GRID_SIZE_DEGREES

    for c in digits:
        row, col = divmod(digit_value(c), GRID_COLUMNS)
        lat_place /= GRID_ROWS
        lon_place /= GRID_COLUMNS
        lat_lo += row * lat_place
        lon_lo += col * lon_place

    return CodeArea(
        latitude_lo=lat_lo,
        longitude_lo=lon_lo,
        latitude_hi=lat_lo + lat_place,
        longitude_hi=lon_lo + lon_place,
        code_length=len(digits),
    )
