from __future__ import annotations

"""Shorten full codes relative to a reference point, and recover them.

A shortened code drops leading digits that a nearby reference location can
supply again. Recovery snaps to the nearest matching cell, not necessarily the
one the reference sits in.
"""

import logging
import math

from pluscode.constants import (
    ENCODING_BASE,
    MIN_TRIMMABLE_CODE_LENGTH,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
    SHORTEN_SAFETY_FACTOR,
)
from pluscode.core.errors import InvalidArgumentError
from pluscode.encoding import clip_latitude, decode, encode, normalize_longitude
from pluscode.validation import is_full, is_short


logger = logging.getLogger(__name__)


def recover_nearest(
    short_code: str, reference_latitude: float, reference_longitude: float
) -> str:
    """Return the full code nearest to the reference that matches `short_code`.

    The separator position decides how many leading digits are borrowed from
    the reference: "+2VX" gets 8, "CJ+2VX" gets 2 and so on. A full code is
    returned unchanged.
    """

    if not is_short(short_code):
        if is_full(short_code):
            return short_code
        logger.debug("Rejected recovery of %r", short_code)
        raise InvalidArgumentError(
            code="INVALID_SHORT_CODE",
            message=f"Passed short code is not valid: {short_code}",
            details={"code": short_code},
        )

    reference_latitude = clip_latitude(reference_latitude)
    reference_longitude = normalize_longitude(reference_longitude)

    short_code = short_code.upper()
    padding_length = SEPARATOR_POSITION - short_code.find(SEPARATOR)
    # Height and width of the area the borrowed digits describe.
    resolution = float(ENCODING_BASE) ** (2 - padding_length // 2)
    half_resolution = resolution / 2.0

    rounded_lat = math.floor(reference_latitude / resolution) * resolution
    rounded_lon = math.floor(reference_longitude / resolution) * resolution
    # Encode the middle of the rounded cell: same digits as its corner, but
    # clear of floor() noise at the boundary.
    prefix = encode(
        rounded_lat + half_resolution,
        rounded_lon + half_resolution,
        PAIR_CODE_LENGTH,
    )[:padding_length]
    area = decode(prefix + short_code)

    # More than half a cell away means the neighbouring cell is closer.
    lat_center = area.latitude_center
    diff = lat_center - reference_latitude
    if diff > half_resolution:
        lat_center -= resolution
    elif diff < -half_resolution:
        lat_center += resolution

    lon_center = area.longitude_center
    diff = lon_center - reference_longitude
    if diff > half_resolution:
        lon_center -= resolution
    elif diff < -half_resolution:
        lon_center += resolution

    if (lat_center, lon_center) != area.center:
        logger.debug(
            "Shifted recovered area of %r from %s to %s",
            short_code,
            area.center,
            (lat_center, lon_center),
        )
        area = area.recentered(
            latitude_center=lat_center, longitude_center=lon_center
        )

    return encode(area.latitude_center, area.longitude_center, area.code_length)


def shorten(code: str, latitude: float, longitude: float) -> str:
    """Drop as many leading digits as the reference location allows.

    At least four digits go (the separator is kept); the reference has to sit
    within 0.3 of the trimmed resolution from the code center. If it is too
    far away the code comes back unchanged.
    """

    if not is_full(code):
        logger.debug("Rejected shorten of %r: not a full code", code)
        raise InvalidArgumentError(
            code="INVALID_CODE",
            message=f"Passed code is not valid and full: {code}",
            details={"code": code},
        )
    if PADDING_CHARACTER in code:
        logger.debug("Rejected shorten of %r: padded", code)
        raise InvalidArgumentError(
            code="PADDED_CODE",
            message=f"Cannot shorten padded codes: {code}",
            details={"code": code},
        )

    code = code.upper()
    area = decode(code)
    if area.code_length < MIN_TRIMMABLE_CODE_LENGTH:
        logger.debug("Rejected shorten of %r: too short", code)
        raise InvalidArgumentError(
            code="CODE_TOO_SHORT",
            message=(
                f"Code length must be at least {MIN_TRIMMABLE_CODE_LENGTH}: {code}"
            ),
            details={"code": code, "code_length": area.code_length},
        )

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    distance = max(
        abs(area.latitude_center - latitude),
        abs(area.longitude_center - longitude),
    )

    for i in range(len(PAIR_RESOLUTIONS) - 2, 0, -1):
        # Always leave at least one digit pair in front of the separator.
        if (i + 1) * 2 >= area.code_length:
            continue
        if distance < PAIR_RESOLUTIONS[i] * SHORTEN_SAFETY_FACTOR:
            return code[(i + 1) * 2 :]

    logger.debug("Reference too far from %r to shorten", code)
    return code
