"""Open Location Code (Plus Code) encoding, decoding and shortening."""

from pluscode.area import CodeArea
from pluscode.core.errors import InvalidArgumentError
from pluscode.encoding import decode, encode
from pluscode.result import (
    CodecResult,
    try_decode,
    try_encode,
    try_recover_nearest,
    try_shorten,
)
from pluscode.shortening import recover_nearest, shorten
from pluscode.validation import is_full, is_short, is_valid

__all__ = [
    "CodeArea",
    "CodecResult",
    "InvalidArgumentError",
    "decode",
    "encode",
    "is_full",
    "is_short",
    "is_valid",
    "recover_nearest",
    "shorten",
    "try_decode",
    "try_encode",
    "try_recover_nearest",
    "try_shorten",
]
