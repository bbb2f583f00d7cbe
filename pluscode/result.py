from __future__ import annotations

"""Non-raising wrappers around the codec operations.

Only InvalidArgumentError is captured; anything else is a bug and propagates.
"""

import dataclasses
from typing import Any, Callable, Generic, TypeVar

from pluscode.area import CodeArea
from pluscode.core.errors import InvalidArgumentError, make_error_payload
from pluscode.encoding import decode, encode
from pluscode.shortening import recover_nearest, shorten


_T = TypeVar("_T")


@dataclasses.dataclass(frozen=True)
class CodecResult(Generic[_T]):
    value: _T | None = None
    error: InvalidArgumentError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> _T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def error_payload(self) -> dict[str, Any] | None:
        if self.error is None:
            return None
        return make_error_payload(
            code=self.error.code,
            message=self.error.message,
            details=self.error.details,
        )


def _capture(fn: Callable[..., _T], *args: Any) -> CodecResult[_T]:
    try:
        return CodecResult(value=fn(*args))
    except InvalidArgumentError as e:
        return CodecResult(error=e)


def try_encode(
    latitude: float, longitude: float, code_length: int = 0
) -> CodecResult[str]:
    return _capture(encode, latitude, longitude, code_length)


def try_decode(code: str) -> CodecResult[CodeArea]:
    return _capture(decode, code)


def try_shorten(code: str, latitude: float, longitude: float) -> CodecResult[str]:
    return _capture(shorten, code, latitude, longitude)


def try_recover_nearest(
    short_code: str, reference_latitude: float, reference_longitude: float
) -> CodecResult[str]:
    return _capture(
        recover_nearest, short_code, reference_latitude, reference_longitude
    )
