from __future__ import annotations

from collections.abc import Callable

import pytest

from pluscode import InvalidArgumentError, decode, encode
from pluscode.core.errors import make_error_payload
from pluscode.core.settings import Settings, get_settings


def test_defaults() -> None:
    assert Settings().default_code_length == 10
    assert get_settings() is get_settings()


def test_default_code_length_from_env(settings_env: Callable[..., None]) -> None:
    settings_env(default_code_length=11)
    assert get_settings().default_code_length == 11

    code = encode(20.3701125, 2.782234375)
    assert code == "7FG49QCJ+2VX"
    assert decode(code).code_length == 11


def test_invalid_default_code_length_is_rejected(
    settings_env: Callable[..., None],
) -> None:
    settings_env(default_code_length=7)
    with pytest.raises(InvalidArgumentError) as exc_info:
        encode(47.0, 8.0)
    assert exc_info.value.details == {"code_length": 7}

    # An explicit length does not consult the setting.
    assert encode(47.0000625, 8.0000625, 10) == "8FVC2222+22"


def test_error_payload_shape() -> None:
    err = InvalidArgumentError(
        code="INVALID_CODE", message="bad", details={"code": "x"}
    )
    assert str(err) == "bad"
    assert make_error_payload(
        code=err.code, message=err.message, details=err.details
    ) == {"code": "INVALID_CODE", "message": "bad", "details": {"code": "x"}}
