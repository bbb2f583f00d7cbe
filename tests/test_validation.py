from __future__ import annotations

import pytest

from pluscode import is_full, is_short, is_valid


@pytest.mark.parametrize(
    ("code", "valid", "short", "full"),
    [
        # Full codes.
        ("8FWC2345+G6", True, False, True),
        ("8FWC2345+G6G", True, False, True),
        ("8fwc2345+", True, False, True),
        ("8FWCX400+", True, False, True),
        ("8F000000+", True, False, True),
        # Short codes.
        ("WC2345+G6g", True, True, False),
        ("2345+G6", True, True, False),
        ("45+G6", True, True, False),
        ("+G6", True, True, False),
        ("8F+", True, True, False),
        # Invalid codes.
        ("G+", False, False, False),
        ("+", False, False, False),
        ("8FWC2345+G", False, False, False),
        ("8FWC2_45+G6", False, False, False),
        ("8FWC2η45+G6", False, False, False),
        ("8FWC2345+G6+", False, False, False),
        ("8FWC2300+G6", False, False, False),
        ("WC2300+G6g", False, False, False),
        ("WC2345+G", False, False, False),
        ("8FWC23456+G6", False, False, False),
        ("0FWC2345+", False, False, False),
        ("8F0W0000+", False, False, False),
        ("8FWCX40+", False, False, False),
        ("80000000+", False, False, False),
        ("8FWC2345+00", False, False, False),
        ("8FWC2345", False, False, False),
        ("8FWC2A45+G6", False, False, False),
    ],
)
def test_validity_table(code: str, valid: bool, short: bool, full: bool) -> None:
    assert is_valid(code) is valid
    assert is_short(code) is short
    assert is_full(code) is full


@pytest.mark.parametrize("code", ["", None, 12345, b"8FWC2345+G6", ["8F+"]])
def test_predicates_never_raise_on_garbage(code) -> None:  # noqa: ANN001
    assert is_valid(code) is False
    assert is_short(code) is False
    assert is_full(code) is False


def test_full_rejects_latitude_beyond_pole() -> None:
    # 'C' is digit 8 (160 deg offset) and 'F' is 9 (180): latitude >= 90.
    assert is_valid("F2222222+")
    assert not is_full("F2222222+")
    assert is_full("C2222222+")


def test_full_rejects_longitude_beyond_antimeridian() -> None:
    # 'W' is digit 18 => 360 deg offset for longitude.
    assert is_valid("2W222222+")
    assert not is_full("2W222222+")
    assert is_full("2V222222+")


def test_predicates_are_case_insensitive() -> None:
    assert is_full("8fwc2345+g6")
    assert is_short("wc2345+g6")
