from decimal import Decimal
from enum import Enum, IntEnum

import pytest

from fieldgroup.keys import MISSING, KeyFormat, canonical_key


class Color(Enum):
    RED = "red"
    BLUE = 2


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (MISSING, "undefined"),
        (None, "null"),
        (True, "true"),
        (False, "false"),
        ("DONE", "DONE"),
        ("", ""),
        (2020, "2020"),
        (-3, "-3"),
        (2020.0, "2020"),
        (1.5, "1.5"),
        (float("inf"), "inf"),
        (Decimal("1.50"), "1.50"),
        (Color.RED, "red"),
        (Color.BLUE, "2"),
        (Priority.HIGH, "2"),
        ((1, 2), "(1, 2)"),
    ],
)
def test_canonical_key_default_format(value, expected) -> None:
    assert canonical_key(value) == expected


def test_numeric_forms_share_a_key() -> None:
    assert canonical_key(2020) == canonical_key(2020.0) == canonical_key("2020")


def test_missing_and_none_are_distinct() -> None:
    assert canonical_key(MISSING) != canonical_key(None)


def test_custom_key_format_markers() -> None:
    key_format = KeyFormat(missing="<missing>", null="<none>", true="yes", false="no")

    assert canonical_key(MISSING, key_format) == "<missing>"
    assert canonical_key(None, key_format) == "<none>"
    assert canonical_key(True, key_format) == "yes"
    assert canonical_key(False, key_format) == "no"
    assert canonical_key(1, key_format) == "1"


def test_key_format_is_immutable() -> None:
    with pytest.raises(AttributeError):
        KeyFormat().missing = "other"  # type: ignore[misc]


def test_missing_repr() -> None:
    assert repr(MISSING) == "MISSING"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1e300, "1e+300"),
        (1e23, "1e+23"),
        (-1e23, "-1e+23"),
        (2.0**53, "9007199254740992.0"),
        (2.0**53 - 1, "9007199254740991"),
    ],
)
def test_large_floats_keep_their_float_form(value, expected) -> None:
    assert canonical_key(value) == expected


def test_large_float_does_not_collide_with_its_binary_expansion() -> None:
    assert canonical_key(1e23) != canonical_key(int(1e23))
