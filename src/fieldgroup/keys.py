"""Canonical string keys for grouped field values.

Every grouping call turns a field value into its group key through
``canonical_key``, so records whose values render the same land in the same
bucket. The conversion is deliberately lossy: ``2020``, ``2020.0`` and
``"2020"`` all share the key ``"2020"``.

Example::

    canonical_key(None)  # "null"
    canonical_key(True)  # "true"
    canonical_key(Color.RED)  # canonical key of Color.RED.value
    canonical_key(MISSING)  # "undefined"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, cast


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


#: Sentinel for a record that has no value at all for the selected field.
#: Distinct from ``None``, which is a present-but-null value.
MISSING = cast(Any, _Missing())


@dataclass(frozen=True, slots=True)
class KeyFormat:
    """Markers used for values with no natural string form.

    Attributes:
        missing: Key for records lacking the selected field.
        null: Key for ``None``.
        true: Key for ``True``.
        false: Key for ``False``.
    """

    missing: str = "undefined"
    null: str = "null"
    true: str = "true"
    false: str = "false"


default_key_format = KeyFormat()

_EXACT_FLOAT_LIMIT = 2**53


def canonical_key(value: Any, key_format: KeyFormat = default_key_format) -> str:
    """Convert a field value to the string key of its group.

    Args:
        value: The field value, or ``MISSING`` if the record has no such field.
        key_format: Markers for missing, null and boolean values.

    Returns:
        - ``key_format.missing`` for ``MISSING``
        - ``key_format.null`` for ``None``
        - ``key_format.true`` / ``key_format.false`` for booleans
        - the canonical key of ``value.value`` for enum members
        - the integer form for integral floats below 2**53
        - ``str(value)`` for everything else
    """
    if value is MISSING:
        return key_format.missing
    if value is None:
        return key_format.null
    # bool before int, Enum before str/int (IntEnum, StrEnum)
    if isinstance(value, bool):
        return key_format.true if value else key_format.false
    if isinstance(value, Enum):
        return canonical_key(value.value, key_format)
    if isinstance(value, str):
        return value
    # from 2**53 up, floats keep their float form
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXACT_FLOAT_LIMIT:
        return str(int(value))
    return str(value)
