"""Group records by the string form of one of their fields.

Example:
    Given tasks with ``state`` values DONE, TODO, DONE (ids 1, 2, 3)::

        group_by(tasks, "state")
        # {"DONE": [task1, task3], "TODO": [task2]}

    Group keys appear in the order they are first seen, and each group keeps
    the input order of its records. Every record lands in exactly one group.
"""

from collections.abc import Callable, Iterable
from logging import getLogger
from typing import Any, TypeVar

from fieldgroup.exceptions import MissingFieldError
from fieldgroup.fields import read_field
from fieldgroup.keys import MISSING, KeyFormat, canonical_key, default_key_format
from fieldgroup.selectors import FieldSelector

logger = getLogger(__name__)

_R = TypeVar("_R")

#: Mapping from group key to the records sharing it, in input order.
Grouping = dict[str, list[_R]]


def group_by(
    records: Iterable[_R],
    field: str | FieldSelector[_R],
    *,
    key_format: KeyFormat = default_key_format,
    strict: bool = False,
) -> Grouping[_R]:
    """Group records by the canonical string form of a field.

    Args:
        records: The records to group, possibly empty.
        field: A field name, or a ``FieldSelector`` validated against the record type.
        key_format: Markers used for missing, null and boolean values.
        strict: Raise instead of grouping records that lack the field under
            ``key_format.missing``.

    Returns:
        A new dict mapping each group key to its records.

    Raises:
        MissingFieldError: If ``strict`` is set and a record lacks the field.
    """
    name = field.name if isinstance(field, FieldSelector) else field

    def value_of(record: _R) -> Any:
        value = read_field(record, name)
        if value is MISSING:
            if strict:
                raise MissingFieldError(record, name)
            logger.debug(
                "Record %r has no field %r, grouping under %r",
                record,
                name,
                key_format.missing,
            )
        return value

    return _group(records, value_of, key_format, str(field))


def group_by_key(
    records: Iterable[_R],
    key_fn: Callable[[_R], Any],
    *,
    key_format: KeyFormat = default_key_format,
) -> Grouping[_R]:
    """Group records by the canonical string form of a derived value.

    Unlike ``group_by`` with a field name, attribute access inside ``key_fn``
    (``lambda car: car.make``) is checked by type checkers against the record type.

    Args:
        records: The records to group, possibly empty.
        key_fn: Returns the value to group a record by. It may return ``MISSING``.
        key_format: Markers used for missing, null and boolean values.

    Returns:
        A new dict mapping each group key to its records.
    """
    return _group(records, key_fn, key_format, getattr(key_fn, "__name__", repr(key_fn)))


def _group(
    records: Iterable[_R],
    value_of: Callable[[_R], Any],
    key_format: KeyFormat,
    described_as: str,
) -> Grouping[_R]:
    groups: Grouping[_R] = {}
    count = 0
    for record in records:
        key = canonical_key(value_of(record), key_format)
        groups.setdefault(key, []).append(record)
        count += 1
    logger.debug("Grouped %d records by %s into %d groups", count, described_as, len(groups))
    return groups
