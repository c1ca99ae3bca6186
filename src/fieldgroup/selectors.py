"""Validated field selectors.

A ``FieldSelector`` ties a field name to the record type it belongs to. The
name is checked against the type's declared fields when the selector is built,
which usually happens at import time::

    BY_STATE = selector(Task, "state")
    BY_MAKE = fields_of(Car).make

    group_by(tasks, BY_STATE)

A misspelled name fails with ``UnknownFieldError`` before any data is grouped,
rather than silently putting every record in the missing bucket.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Generic, TypeVar

from fieldgroup.exceptions import UnknownFieldError
from fieldgroup.fields import field_names, read_field

_R = TypeVar("_R")


@dataclass(frozen=True, slots=True)
class FieldSelector(Generic[_R]):
    record_type: type[_R]
    name: str

    @classmethod
    def of(cls, record_type: type[_R], name: str) -> FieldSelector[_R]:
        """Build a selector, checking that ``name`` is a field of ``record_type``.

        Raises:
            UnknownFieldError: If the type doesn't declare the field.
            UnsupportedRecordTypeError: If the type's fields can't be introspected.
        """
        available = field_names(record_type)
        if name not in available:
            raise UnknownFieldError(
                record_type,
                name,
                available,
                get_close_matches(name, available, n=2),
            )
        return cls(record_type, name)

    def __call__(self, record: _R) -> Any:
        return read_field(record, self.name)

    def __str__(self) -> str:
        return f"{self.record_type.__name__}.{self.name}"


def selector(record_type: type[_R], name: str) -> FieldSelector[_R]:
    return FieldSelector.of(record_type, name)


class RecordFields(Generic[_R]):
    """Attribute-style access to the selectors of a record type.

    ``fields_of(Car).make`` is equivalent to ``selector(Car, "make")``.
    """

    __slots__ = ("_record_type",)

    def __init__(self, record_type: type[_R]) -> None:
        self._record_type = record_type

    def __getattr__(self, name: str) -> FieldSelector[_R]:
        if name.startswith("_"):
            raise AttributeError(name)
        return FieldSelector.of(self._record_type, name)

    def __dir__(self) -> list[str]:
        return list(field_names(self._record_type))

    def __repr__(self) -> str:
        return f"fields_of({self._record_type.__name__})"


def fields_of(record_type: type[_R]) -> RecordFields[_R]:
    field_names(record_type)
    return RecordFields(record_type)
