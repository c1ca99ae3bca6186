"""Exceptions for record grouping.

Field lookups are permissive by default, so these are only raised when a
selector is built against a type that doesn't declare the field, when a type
has no introspectable field set, or when strict grouping meets a record that
lacks the selected field.
"""

from typing import Any, Sequence


class GroupingError(Exception):
    """Base exception for grouping failures.

    Attributes:
        message: Human-readable description of the failure.
        record_type: The record type involved, if known.
        field: The selected field name, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        record_type: type | None = None,
        field: str | None = None,
    ) -> None:
        self.message = message
        self.record_type = record_type
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnknownFieldError(GroupingError, AttributeError):
    """Raised when a selector names a field the record type doesn't declare."""

    def __init__(
        self,
        record_type: type,
        field: str,
        available: Sequence[str],
        suggestions: Sequence[str] = (),
    ) -> None:
        self.available = tuple(available)
        self.suggestions = tuple(suggestions)
        message = (
            f"{record_type.__name__} has no field '{field}'. "
            f"Available fields: {', '.join(self.available) or '(none)'}"
        )
        if self.suggestions:
            message += f"\nHint: did you mean {' or '.join(repr(s) for s in self.suggestions)}?"
        super().__init__(message, record_type=record_type, field=field)


class MissingFieldError(GroupingError, KeyError):
    """Raised by strict grouping when a record has no value for the selected field."""

    def __init__(self, record: Any, field: str) -> None:
        self.record = record
        super().__init__(
            f"Record {record!r} has no field '{field}'",
            record_type=type(record),
            field=field,
        )


class UnsupportedRecordTypeError(GroupingError, TypeError):
    """Raised when a type has no declared field set to validate selectors against."""

    def __init__(self, record_type: Any) -> None:
        name = getattr(record_type, "__name__", repr(record_type))
        super().__init__(
            f"Cannot determine the fields of {name}: expected a dataclass, attrs class, "
            f"pydantic model, SQLAlchemy mapped class, NamedTuple or TypedDict",
            record_type=record_type if isinstance(record_type, type) else None,
        )
