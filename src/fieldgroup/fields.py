"""Record field access and introspection.

Records are read in one of two ways: mappings (including ``TypedDict``
instances) by key, and everything else by attribute. Field sets are
introspected from the record *type*, which is what lets selectors reject an
unknown field name before any record is read.
"""

from collections.abc import Mapping
from dataclasses import fields as dataclass_fields, is_dataclass
from logging import getLogger
from typing import Any, get_origin

import attr
from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.orm import Mapper
from typing_extensions import is_typeddict

from fieldgroup.exceptions import UnsupportedRecordTypeError
from fieldgroup.keys import MISSING

logger = getLogger(__name__)


def read_field(record: Any, name: str) -> Any:
    """Read a field from a record.

    Args:
        record: A mapping or any object with attributes.
        name: The field to read.

    Returns:
        The field value, or ``MISSING`` if the record has no such field.
    """
    if isinstance(record, Mapping):
        return record.get(name, MISSING)
    return getattr(record, name, MISSING)


def field_names(record_type: Any) -> tuple[str, ...]:
    """Return the declared fields of a record type, in declaration order.

    Parameterised generics (``Box[int]``) are resolved to their origin class.

    Args:
        record_type: A dataclass, attrs class, pydantic model, SQLAlchemy mapped
            class, NamedTuple or TypedDict.

    Returns:
        The field names declared on the type.

    Raises:
        UnsupportedRecordTypeError: If the type's field set can't be determined.
    """
    tp = get_origin(record_type) or record_type
    if not isinstance(tp, type):
        raise UnsupportedRecordTypeError(record_type)

    # TypedDict first: its classes are dict subclasses at runtime
    if is_typeddict(tp):
        return tuple(tp.__annotations__)
    if is_dataclass(tp):
        return tuple(f.name for f in dataclass_fields(tp))
    if attr.has(tp):
        return tuple(a.name for a in attr.fields(tp))
    if issubclass(tp, BaseModel):
        return tuple(tp.model_fields)
    if issubclass(tp, tuple) and hasattr(tp, "_fields"):
        return tuple(tp._fields)

    mapper = inspect(tp, raiseerr=False)
    if isinstance(mapper, Mapper):
        return tuple(mapper.attrs.keys())

    logger.debug("No field set found for %s", tp)
    raise UnsupportedRecordTypeError(record_type)
