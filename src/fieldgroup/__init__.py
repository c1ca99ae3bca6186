from fieldgroup.grouping import Grouping, group_by, group_by_key
from fieldgroup.keys import MISSING, KeyFormat, canonical_key, default_key_format
from fieldgroup.fields import field_names, read_field
from fieldgroup.selectors import FieldSelector, RecordFields, fields_of, selector
from fieldgroup.exceptions import (
    GroupingError,
    MissingFieldError,
    UnknownFieldError,
    UnsupportedRecordTypeError,
)
from fieldgroup._version import __version__

__all__ = [
    "group_by",
    "group_by_key",
    "Grouping",
    "canonical_key",
    "KeyFormat",
    "default_key_format",
    "MISSING",
    "read_field",
    "field_names",
    "FieldSelector",
    "RecordFields",
    "selector",
    "fields_of",
    "GroupingError",
    "UnknownFieldError",
    "MissingFieldError",
    "UnsupportedRecordTypeError",
    "__version__",
]
