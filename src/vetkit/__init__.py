"""vetkit — path and numeric-range validation helpers.

The public surface is a set of plain functions that either return
quietly or raise a :class:`~vetkit.exceptions.VetkitError` subclass.
"""

from vetkit.core import (
    EntryKind,
    NumericType,
    TypeRange,
    are_equal,
    get_extension,
    greater_or_equal,
    resolve_numeric_type,
    smaller_or_equal,
    supported_types,
    type_max_value,
    type_min_value,
    type_range,
    validate_extension,
)
from vetkit.infra import (
    probe_entry,
    validate_existing_directory,
    validate_existing_file,
    validate_non_existing_directory,
    validate_non_existing_file,
)
from vetkit.version import __version__

__all__: list[str] = [
    "EntryKind",
    "NumericType",
    "TypeRange",
    "__version__",
    "are_equal",
    "get_extension",
    "greater_or_equal",
    "probe_entry",
    "resolve_numeric_type",
    "smaller_or_equal",
    "supported_types",
    "type_max_value",
    "type_min_value",
    "type_range",
    "validate_existing_directory",
    "validate_existing_file",
    "validate_extension",
    "validate_non_existing_directory",
    "validate_non_existing_file",
]
