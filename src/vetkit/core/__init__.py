"""Core layer — pure validation logic and value types.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from vetkit.core.extensions import get_extension, validate_extension
from vetkit.core.models import EntryKind, NumericType, TypeRange
from vetkit.core.numeric_types import (
    resolve_numeric_type,
    supported_types,
    type_max_value,
    type_min_value,
    type_range,
)
from vetkit.core.tolerance import are_equal, greater_or_equal, smaller_or_equal

__all__: list[str] = [
    "EntryKind",
    "NumericType",
    "TypeRange",
    "are_equal",
    "get_extension",
    "greater_or_equal",
    "resolve_numeric_type",
    "smaller_or_equal",
    "supported_types",
    "type_max_value",
    "type_min_value",
    "type_range",
    "validate_extension",
]
