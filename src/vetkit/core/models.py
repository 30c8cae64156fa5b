"""Domain models for vetkit.

Enums and **frozen** dataclasses only — immutable value objects with
no behaviour beyond data access.  They carry zero I/O and must remain
pure across the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Numeric kinds
# ---------------------------------------------------------------------------

class NumericType(str, enum.Enum):
    """Closed set of numeric kinds with a known representable range."""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    DECIMAL = "decimal"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TypeRange:
    """Inclusive bounds of a :class:`NumericType`, both as ``float``."""

    numeric_type: NumericType
    """Kind the bounds belong to."""

    minimum: float
    """Smallest representable value."""

    maximum: float
    """Largest representable value."""


# ---------------------------------------------------------------------------
# File system entries
# ---------------------------------------------------------------------------

class EntryKind(str, enum.Enum):
    """What a path resolves to on the host file system."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
    """Exists, but is neither a regular file nor a directory (socket, FIFO, …)."""
    MISSING = "missing"

    @property
    def exists(self) -> bool:
        return self is not EntryKind.MISSING
