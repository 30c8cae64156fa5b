"""Numeric type descriptors and their representable ranges.

The bounds live in a fixed lookup table keyed by :class:`NumericType`.
Descriptors are normalised by :func:`resolve_numeric_type`, which
accepts enum members, their string values, C# kind names, a few Python
builtins and any numpy dtype-like object.

Every function here is pure — no I/O, no side effects.
"""

from __future__ import annotations

import decimal
import sys
from typing import Any

import numpy as np

from vetkit.core.models import NumericType, TypeRange
from vetkit.exceptions import NullInputError, UnsupportedTypeError


# ---------------------------------------------------------------------------
# Lookup table
# ---------------------------------------------------------------------------

_DECIMAL_MAX: int = 79_228_162_514_264_337_593_543_950_335
_FLOAT32_MAX: float = 3.4028234663852886e38

_RANGES: dict[NumericType, tuple[float, float]] = {
    NumericType.INT8: (float(-(2**7)), float(2**7 - 1)),
    NumericType.UINT8: (0.0, float(2**8 - 1)),
    NumericType.INT16: (float(-(2**15)), float(2**15 - 1)),
    NumericType.UINT16: (0.0, float(2**16 - 1)),
    NumericType.INT32: (float(-(2**31)), float(2**31 - 1)),
    NumericType.UINT32: (0.0, float(2**32 - 1)),
    NumericType.INT64: (float(-(2**63)), float(2**63 - 1)),
    NumericType.UINT64: (0.0, float(2**64 - 1)),
    NumericType.DECIMAL: (float(-_DECIMAL_MAX), float(_DECIMAL_MAX)),
    NumericType.FLOAT32: (-_FLOAT32_MAX, _FLOAT32_MAX),
    NumericType.FLOAT64: (-sys.float_info.max, sys.float_info.max),
}

# numpy (kind, itemsize) pairs that map onto the table.
_NUMPY_KINDS: dict[tuple[str, int], NumericType] = {
    ("i", 1): NumericType.INT8,
    ("u", 1): NumericType.UINT8,
    ("i", 2): NumericType.INT16,
    ("u", 2): NumericType.UINT16,
    ("i", 4): NumericType.INT32,
    ("u", 4): NumericType.UINT32,
    ("i", 8): NumericType.INT64,
    ("u", 8): NumericType.UINT64,
    ("f", 4): NumericType.FLOAT32,
    ("f", 8): NumericType.FLOAT64,
}

# C# / .NET kind names, matched case-insensitively.  Checked before numpy,
# which reads "byte" as a signed int8.
_KIND_ALIASES: dict[str, NumericType] = {
    "sbyte": NumericType.INT8,
    "byte": NumericType.UINT8,
    "short": NumericType.INT16,
    "ushort": NumericType.UINT16,
    "int": NumericType.INT32,
    "uint": NumericType.UINT32,
    "long": NumericType.INT64,
    "ulong": NumericType.UINT64,
    "single": NumericType.FLOAT32,
    "double": NumericType.FLOAT64,
}


# ---------------------------------------------------------------------------
# Descriptor resolution
# ---------------------------------------------------------------------------

def _describe(descriptor: Any) -> str:
    return getattr(descriptor, "__name__", None) or repr(descriptor)


def resolve_numeric_type(descriptor: Any) -> NumericType:
    """Normalise *descriptor* to a :class:`NumericType`.

    Accepted forms, checked in order:

    * a :class:`NumericType` member;
    * its string value (``"uint8"``, ``"decimal"``, …) in any letter case;
    * a C# kind name (``"byte"`` is unsigned, ``"sbyte"`` signed,
      ``"int"`` is 32-bit, ``"single"``/``"double"`` are float32/float64);
    * :class:`float` (→ ``float64``) and :class:`decimal.Decimal`;
    * any numpy dtype-like (``np.int16``, ``np.dtype("u4")``, ``"f4"``).

    Python ``int`` and ``bool`` have no fixed range and are rejected.

    Raises
    ------
    NullInputError
        When *descriptor* is ``None``.
    UnsupportedTypeError
        For anything outside the supported set.
    """
    if descriptor is None:
        raise NullInputError("Specified data type is a null reference.")

    if isinstance(descriptor, NumericType):
        return descriptor

    if isinstance(descriptor, str):
        name = descriptor.lower()
        if name in _KIND_ALIASES:
            return _KIND_ALIASES[name]
        try:
            return NumericType(name)
        except ValueError:
            pass

    if descriptor is float:
        return NumericType.FLOAT64
    if descriptor is decimal.Decimal:
        return NumericType.DECIMAL
    if descriptor is int or descriptor is bool:
        raise UnsupportedTypeError(
            f"Specified data type is not supported: {_describe(descriptor)}",
            hint="Use a fixed-width type such as 'int32' or numpy.int64.",
        )

    try:
        dtype = np.dtype(descriptor)
    except (TypeError, ValueError) as exc:
        raise UnsupportedTypeError(
            f"Specified data type is not supported: {_describe(descriptor)}",
        ) from exc

    resolved = _NUMPY_KINDS.get((dtype.kind, dtype.itemsize))
    if resolved is None:
        raise UnsupportedTypeError(
            f"Specified data type is not supported: {dtype.name}",
        )
    return resolved


# ---------------------------------------------------------------------------
# Range lookups
# ---------------------------------------------------------------------------

def type_range(type_: Any) -> TypeRange:
    """Return the inclusive bounds of *type_* as a :class:`TypeRange`."""
    numeric_type = resolve_numeric_type(type_)
    minimum, maximum = _RANGES[numeric_type]
    return TypeRange(numeric_type=numeric_type, minimum=minimum, maximum=maximum)


def type_max_value(type_: Any) -> float:
    """Return the largest value *type_* can store, as a ``float``."""
    return type_range(type_).maximum


def type_min_value(type_: Any) -> float:
    """Return the smallest value *type_* can store, as a ``float``."""
    return type_range(type_).minimum


def supported_types() -> tuple[NumericType, ...]:
    """Return every kind with a known range, in table order."""
    return tuple(_RANGES)
