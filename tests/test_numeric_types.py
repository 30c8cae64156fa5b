"""Tests for numeric type ranges (core/numeric_types.py).

Coverage:
* Exact bounds for every supported kind.
* Agreement with ``numpy.iinfo`` / ``numpy.finfo``.
* Descriptor resolution: enum, string, builtins, numpy dtypes.
* Unsupported and null descriptors.
"""

from __future__ import annotations

import decimal
import sys

import numpy as np
import pytest

from vetkit.core.models import NumericType, TypeRange
from vetkit.core.numeric_types import (
    resolve_numeric_type,
    supported_types,
    type_max_value,
    type_min_value,
    type_range,
)
from vetkit.exceptions import NullInputError, UnsupportedTypeError


# ---------------------------------------------------------------------------
# Known constants
# ---------------------------------------------------------------------------

class TestKnownBounds:
    @pytest.mark.parametrize(
        ("numeric_type", "minimum", "maximum"),
        [
            (NumericType.UINT8, 0.0, 255.0),
            (NumericType.INT8, -128.0, 127.0),
            (NumericType.UINT16, 0.0, 65535.0),
            (NumericType.INT16, -32768.0, 32767.0),
            (NumericType.UINT32, 0.0, 4294967295.0),
            (NumericType.INT32, -2147483648.0, 2147483647.0),
            (NumericType.UINT64, 0.0, 1.8446744073709552e19),
            (NumericType.INT64, -9.223372036854776e18, 9.223372036854776e18),
            (NumericType.DECIMAL, -7.922816251426434e28, 7.922816251426434e28),
            (NumericType.FLOAT32, -3.4028234663852886e38, 3.4028234663852886e38),
            (NumericType.FLOAT64, -sys.float_info.max, sys.float_info.max),
        ],
    )
    def test_bounds(
        self, numeric_type: NumericType, minimum: float, maximum: float
    ) -> None:
        assert type_min_value(numeric_type) == minimum
        assert type_max_value(numeric_type) == maximum

    def test_returns_floats(self) -> None:
        assert isinstance(type_max_value(NumericType.INT32), float)
        assert isinstance(type_min_value(NumericType.UINT8), float)

    def test_every_enum_member_is_supported(self) -> None:
        assert set(supported_types()) == set(NumericType)


# ---------------------------------------------------------------------------
# Agreement with numpy
# ---------------------------------------------------------------------------

class TestNumpyAgreement:
    @pytest.mark.parametrize(
        "dtype",
        [np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64],
    )
    def test_integer_bounds(self, dtype: type) -> None:
        info = np.iinfo(dtype)
        assert type_min_value(dtype) == float(info.min)
        assert type_max_value(dtype) == float(info.max)

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_float_bounds(self, dtype: type) -> None:
        info = np.finfo(dtype)
        assert type_min_value(dtype) == float(info.min)
        assert type_max_value(dtype) == float(info.max)


# ---------------------------------------------------------------------------
# type_range
# ---------------------------------------------------------------------------

class TestTypeRange:
    def test_returns_frozen_range(self) -> None:
        bounds = type_range("uint8")
        assert bounds == TypeRange(NumericType.UINT8, 0.0, 255.0)
        with pytest.raises(AttributeError):
            bounds.maximum = 1.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# resolve_numeric_type
# ---------------------------------------------------------------------------

class TestResolveNumericType:
    @pytest.mark.parametrize(
        ("descriptor", "expected"),
        [
            (NumericType.INT16, NumericType.INT16),
            ("uint32", NumericType.UINT32),
            ("decimal", NumericType.DECIMAL),
            (float, NumericType.FLOAT64),
            (decimal.Decimal, NumericType.DECIMAL),
            (np.uint8, NumericType.UINT8),
            (np.dtype("int64"), NumericType.INT64),
            ("f4", NumericType.FLOAT32),
            ("<u2", NumericType.UINT16),
        ],
    )
    def test_supported(self, descriptor: object, expected: NumericType) -> None:
        assert resolve_numeric_type(descriptor) is expected

    def test_byte_is_unsigned(self) -> None:
        bounds = type_range("byte")
        assert bounds.numeric_type is NumericType.UINT8
        assert (bounds.minimum, bounds.maximum) == (0.0, 255.0)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("sbyte", NumericType.INT8),
            ("Byte", NumericType.UINT8),
            ("short", NumericType.INT16),
            ("ushort", NumericType.UINT16),
            ("int", NumericType.INT32),
            ("uint", NumericType.UINT32),
            ("long", NumericType.INT64),
            ("ulong", NumericType.UINT64),
            ("Single", NumericType.FLOAT32),
            ("double", NumericType.FLOAT64),
            ("Decimal", NumericType.DECIMAL),
            ("UInt16", NumericType.UINT16),
        ],
    )
    def test_csharp_kind_names(self, name: str, expected: NumericType) -> None:
        assert resolve_numeric_type(name) is expected

    def test_none_raises_null_input(self) -> None:
        with pytest.raises(NullInputError):
            resolve_numeric_type(None)

    def test_none_range_raises_null_input(self) -> None:
        with pytest.raises(NullInputError):
            type_max_value(None)
        with pytest.raises(NullInputError):
            type_min_value(None)

    @pytest.mark.parametrize("descriptor", [int, bool])
    def test_unbounded_builtins_rejected(self, descriptor: type) -> None:
        with pytest.raises(UnsupportedTypeError, match=descriptor.__name__) as exc_info:
            type_max_value(descriptor)
        assert exc_info.value.hint is not None

    @pytest.mark.parametrize(
        "descriptor",
        [np.float16, np.complex128, np.bool_, str, object, "not-a-type"],
    )
    def test_unsupported_rejected(self, descriptor: object) -> None:
        with pytest.raises(UnsupportedTypeError):
            type_min_value(descriptor)

    def test_unsupported_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve_numeric_type(np.float16)
