"""Tolerance-aware floating point comparisons.

Two values are *equal* when their absolute difference does not exceed
the tolerance.  The ordering helpers fall back to a strict comparison
when the values are not equal.
"""

from __future__ import annotations

from vetkit.exceptions import InvalidInputError, NullInputError

DEFAULT_TOLERANCE: float = 0.0


def _check_tolerance(tolerance: float) -> None:
    if tolerance is None:
        raise NullInputError("Tolerance is a null reference.")
    try:
        # Written as a negated >= so that NaN is rejected too.
        negative = not tolerance >= 0
    except TypeError as exc:
        raise InvalidInputError(
            f"Tolerance must be a number, got: {type(tolerance).__name__}",
        ) from exc
    if negative:
        raise InvalidInputError(
            f"Tolerance must be a non-negative number, got: {tolerance}",
        )


def are_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Return ``True`` iff ``|a - b| <= tolerance``.

    Identical infinities compare equal.  NaN is never equal to anything.

    Raises
    ------
    InvalidInputError
        When *tolerance* is negative or NaN.
    """
    _check_tolerance(tolerance)
    # inf - inf is NaN, so test identity of values first.
    return a == b or abs(a - b) <= tolerance


def smaller_or_equal(
    value: float,
    reference: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    """Return ``True`` when *value* is equal to or below *reference*."""
    if are_equal(value, reference, tolerance):
        return True
    return value < reference


def greater_or_equal(
    value: float,
    reference: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    """Return ``True`` when *value* is equal to or above *reference*."""
    if are_equal(value, reference, tolerance):
        return True
    return value > reference
