"""Custom exception hierarchy for vetkit.

Every error raised by the library inherits from :class:`VetkitError`,
so callers can catch the whole validation layer with a single clause.
Each category additionally inherits from the closest built-in
exception (``TypeError``, ``ValueError``, ``FileNotFoundError``, …) so
that code written against the standard library keeps working.

Hierarchy
---------
VetkitError
├── NullInputError           (TypeError)
├── InvalidInputError        (ValueError)
├── NotFoundError            (FileNotFoundError)
│   └── EntryKindError
├── AlreadyExistsError       (FileExistsError)
├── InvalidExtensionError    (ValueError)
├── UnsupportedTypeError     (ValueError)
└── EnvironmentError
"""

from __future__ import annotations


class VetkitError(Exception):
    """Base exception for all vetkit errors.

    Every validation failure maps to a subclass of this exception so
    that the CLI error boundary can render a clean message without
    leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class NullInputError(VetkitError, TypeError):
    """Raised when a required argument is ``None``."""


class InvalidInputError(VetkitError, ValueError):
    """Raised when an argument has an invalid value (empty path, negative tolerance)."""


# --- File system -----------------------------------------------------------

class NotFoundError(VetkitError, FileNotFoundError):
    """Raised when a required file system entry does not exist."""


class EntryKindError(NotFoundError):
    """Raised when the entry exists but is of the wrong kind.

    A directory where a file is required, or the other way round.
    """


class AlreadyExistsError(VetkitError, FileExistsError):
    """Raised when a file system entry exists but must not."""


class InvalidExtensionError(VetkitError, ValueError):
    """Raised when a path's extension is not among the allowed ones."""


# --- Numeric types ---------------------------------------------------------

class UnsupportedTypeError(VetkitError, ValueError):
    """Raised when a numeric type descriptor is outside the supported set."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(VetkitError):
    """Raised when a required runtime dependency is not available."""
