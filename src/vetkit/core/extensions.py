"""Pure path-argument and extension validation.

Nothing in this module queries the file system: extension membership
is decided from the path text alone.  The file system checks in
:mod:`vetkit.infra.filesystem` build on these helpers.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Union

from vetkit.exceptions import (
    InvalidExtensionError,
    InvalidInputError,
    NullInputError,
)

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


# ---------------------------------------------------------------------------
# Argument normalisation
# ---------------------------------------------------------------------------

def require_path(path: PathArg | None) -> str:
    """Validate a path argument and return it as ``str``.

    Raises
    ------
    NullInputError
        When *path* is ``None``.
    InvalidInputError
        When *path* is empty or not path-like at all.
    """
    if path is None:
        raise NullInputError("Entry path is a null reference.")
    try:
        text = os.fsdecode(path)
    except TypeError as exc:
        raise InvalidInputError(
            f"Entry path must be a string or path-like object, got: {type(path).__name__}",
        ) from exc
    if text == "":
        raise InvalidInputError("Entry path is an empty string.")
    return text


def normalize_extensions(extensions: Iterable[str] | str | None) -> tuple[str, ...]:
    """Validate an extension collection and return it as a tuple.

    A bare string counts as a single extension.
    """
    if extensions is None:
        raise NullInputError("Extensions collection is a null reference.")
    if isinstance(extensions, str):
        extensions = (extensions,)
    result = tuple(extensions)
    if any(ext is None for ext in result):
        raise NullInputError("One of given extensions is a null reference.")
    if any(ext == "" for ext in result):
        raise InvalidInputError("One of given extensions is an empty string.")
    return result


# ---------------------------------------------------------------------------
# Extension checks
# ---------------------------------------------------------------------------

def _extension_of(text: str) -> str:
    separators = [os.sep] + ([os.altsep] if os.altsep else [])
    name = text[max(text.rfind(sep) for sep in separators) + 1:]
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:]


def get_extension(path: PathArg) -> str:
    """Return the final suffix of *path* including the dot, or ``""``.

    The suffix is taken from the text after the last separator, without
    normalising the path first: a dotfile such as ``.env`` is its own
    extension, while ``"a.txt/"`` and ``"notes."`` have none.
    """
    return _extension_of(require_path(path))


def validate_extension(
    path: PathArg | None,
    extensions: Iterable[str] | str | None = (),
) -> None:
    """Check that *path* carries one of *extensions*.

    An empty collection allows any extension.  Matching is exact and
    case-sensitive; extensions are written with their leading dot
    (``".txt"``).

    Raises
    ------
    NullInputError
        When *path*, *extensions* or one of its entries is ``None``.
    InvalidInputError
        When *path* or one of the extensions is an empty string.
    InvalidExtensionError
        When the path's extension is not among the allowed ones.
    """
    text = require_path(path)
    allowed = normalize_extensions(extensions)
    if not allowed:
        return

    extension = _extension_of(text)
    if extension not in allowed:
        raise InvalidExtensionError(
            f"Invalid extension: is '{extension}', but shall be one of "
            f"'{', '.join(allowed)}'",
            hint="Extensions are matched exactly, including the leading dot and letter case.",
        )
