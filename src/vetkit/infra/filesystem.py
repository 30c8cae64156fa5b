"""Infrastructure: file system existence and kind checks.

This is the only module that queries the host file system.  Each
validator probes the path once via :func:`probe_entry` and raises a
typed :class:`~vetkit.exceptions.VetkitError` subclass on violation.

Rules
-----
* Read-only — nothing is created, moved or deleted.
* No ``print()`` — callers handle user-facing output.
* Symlinks are followed, as :meth:`pathlib.Path.is_file` does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from vetkit.core.extensions import PathArg, require_path, validate_extension
from vetkit.core.models import EntryKind
from vetkit.exceptions import AlreadyExistsError, EntryKindError, NotFoundError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Probe
# ---------------------------------------------------------------------------

def probe_entry(path: PathArg | None) -> EntryKind:
    """Report what *path* resolves to on the file system.

    A path the OS refuses to look up (name too long, unreadable parent,
    …) is reported as :attr:`EntryKind.MISSING`.
    """
    entry = Path(require_path(path))
    try:
        if entry.is_file():
            kind = EntryKind.FILE
        elif entry.is_dir():
            kind = EntryKind.DIRECTORY
        elif entry.exists():
            kind = EntryKind.OTHER
        else:
            kind = EntryKind.MISSING
    except OSError as exc:
        logger.debug("Cannot probe %s, treating as missing: %s", entry, exc)
        return EntryKind.MISSING
    logger.debug("Probed %s: %s", entry, kind.value)
    return kind


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------

def validate_existing_directory(path: PathArg | None) -> None:
    """Require *path* to be an existing directory.

    Raises
    ------
    NullInputError
        When *path* is ``None``.
    InvalidInputError
        When *path* is an empty string.
    EntryKindError
        When *path* exists but is not a directory.
    NotFoundError
        When nothing exists at *path*.
    """
    text = require_path(path)
    kind = probe_entry(text)
    if kind is EntryKind.DIRECTORY:
        return
    if not kind.exists:
        raise NotFoundError(f"Directory does not exist: {text}")
    if kind is EntryKind.FILE:
        raise EntryKindError(f"Given file system entry is a file: {text}")
    raise EntryKindError(f"Given file system entry is not a directory: {text}")


def validate_non_existing_directory(path: PathArg | None) -> None:
    """Require that no directory exists at *path*.

    A regular file at *path* does not violate this check.
    """
    text = require_path(path)
    if probe_entry(text) is EntryKind.DIRECTORY:
        raise AlreadyExistsError(f"Directory already exists: {text}")


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def _is_file_like(kind: EntryKind) -> bool:
    # Any existing entry that is not a directory counts as a file, so
    # FIFOs and sockets pass the existing-file check.
    return kind.exists and kind is not EntryKind.DIRECTORY


def validate_existing_file(
    path: PathArg | None,
    extensions: Iterable[str] | str | None = (),
) -> None:
    """Require *path* to be an existing file with an allowed extension.

    Special entries (FIFOs, sockets) count as files.

    Raises
    ------
    NullInputError
        When *path*, *extensions* or one of its entries is ``None``.
    InvalidInputError
        When *path* or one of the extensions is an empty string.
    EntryKindError
        When *path* is a directory.
    NotFoundError
        When nothing exists at *path*.
    InvalidExtensionError
        When the file's extension is not among *extensions*.
    """
    text = require_path(path)
    kind = probe_entry(text)
    if kind is EntryKind.DIRECTORY:
        raise EntryKindError(f"Given file system entry is a directory: {text}")
    if not _is_file_like(kind):
        raise NotFoundError(f"File does not exist: {text}")
    validate_extension(text, extensions)


def validate_non_existing_file(
    path: PathArg | None,
    extensions: Iterable[str] | str | None = (),
) -> None:
    """Require that no file exists at *path* and its extension is allowed.

    A directory at *path* does not violate this check; a FIFO or socket
    does.

    Raises
    ------
    AlreadyExistsError
        When a file (or special entry) exists at *path*.
    InvalidExtensionError
        When the path's extension is not among *extensions*.
    """
    text = require_path(path)
    if _is_file_like(probe_entry(text)):
        raise AlreadyExistsError(f"Given file already exists: {text}")
    validate_extension(text, extensions)
