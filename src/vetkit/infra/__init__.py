"""Infrastructure layer — host file system integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Every failure surfaces as a :class:`~vetkit.exceptions.VetkitError` subclass.
"""

from vetkit.infra.filesystem import (
    probe_entry,
    validate_existing_directory,
    validate_existing_file,
    validate_non_existing_directory,
    validate_non_existing_file,
)

__all__: list[str] = [
    "probe_entry",
    "validate_existing_directory",
    "validate_existing_file",
    "validate_non_existing_directory",
    "validate_non_existing_file",
]
