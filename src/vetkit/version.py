"""Single source of truth for the vetkit version string."""

from __future__ import annotations

__version__: str = "0.1.0"
