# src/webroots/errors.py
"""webroots error hierarchy.

All project exceptions inherit from WebrootsError, so the CLI can catch a
single type at its boundary.

Hierarchy:
    WebrootsError
    ├── NotFoundError       # input not resolvable under any rule
    ├── MissingRootError    # media/static root undefined (raised by path providers)
    ├── NoSuchEntityError   # store context invalid (raised by store registries)
    └── ConfigError         # unreadable or invalid configuration
"""

from __future__ import annotations


class WebrootsError(Exception):
    """Base class for all webroots errors."""


class NotFoundError(WebrootsError, LookupError):
    """A URL or filename could not be matched to its counterpart."""


class MissingRootError(WebrootsError, FileNotFoundError):
    """A local root folder (media or static) is not defined."""


class NoSuchEntityError(WebrootsError, KeyError):
    """No valid store context is available."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""


class ConfigError(WebrootsError, ValueError):
    """Configuration file could not be loaded or validated."""
