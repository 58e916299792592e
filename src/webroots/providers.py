# src/webroots/providers.py
"""Collaborator protocols consumed by the translator.

The embedding application supplies the store list, the local root folders and
an HTML unescaper. Default implementations live in ``stores``, ``paths`` and
below (``HtmlEntityUnescaper``).
"""

from __future__ import annotations

import html
from collections.abc import Sequence
from typing import Protocol

from .enums import BaseKind


class Store(Protocol):
    """One store of a multi-store application."""

    @property
    def code(self) -> str: ...

    def base_url(self, kind: BaseKind) -> str:
        """Return the store's base URL for ``kind``, exactly as configured.

        Raises:
            NoSuchEntityError: If the store context is invalid
        """
        ...


class StoreRegistryProtocol(Protocol):
    def list_stores(self) -> Sequence[Store]: ...

    def current_store(self) -> Store:
        """Return the store whose base URLs are used for path -> URL output.

        Raises:
            NoSuchEntityError: If no valid store context exists
        """
        ...


class PathProviderProtocol(Protocol):
    """Local root folders, without trailing slash."""

    def root_path(self) -> str: ...

    def media_path(self) -> str:
        """Raises MissingRootError when the media root is undefined."""
        ...

    def static_path(self) -> str:
        """Raises MissingRootError when the static root is undefined."""
        ...


class HtmlUnescaperProtocol(Protocol):
    def unescape(self, value: str) -> str: ...


class HtmlEntityUnescaper:
    """Decode HTML entities (``&amp;``, ``&#47;``, ...) with the stdlib decoder."""

    def unescape(self, value: str) -> str:
        return html.unescape(value)


class CallableUnescaper:
    """Adapt a plain ``str -> str`` function to the unescaper protocol."""

    def __init__(self, func):
        self._func = func

    def unescape(self, value: str) -> str:
        return str(self._func(value))
