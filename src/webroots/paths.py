# src/webroots/paths.py

from __future__ import annotations

from .errors import MissingRootError


def _strip_root(path: str) -> str:
    # "/" alone stays "/" so a filesystem root is still a usable prefix
    stripped = path.strip().rstrip("/")
    return stripped or "/"


class DirectoryPathProvider:
    """Local root folders of a deployment.

    ``pub_root`` is the document root served as the Web base. The media and
    static roots are usually below it; pass ``None`` to leave one undefined,
    which makes its accessor raise ``MissingRootError``.
    """

    def __init__(self, pub_root: str, media_root: str | None = None, static_root: str | None = None):
        if not pub_root or not pub_root.strip():
            raise ValueError("pub_root cannot be empty")
        self._pub_root = _strip_root(pub_root)
        self._media_root = _strip_root(media_root) if media_root else None
        self._static_root = _strip_root(static_root) if static_root else None

    @classmethod
    def from_install_root(cls, install_root: str) -> DirectoryPathProvider:
        """Build the conventional layout: ``<root>/pub``, ``<root>/pub/media``, ``<root>/pub/static``."""
        pub = _strip_root(install_root).rstrip("/") + "/pub"
        return cls(pub, pub + "/media", pub + "/static")

    def root_path(self) -> str:
        return self._pub_root

    def media_path(self) -> str:
        if self._media_root is None:
            raise MissingRootError("Media root is not defined")
        return self._media_root

    def static_path(self) -> str:
        if self._static_root is None:
            raise MissingRootError("Static root is not defined")
        return self._static_root

    def __repr__(self) -> str:
        return (
            f"DirectoryPathProvider(pub_root={self._pub_root!r}, "
            f"media_root={self._media_root!r}, static_root={self._static_root!r})"
        )
