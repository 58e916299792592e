# src/webroots/translator.py
"""
URL <-> local path translation for multi-store web applications.

A store publishes content under three base URLs (web, media, static); the
deployment serves them from three local roots (pub, media, static). The
translator maps between the two worlds and decides whether a URL belongs to
one of the application's own stores at all.
"""

from __future__ import annotations

import re

import typer

from .enums import SCAN_ORDER, BaseKind
from .errors import MissingRootError, NotFoundError
from .normalizer import normalize_url
from .providers import (
    HtmlEntityUnescaper,
    HtmlUnescaperProtocol,
    PathProviderProtocol,
    Store,
    StoreRegistryProtocol,
)

_VERSIONED_STATIC = re.compile(r"/static/version\d+/")


def _folder_prefix(folder: str) -> str:
    # "/" as a root must not turn into "//"
    return folder.rstrip("/") + "/"


_MISSING_ROOT_MESSAGES = {
    BaseKind.web: "Base folder does not exist",
    BaseKind.media: "Media folder does not exist",
    BaseKind.static: "Static folder does not exist",
}


class UrlPathTranslator:
    """Classify, and translate between, store URLs and local filenames.

    Nothing is cached: store and path data are read from the collaborators on
    every call.

    Args:
        stores: Ordered store registry; scan order decides ties
        paths: Provider of the pub, media and static roots
        unescaper: HTML entity decoder applied to incoming URLs
        verbose: 0 = silent, 1+ = trace matching decisions on stderr
    """

    def __init__(
        self,
        stores: StoreRegistryProtocol,
        paths: PathProviderProtocol,
        unescaper: HtmlUnescaperProtocol | None = None,
        verbose: int = 0,
    ):
        self._stores = stores
        self._paths = paths
        self._unescaper = unescaper if unescaper is not None else HtmlEntityUnescaper()
        self._verbose = verbose

    def is_local(self, url: str) -> bool:
        """Return True when ``url`` is relative or served by one of the stores.

        Base URLs are matched by substring containment, not as prefixes.
        """
        url = normalize_url(url)
        if not url.startswith("http://"):
            return True

        return self._match_store_base(url) is not None

    def resolve_url_from_path(self, filename: str) -> str:
        """Map a local filename to a URL of the current store.

        Media and static roots are tried before the pub root, since they
        normally live below it.

        Raises:
            NotFoundError: If no root matches, or a media/static root is undefined
        """
        for kind in (BaseKind.media, BaseKind.static, BaseKind.web):
            root = self._kind_folder(kind)
            if root in filename:
                self._trace(f"[path->url] {filename!r} under {kind.value} root {root!r}")
                return filename.replace(_folder_prefix(root), self.base_url(kind, normalized=False), 1)

        if not filename.startswith("/"):
            self._trace(f"[path->url] {filename!r} treated as relative to the web base URL")
            return self.base_url(BaseKind.web, normalized=False) + filename

        raise NotFoundError(f'Filename "{filename}" is not matched with a URL')

    def resolve_filename_from_url(self, url: str) -> str:
        """Map a store URL (or root-relative URL) to a local filename.

        Versioned static segments (``/static/version1700000000/``) are dropped
        before matching.

        Raises:
            NotFoundError: If the URL is external or matches no store base URL
        """
        url = self._unescaper.unescape(url)
        url = _VERSIONED_STATIC.sub("/static/", url)
        url = normalize_url(url)

        if not self.is_local(url):
            raise NotFoundError(f'URL "{url}" does not appear to be a local file')

        match = self._match_store_base(url)
        if match is not None:
            store, kind, base = match
            folder = self._kind_folder(kind)
            self._trace(f"[url->path] {url!r} matched {kind.value} base {base!r} of store '{store.code}'")
            return url.replace(base, _folder_prefix(folder), 1)

        if url.startswith("/"):
            self._trace(f"[url->path] {url!r} treated as root-relative")
            return self._kind_folder(BaseKind.web).rstrip("/") + url

        raise NotFoundError(f'URL "{url}" is not matched with a local file')

    def base_url(self, kind: BaseKind = BaseKind.web, normalized: bool = True) -> str:
        """Base URL of the current store for ``kind``."""
        url = self._stores.current_store().base_url(kind)
        return normalize_url(url) if normalized else url

    def base_folder(self, kind: BaseKind = BaseKind.web) -> str:
        """Local root for ``kind``. MissingRootError propagates from here."""
        if kind == BaseKind.media:
            return self._paths.media_path()
        if kind == BaseKind.static:
            return self._paths.static_path()
        return self._paths.root_path()

    def _kind_folder(self, kind: BaseKind) -> str:
        try:
            return self.base_folder(kind)
        except MissingRootError as e:
            raise NotFoundError(_MISSING_ROOT_MESSAGES[kind]) from e

    def _match_store_base(self, url: str) -> tuple[Store, BaseKind, str] | None:
        for store in self._stores.list_stores():
            for kind in SCAN_ORDER:
                base = store.base_url(kind)
                # An empty base would be contained in every URL
                if base and base in url:
                    return store, kind, base
        return None

    def _trace(self, msg: str) -> None:
        if self._verbose:
            typer.echo(msg, err=True)
