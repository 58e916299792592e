# src/webroots/stores.py

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import BaseKind
from .errors import NoSuchEntityError


class StoreConfig(BaseModel):
    """A store and its three base URLs.

    ``media_url`` and ``static_url`` default to ``media/`` and ``static/``
    below ``web_url`` when omitted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    code: str = Field(min_length=1)
    web_url: str = Field(min_length=1)
    media_url: str = ""
    static_url: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fill_kind_urls(cls, data):
        if not isinstance(data, dict):
            return data
        web = data.get("web_url")
        if not isinstance(web, str) or not web:
            return data
        prefix = web if web.endswith("/") else web + "/"
        data = dict(data)
        if not data.get("media_url"):
            data["media_url"] = prefix + "media/"
        if not data.get("static_url"):
            data["static_url"] = prefix + "static/"
        return data

    def base_url(self, kind: BaseKind) -> str:
        if kind == BaseKind.web:
            return self.web_url
        if kind == BaseKind.media:
            return self.media_url
        if kind == BaseKind.static:
            return self.static_url
        raise NoSuchEntityError(f"Store '{self.code}' has no base URL of kind {kind!r}")


class StoreRegistry:
    """Read-only, ordered collection of stores.

    Order is significant: URL matching scans stores in the order given here.
    """

    def __init__(self, stores: Iterable[StoreConfig], default_code: str | None = None):
        self._stores: tuple[StoreConfig, ...] = tuple(stores)
        self._default_code = default_code

        codes = [s.code for s in self._stores]
        duplicates = sorted({c for c in codes if codes.count(c) > 1})
        if duplicates:
            raise ValueError(f"Duplicate store codes: {', '.join(duplicates)}")

    def list_stores(self) -> Sequence[StoreConfig]:
        return self._stores

    def get_store(self, code: str) -> StoreConfig:
        for store in self._stores:
            if store.code == code:
                return store
        raise NoSuchEntityError(f"Store '{code}' does not exist")

    def current_store(self) -> StoreConfig:
        if self._default_code is not None:
            return self.get_store(self._default_code)
        if not self._stores:
            raise NoSuchEntityError("No store is configured")
        return self._stores[0]
