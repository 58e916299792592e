# src/webroots/config.py
"""
YAML configuration for building a translator.

Example::

    pub_root: /app/pub
    stores:
      - code: default
        web_url: http://shop.test/

``media_path``/``static_path`` default to ``<pub_root>/media`` and
``<pub_root>/static``; setting either to ``null`` leaves that root undefined.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pydantic
import typer
import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ConfigError
from .paths import DirectoryPathProvider
from .providers import CallableUnescaper, HtmlEntityUnescaper, HtmlUnescaperProtocol
from .resolver import load_hook
from .stores import StoreConfig, StoreRegistry
from .translator import UrlPathTranslator


class TranslatorSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pub_root: str | None = None
    install_root: str | None = None
    media_path: str | None = None
    static_path: str | None = None
    default_store: str | None = None
    unescaper: str | None = None
    stores: list[StoreConfig] = Field(min_length=1)

    @model_validator(mode="after")
    def _check(self) -> TranslatorSettings:
        if (self.pub_root is None) == (self.install_root is None):
            raise ValueError("exactly one of 'pub_root' or 'install_root' must be set")
        for field in ("pub_root", "install_root", "media_path", "static_path"):
            value = getattr(self, field)
            if value is not None and not value.strip():
                raise ValueError(f"'{field}' cannot be blank")

        codes = [s.code for s in self.stores]
        if len(set(codes)) != len(codes):
            raise ValueError(f"store codes must be unique, got: {codes}")
        if self.default_store is not None and self.default_store not in codes:
            raise ValueError(f"default_store '{self.default_store}' is not one of {codes}")
        return self

    def resolved_pub_root(self) -> str:
        if self.pub_root is not None:
            return self.pub_root.rstrip("/") or "/"
        return (self.install_root or "").rstrip("/") + "/pub"

    def _kind_root(self, field: str, default_leaf: str) -> str | None:
        # An explicit null means "undefined"; an absent key means the default layout
        if field in self.model_fields_set:
            return getattr(self, field)
        return self.resolved_pub_root().rstrip("/") + "/" + default_leaf

    def path_provider(self) -> DirectoryPathProvider:
        return DirectoryPathProvider(
            self.resolved_pub_root(),
            media_root=self._kind_root("media_path", "media"),
            static_root=self._kind_root("static_path", "static"),
        )

    def store_registry(self) -> StoreRegistry:
        return StoreRegistry(self.stores, default_code=self.default_store)

    def html_unescaper(self) -> HtmlUnescaperProtocol:
        if not self.unescaper:
            return HtmlEntityUnescaper()
        try:
            return CallableUnescaper(load_hook(self.unescaper))
        except (ValueError, FileNotFoundError) as e:
            raise ConfigError(f"Invalid unescaper '{self.unescaper}': {e}") from e


def load_yaml_safe(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def parse_settings(data: Any, source: str = "<config>") -> TranslatorSettings:
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping at the top level, got {type(data).__name__}")
    try:
        return TranslatorSettings.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigError(f"{source}: {e}") from e


def load_settings(path: Path) -> TranslatorSettings:
    """Read and validate a YAML config file.

    Raises:
        ConfigError: If the file is missing, not YAML, or fails validation
    """
    try:
        data = load_yaml_safe(path)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return parse_settings(data, source=str(path))


def build_translator(settings: TranslatorSettings, verbose: int = 0) -> UrlPathTranslator:
    translator = UrlPathTranslator(
        settings.store_registry(),
        settings.path_provider(),
        unescaper=settings.html_unescaper(),
        verbose=verbose,
    )
    if verbose >= 2:
        typer.echo(f"[config] {len(settings.stores)} store(s), pub root {settings.resolved_pub_root()}", err=True)
    return translator
