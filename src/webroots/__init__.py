# src/webroots/__init__.py
"""Translate between store resource URLs and local filesystem paths."""

from .enums import BaseKind
from .errors import ConfigError, MissingRootError, NoSuchEntityError, NotFoundError, WebrootsError
from .normalizer import normalize_url
from .translator import UrlPathTranslator

__version__ = "0.1.0"

__all__ = [
    "BaseKind",
    "ConfigError",
    "MissingRootError",
    "NoSuchEntityError",
    "NotFoundError",
    "UrlPathTranslator",
    "WebrootsError",
    "normalize_url",
]
