# src/webroots/enums.py
from enum import Enum


class BaseKind(str, Enum):
    web = "web"
    media = "media"
    static = "static"


# Precedence used whenever a store's base URLs are scanned
SCAN_ORDER = (BaseKind.web, BaseKind.media, BaseKind.static)
