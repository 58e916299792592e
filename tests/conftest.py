# tests/conftest.py

import pytest

from webroots.paths import DirectoryPathProvider
from webroots.stores import StoreConfig, StoreRegistry
from webroots.translator import UrlPathTranslator


@pytest.fixture
def shop_store():
    return StoreConfig(
        code="default",
        web_url="http://shop.test/",
        media_url="http://shop.test/media/",
        static_url="http://shop.test/static/",
    )


@pytest.fixture
def app_paths():
    return DirectoryPathProvider("/app/pub", "/app/pub/media", "/app/pub/static")


@pytest.fixture
def translator(shop_store, app_paths):
    return UrlPathTranslator(StoreRegistry([shop_store]), app_paths)
