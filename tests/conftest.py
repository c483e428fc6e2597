# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - isolated_config (autouse): clears CLASSLIST_* variables, the config
#   singleton and package logger handlers around every test
# - app_config: explicit default AppConfig
# - records: small list of dict elements with ids
# - classification_list: ClassificationList over `records`
# - make_item: factory for attribute-style (non-dict) elements
# ==============================================

import logging

import pytest

from classification_list import config as config_module
from classification_list.logging_config import PACKAGE_LOGGER_NAME
from classification_list.config import AppConfig
from classification_list.classification_list import ClassificationList


_ENV_VARS = (
    "CLASSLIST_ID_FIELD",
    "CLASSLIST_BUILD_MAIN_INDEX",
    "CLASSLIST_LOG_LEVEL",
    "CLASSLIST_LOG_FILE",
)


class Item:
    """Plain object element exposing its identifier as an attribute."""

    def __init__(self, id=None, kind=None, **extra):
        self.id = id
        self.kind = kind
        for key, value in extra.items():
            setattr(self, key, value)

    def __repr__(self):
        return f"Item(id={self.id!r}, kind={self.kind!r})"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Run every test against a clean environment and a fresh config singleton."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
    config_module.reset_config()
    yield
    config_module.reset_config()

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def records():
    return [
        {"id": "u1", "name": "alice", "role": "admin", "tags": ["ops", "dev"]},
        {"id": "u2", "name": "bob", "role": "user", "tags": ["dev"]},
        {"id": "u3", "name": "carol", "role": "user", "tags": []},
        {"id": "u4", "name": "dave", "role": "guest", "tags": None},
    ]


@pytest.fixture
def classification_list(records, app_config):
    return ClassificationList(records, config=app_config)


@pytest.fixture
def make_item():
    """Factory for attribute-style elements."""
    return Item
