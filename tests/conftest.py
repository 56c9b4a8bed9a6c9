import pytest

import thumbscache.config as config


@pytest.fixture(autouse=True)
def resetConfig(monkeypatch):
    monkeypatch.setattr(config, "VERBOSE", 0)
    monkeypatch.setattr(config, "ARGS", None)
