import pytest


@pytest.fixture(autouse=True)
def _testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
