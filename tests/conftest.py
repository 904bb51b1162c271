import pytest


@pytest.fixture(autouse=True)
def _no_condition_env(monkeypatch):
    for key in ("LABEL", "REVIEWER", "AUTHOR"):
        monkeypatch.delenv(key, raising=False)
