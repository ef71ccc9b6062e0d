# tests/conftest.py
from pathlib import Path

import pytest

from dero.services import settings_store


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path: Path) -> Path:
    """Point DERO_SETTINGS at a temp file so tests never read a real settings.yaml."""
    settings_path = tmp_path / "settings.yaml"
    monkeypatch.setenv(settings_store.SETTINGS_ENV_VAR, str(settings_path))
    settings_store.clear_settings_cache()
    yield settings_path
    settings_store.clear_settings_cache()
