from __future__ import annotations

from pathlib import Path

import pytest

from devstack.constants import CONFIG_FILE_ENV_KEY
from devstack.utils.console import Console


@pytest.fixture(autouse=True)
def clear_singleton_instance() -> None:
    Console._instance = None


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.delenv(CONFIG_FILE_ENV_KEY, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
