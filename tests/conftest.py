"""
Shared fixtures.
"""

import logging
import os
from pathlib import Path
from typing import Iterator

import pytest

from ardcoord.core.config import get_settings


@pytest.fixture(autouse=True)
def isolated_logging() -> Iterator[None]:
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[pytest.MonkeyPatch]:
    """Run without ARDCOORD_* variables or a .env file, with fresh settings."""
    for key in list(os.environ):
        if key.startswith("ARDCOORD_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
