from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
import sys

import pytest


# Ensure `import pluscode` works without an editable install.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    from pluscode.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Set PLUSCODE_* variables; the settings cache is reset around each test."""

    def _set(**values: object) -> None:
        from pluscode.core.settings import get_settings

        for key, value in values.items():
            monkeypatch.setenv(f"PLUSCODE_{key.upper()}", str(value))
        get_settings.cache_clear()

    return _set
