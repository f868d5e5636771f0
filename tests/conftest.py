from __future__ import annotations

import pytest

from vimroute import logging_utils

_ENV_NAMES = (
    "VIM_APP_DIR",
    "VIMROUTE_APP_DIR",
    "VIMROUTE_FALLBACK_BINARY",
    "VIMROUTE_DEFAULT_SERVER_NAME",
    "VIMROUTE_LOG_LEVEL",
    "VIMROUTE_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    # Each test gets loguru sinks bound to its own captured streams.
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    # Keep a developer's .env out of the settings.
    monkeypatch.chdir(tmp_path)
