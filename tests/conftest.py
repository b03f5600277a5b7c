from __future__ import annotations

import pytest

from fontindex.enumerator import SKIP_FONTCONFIG_ENV
from fontindex.platform import PLATFORM_ENV
import fontindex.ui.cli.state as cli_state


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    monkeypatch.delenv(PLATFORM_ENV, raising=False)
    monkeypatch.setenv(SKIP_FONTCONFIG_ENV, "1")
    token = cli_state._STATE_VAR.set(None)
    yield
    cli_state._STATE_VAR.reset(token)
