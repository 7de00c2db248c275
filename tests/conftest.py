# tests/conftest.py
"""Pytest configuration with shared fixtures for the edriver tests.

The fixtures wire a `TextEditor` to the simulated workbench from `stubs`:
pyperclip is patched with a `FakeClipboard` shared by the page objects and the
simulated editor, and explicit waits are shortened so a failing wait does not
stall the suite.
"""

from __future__ import annotations

from typing import Any

import pyperclip
import pytest

from edriver.core.TextEditor import TextEditor
from edriver.utils import utils
from edriver.utils.utils import DEFAULT_CONFIG, deep_merge
from stubs import FakeClipboard, Workbench


@pytest.fixture(autouse=True)
def user_config_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point the user configuration at an empty scratch directory.

    Keeps a developer's own ``~/.config/edriver`` and ``EDRIVER_*`` variables
    out of the tests. Tests may write ``config.toml`` or ``.env`` into the
    returned directory.
    """
    config_dir = tmp_path / "edriver-config"
    config_dir.mkdir()
    monkeypatch.setattr(utils, "CONFIG_DIR", config_dir)
    for name in utils.ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    return config_dir


@pytest.fixture
def config() -> dict[str, Any]:
    """Default configuration with short explicit-wait timeouts.

    Returns:
        dict[str, Any]: Complete edriver configuration.
    """
    return deep_merge(DEFAULT_CONFIG, {"driver": {"wait_timeout": 0.3, "poll_frequency": 0.01}})


@pytest.fixture
def clipboard(monkeypatch: pytest.MonkeyPatch) -> FakeClipboard:
    """Replace the system clipboard with an in-memory one for the test.

    Returns:
        FakeClipboard: The clipboard seen by both pyperclip and the fake editor.
    """
    fake = FakeClipboard()
    monkeypatch.setattr(pyperclip, "copy", fake.copy)
    monkeypatch.setattr(pyperclip, "paste", fake.paste)
    return fake


@pytest.fixture
def workbench(config: dict[str, Any], clipboard: FakeClipboard) -> Workbench:
    """A simulated workbench window with an empty editor."""
    return Workbench(config, clipboard)


@pytest.fixture
def editor(workbench: Workbench, config: dict[str, Any]) -> TextEditor:
    """A real `TextEditor` driving the simulated workbench."""
    return TextEditor(workbench.driver, config)  # type: ignore[arg-type]
