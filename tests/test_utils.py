# tests/test_utils.py
"""Unit tests for utility functions in the `edriver.utils` module."""

import copy
import sys

import pytest

from edriver.utils import utils


# Taken at import, before any test can have touched the live defaults.
PRISTINE_DEFAULTS = copy.deepcopy(utils.DEFAULT_CONFIG)


def test_deep_merge() -> None:
    """Verify that `deep_merge` correctly merges nested dictionaries.

    This test ensures:
    - Existing values are preserved if not overridden.
    - Nested dictionaries are merged recursively.
    - Conflicting keys are overridden by values from the second dictionary.
    """
    base = {"a": 1, "b": {"x": 10, "y": 20}}
    override = {"b": {"y": 99, "z": 100}, "c": 3}
    result = utils.deep_merge(base, override)
    expected = {"a": 1, "b": {"x": 10, "y": 99, "z": 100}, "c": 3}
    assert result == expected


def test_deep_merge_shares_no_nested_objects() -> None:
    """The merge result can be edited without touching either input."""
    base = {"driver": {"wait_timeout": 10.0}, "tags": ["a"]}
    override = {"selectors": {"editor": ".monaco-editor"}}
    result = utils.deep_merge(base, override)

    result["driver"]["wait_timeout"] = 1.0
    result["tags"].append("b")
    result["selectors"]["editor"] = "#other"

    assert base == {"driver": {"wait_timeout": 10.0}, "tags": ["a"]}
    assert override == {"selectors": {"editor": ".monaco-editor"}}


def test_load_config_leaves_defaults_untouched(tmp_path, monkeypatch) -> None:
    """Environment overrides land in the returned config only."""
    (tmp_path / "config.toml").write_text('[selectors]\neditor = "#mine"\n', encoding="utf-8")
    monkeypatch.setenv("EDRIVER_WAIT_TIMEOUT", "2.5")

    config = utils.load_config(tmp_path)
    config["keybindings"]["save"] = "ctrl+alt+s"

    assert config["driver"]["wait_timeout"] == 2.5
    assert utils.DEFAULT_CONFIG == PRISTINE_DEFAULTS
    assert utils.load_config(tmp_path)["keybindings"]["save"] == "mod+s"


def test_load_config_defaults(tmp_path) -> None:
    """Without user files the embedded defaults are returned unchanged."""
    assert utils.load_config(tmp_path) == PRISTINE_DEFAULTS


def test_load_config_layers(tmp_path, monkeypatch) -> None:
    """config.toml overrides defaults; .env and the environment override both.

    The process environment wins over .env.
    """
    (tmp_path / "config.toml").write_text(
        '[driver]\nwait_timeout = 2.0\n\n[keybindings]\nsave = "ctrl+shift+s"\n',
        encoding="utf-8",
    )
    (tmp_path / ".env").write_text(
        "EDRIVER_WAIT_TIMEOUT=3.5\nEDRIVER_POLL_FREQUENCY=0.5\n", encoding="utf-8"
    )
    monkeypatch.setenv("EDRIVER_POLL_FREQUENCY", "0.05")

    config = utils.load_config(tmp_path)

    assert config["driver"] == {"wait_timeout": 3.5, "poll_frequency": 0.05}
    assert config["keybindings"]["save"] == "ctrl+shift+s"
    assert config["keybindings"]["copy"] == "mod+c"


def test_load_config_corrupt_toml(tmp_path, caplog) -> None:
    """A config.toml that cannot be parsed is logged and ignored."""
    (tmp_path / "config.toml").write_text("[driver\nwait_timeout = ", encoding="utf-8")

    config = utils.load_config(tmp_path)

    assert config == PRISTINE_DEFAULTS
    assert "Could not parse user config" in caplog.text


def test_apply_env_overrides_skips_invalid_values(caplog) -> None:
    config = utils.apply_env_overrides(
        utils.DEFAULT_CONFIG,
        {"EDRIVER_WAIT_TIMEOUT": "soon", "EDRIVER_LOG_LEVEL": "INFO", "UNRELATED": "1"},
    )

    assert config["driver"]["wait_timeout"] == 10.0
    assert config["logging"]["file_level"] == "INFO"
    assert "EDRIVER_WAIT_TIMEOUT" in caplog.text
    # the defaults themselves are never mutated
    assert utils.DEFAULT_CONFIG["logging"]["file_level"] == "DEBUG"


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX path layout")
@pytest.mark.parametrize(
    "uri, expected",
    [
        ("file:///home/user/project/main.py", "/home/user/project/main.py"),
        ("file:///home/user/my%20project/a.py", "/home/user/my project/a.py"),
        ("file://localhost/tmp/x.txt", "/tmp/x.txt"),
        ("file://server/share/notes.md", "//server/share/notes.md"),
    ],
)
def test_file_uri_to_path(uri, expected) -> None:
    assert utils.file_uri_to_path(uri) == expected


@pytest.mark.parametrize("uri", ["untitled:Untitled-1", "https://example.com/a.py", ""])
def test_file_uri_to_path_rejects_other_schemes(uri) -> None:
    with pytest.raises(ValueError):
        utils.file_uri_to_path(uri)
