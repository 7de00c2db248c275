# edriver/utils/utils.py
"""
edriver.utils.utils.py
======================

This module provides the configuration layer and small helpers shared by the
edriver page objects.

Key functionalities include:
- Robust Configuration Loading: Implements a multi-layered strategy that loads a
  hardcoded, built-in default configuration, then recursively merges it with
  user-defined settings from `~/.config/edriver/config.toml` and finally with
  environment overrides read from `~/.config/edriver/.env`.
- URI Resolution: Converts the `file://` URIs exposed by the editor DOM into
  local filesystem paths.
- Helper Utilities: Includes a function for deep-merging dictionaries.

This architecture ensures the page objects always have a complete set of
selectors, keybindings and timeouts, even if user configuration files are
missing or corrupted, by falling back to the embedded defaults.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import toml
from dotenv import dotenv_values

logger = logging.getLogger("edriver")

# --- Constants ---
CONFIG_DIR = Path.home() / ".config" / "edriver"

# This dictionary is the ultimate fallback, ensuring the page objects can ALWAYS
# locate the workbench elements.
DEFAULT_CONFIG: Dict[str, Any] = {
    "driver": {"wait_timeout": 10.0, "poll_frequency": 0.2},
    "selectors": {
        "editor_group": "div.editor-group-container.active",
        "editor": "div.editor-instance .monaco-editor",
        "input_area": ".inputarea",
        "active_tab": "div.tab.active",
        "status_position": "[id='status.editor.selection'] a",
        "suggest_widget": ".suggest-widget",
        "suggest_message": ".message",
        "suggest_row": ".monaco-list-row",
        "suggest_label": ".label-name",
        "context_menu": ".context-view .monaco-menu",
        "menu_item": ".action-item",
        "menu_label": ".action-label",
        "view_pane": ".split-view-view .pane",
        "pane_header": ".pane-header",
        "pane_title": ".pane-header h3.title",
        "tree": ".monaco-tree",
        "tree_row": ".monaco-tree-row",
        "tree_label": ".monaco-highlighted-label",
    },
    "keybindings": {
        "select_all": "mod+a", "copy": "mod+c", "paste": "mod+v", "save": "mod+s",
        "trigger_suggest": "ctrl+space", "close_suggest": "esc",
        "context_menu": "shift+f10", "close_menu": "esc",
        "delete_selection": "backspace", "collapse_selection": "up",
        "tree_home": "home",
    },
    "editor": {"format_document_label": "Format Document"},
    "logging": {
        "file_level": "DEBUG", "console_level": "WARNING", "log_to_console": True,
        "separate_error_log": False, "log_file": "edriver.log",
    },
}

# Environment variable -> (section, key, converter)
ENV_OVERRIDES: Dict[str, tuple] = {
    "EDRIVER_WAIT_TIMEOUT": ("driver", "wait_timeout", float),
    "EDRIVER_POLL_FREQUENCY": ("driver", "poll_frequency", float),
    "EDRIVER_LOG_LEVEL": ("logging", "file_level", str),
}


# --- Helper Functions ---

def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.

    Returns a new dictionary sharing no nested objects with either argument,
    so the result can be modified without touching `DEFAULT_CONFIG`.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def apply_env_overrides(config: Dict[str, Any], env: Dict[str, Optional[str]]) -> Dict[str, Any]:
    """
    Applies the recognised `EDRIVER_*` variables from `env` on top of `config`.

    Values that cannot be converted are logged and skipped.
    """
    result = deep_merge({}, config)
    for name, (section, key, convert) in ENV_OVERRIDES.items():
        raw = env.get(name)
        if raw is None or raw == "":
            continue
        try:
            result.setdefault(section, {})[key] = convert(raw)
        except ValueError:
            logger.error(f"Ignoring invalid value for {name}: {raw!r}")
            continue
        logger.debug(f"Applied environment override {name}={raw!r}")
    return result


def load_config(config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations, ensuring the page objects can always run.

    Layers, lowest priority first:
    1.  The embedded `DEFAULT_CONFIG`.
    2.  `config.toml` from the user configuration directory.
    3.  `EDRIVER_*` variables from `.env` in that directory, then from the
        process environment.
    """
    config_dir = config_dir or CONFIG_DIR
    final_config = deep_merge({}, DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    user_config_path = config_dir / "config.toml"
    if user_config_path.is_file():
        try:
            user_config = toml.load(user_config_path)
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Successfully loaded and merged user config from {user_config_path}")
        except Exception as e:
            logger.error(f"Could not parse user config '{user_config_path}': {e}. Using defaults.")

    env: Dict[str, Optional[str]] = {}
    dotenv_path = config_dir / ".env"
    if dotenv_path.is_file():
        env.update(dotenv_values(dotenv_path))
    env.update({name: os.environ[name] for name in ENV_OVERRIDES if name in os.environ})
    return apply_env_overrides(final_config, env)


def file_uri_to_path(uri: str) -> str:
    """
    Converts a `file://` URI (as found in the editor's `data-uri` attribute)
    into a local path string.

    Raises:
        ValueError: If the URI does not use the `file` scheme.
    """
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise ValueError(f"Not a file URI: {uri!r}")
    path = url2pathname(parsed.path)
    if parsed.netloc and parsed.netloc != "localhost":
        # UNC share, e.g. file://server/share/file.txt
        return f"//{parsed.netloc}{path}"
    return path
