# edriver/ui/KeyBinder.py
"""KeyBinder.py
==================
Description:
-----------------------
The KeyBinder class translates logical key strings from the configuration
(``"mod+s"``, ``"ctrl+space"``, ``"shift+f10"``, ``"up"``) into the character
sequences Selenium's ``send_keys`` understands, and sends them to page elements.

Key Features:
- Loads the ``[keybindings]`` section of the configuration and decodes every
  entry once, failing early on an unknown key name.
- Builds chords the way WebDriver expects them: modifiers, key, then
  ``Keys.NULL`` to release every modifier.
- Resolves the ``mod`` pseudo-modifier to COMMAND on macOS and CONTROL elsewhere.
- Traces every sequence sent to the browser with readable names on the
  ``edriver.keyevents`` logger.
"""

import logging
import sys
from typing import Any, Optional

from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webelement import WebElement

from edriver.utils.logging_config import KEY_LOGGER, logger


# ==================== KeyBinder Class ====================
class KeyBinder:
    """Maps action names to key sequences and sends them to elements.

    Attributes:
        keybindings (dict[str, str]): Decoded key sequence per action name.
    """

    NAMED_KEYS: dict[str, str] = {
        "up": Keys.UP, "down": Keys.DOWN, "left": Keys.LEFT, "right": Keys.RIGHT,
        "home": Keys.HOME, "end": Keys.END, "pageup": Keys.PAGE_UP, "pagedown": Keys.PAGE_DOWN,
        "esc": Keys.ESCAPE, "escape": Keys.ESCAPE, "enter": Keys.ENTER, "tab": Keys.TAB,
        "space": Keys.SPACE, "backspace": Keys.BACK_SPACE, "del": Keys.DELETE,
        "delete": Keys.DELETE, "insert": Keys.INSERT,
        "f1": Keys.F1, "f2": Keys.F2, "f3": Keys.F3, "f4": Keys.F4, "f5": Keys.F5,
        "f6": Keys.F6, "f7": Keys.F7, "f8": Keys.F8, "f9": Keys.F9, "f10": Keys.F10,
        "f11": Keys.F11, "f12": Keys.F12,
    }

    MODIFIERS: dict[str, str] = {
        "ctrl": Keys.CONTROL, "control": Keys.CONTROL, "shift": Keys.SHIFT,
        "alt": Keys.ALT, "meta": Keys.META, "cmd": Keys.COMMAND,
    }

    def __init__(self, config: dict[str, Any], platform: Optional[str] = None):
        self.platform = platform or sys.platform
        self.keybindings: dict[str, str] = {
            action: self.decode(spec)
            for action, spec in config.get("keybindings", {}).items()
        }
        logger.debug("KeyBinder loaded %d keybindings", len(self.keybindings))

    @property
    def primary_modifier(self) -> str:
        """COMMAND on macOS, CONTROL everywhere else."""
        return Keys.COMMAND if self.platform == "darwin" else Keys.CONTROL

    def decode(self, spec: str) -> str:
        """Decodes a key specification such as ``"mod+shift+s"``.

        Raises:
            ValueError: If a part of the specification is not a known key name
                and not a single character.
        """
        parts = [p.strip() for p in str(spec).split("+")]
        if not parts or any(not p for p in parts):
            raise ValueError(f"Invalid key specification: {spec!r}")

        modifiers = []
        for name in parts[:-1]:
            name = name.lower()
            if name == "mod":
                modifiers.append(self.primary_modifier)
            elif name in self.MODIFIERS:
                modifiers.append(self.MODIFIERS[name])
            else:
                raise ValueError(f"Unknown modifier {name!r} in {spec!r}")

        key = parts[-1]
        if key.lower() in self.NAMED_KEYS:
            key = self.NAMED_KEYS[key.lower()]
        elif len(key) != 1:
            raise ValueError(f"Unknown key {key!r} in {spec!r}")

        if modifiers:
            return "".join(modifiers) + key + Keys.NULL
        return key

    def chord(self, action: str) -> str:
        """Returns the decoded key sequence bound to `action`."""
        try:
            return self.keybindings[action]
        except KeyError:
            raise KeyError(f"No keybinding configured for action {action!r}") from None

    def press(self, element: WebElement, *actions: str) -> None:
        """Sends the chords of one or more actions in a single ``send_keys`` call."""
        self.send(element, *(self.chord(action) for action in actions))

    def send(self, element: WebElement, *keys: str) -> None:
        """Sends raw key sequences to `element`, tracing them first."""
        if KEY_LOGGER.isEnabledFor(logging.DEBUG):
            KEY_LOGGER.debug("send_keys %s", " ".join(describe_keys(k) for k in keys))
        element.send_keys(*keys)


_KEY_NAMES: dict[str, str] = {}
for _name in sorted(dir(Keys), key=len):
    if _name.isupper():
        _KEY_NAMES.setdefault(getattr(Keys, _name), _name)


def describe_keys(keys: str) -> str:
    """Readable form of a key sequence, e.g. ``<CONTROL>a<NULL>``."""
    return "".join(f"<{_KEY_NAMES[c]}>" if c in _KEY_NAMES else c for c in keys)
