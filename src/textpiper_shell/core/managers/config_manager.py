# src/textpiper_shell/core/managers/config_manager.py
import copy
import json
import logging
from typing import Any, Dict, Optional

from textpiper_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "settings.json"

# Built-in values; settings.json only needs to name what it changes.
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug": {"level": "WARNING"},
    "autocomplete": {"h_max_len": 5},
    "analysis": {"reject_blank_input": True},
    "report": {"frequent_words_shown": 8},
    "studio": {"host": "127.0.0.1", "port": 5000, "debounce_ms": 1000},
    "export": {"default_format": "json"},
}

_BOOL_STRINGS = {"true": True, "1": True, "yes": True, "on": True,
                 "false": False, "0": False, "no": False, "off": False}


def merge_settings(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Returns a deep copy of `base` with `override` merged in, section by section."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_settings(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigManager:
    """
    Singleton holding the session configuration: DEFAULT_SETTINGS overlaid
    with settings.json. Changes made with set_nested last for the session only.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._config = {}
            cls._instance.reset()
        return cls._instance

    @staticmethod
    def settings_path():
        return PathUtils.get_shell_package_root() / SETTINGS_FILE_NAME

    def get_all(self) -> Dict[str, Any]:
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Looks up a dotted key such as 'studio.debounce_ms'.
        Returns `default` when any part of the path is missing.
        """
        node: Any = self._config
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return default if node is None else node

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Stores a value under a dotted key, creating sections as needed.

        A value replacing an existing one is converted to that value's type,
        so 'report.frequent_words_shown' '5' becomes the int 5 and
        'analysis.reject_blank_input' 'off' becomes False.
        """
        *sections, leaf = key_path.split('.')
        node = self._config
        for section in sections:
            node = node.setdefault(section, {})
            if not isinstance(node, dict):
                logger.error("Cannot set '%s': '%s' is not a section.", key_path, section)
                return False

        if node.get(leaf) is not None:
            try:
                value = self._cast_like(node[leaf], value)
            except (ValueError, TypeError):
                logger.error(
                    "Cannot set '%s': %r is not a valid %s.",
                    key_path, value, type(node[leaf]).__name__
                )
                return False

        node[leaf] = value
        logger.info("Configuration updated: %s = %r", key_path, value)
        return True

    @staticmethod
    def _cast_like(original: Any, value: Any) -> Any:
        """Converts `value` to the type of `original`; raises ValueError or TypeError when it cannot."""
        if isinstance(original, bool):
            if isinstance(value, str) and value.strip().lower() in _BOOL_STRINGS:
                return _BOOL_STRINGS[value.strip().lower()]
            raise ValueError(f"expected true/false, got {value!r}")
        if isinstance(original, dict):
            raise TypeError("cannot replace a section with a value")
        return type(original)(value)

    def _read_settings_file(self) -> Dict[str, Any]:
        path = self.settings_path()
        if not path.exists():
            logger.warning("%s not found at %s; using built-in defaults.", SETTINGS_FILE_NAME, path)
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", path, e, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.error("%s must contain a JSON object; ignoring it.", path)
            return {}
        return data

    def reset(self) -> None:
        """Discards session changes and reloads DEFAULT_SETTINGS plus settings.json."""
        self._config = merge_settings(DEFAULT_SETTINGS, self._read_settings_file())
        logger.debug("Configuration (re)loaded.")


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()
