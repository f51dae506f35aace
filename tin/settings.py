"""User settings for the editor.

Settings are read from a JSON file in the OS-appropriate config directory.
Missing or invalid entries fall back to the compiled-in defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TIN_CONFIG"


@dataclass
class EditorSettings:
    """Tunable editor behaviour."""

    tab_stop: int = EditorConstants.TAB_STOP
    status_message_seconds: float = EditorConstants.STATUS_MESSAGE_SECONDS
    quit_times: int = EditorConstants.QUIT_TIMES
    gutter_color: int = EditorConstants.GUTTER_COLOR


class SettingsLoader:
    """Loads `EditorSettings` from the user's config file."""

    def __init__(self, config_file: Optional[Path] = None):
        if config_file is None:
            override = os.environ.get(CONFIG_ENV_VAR)
            if override:
                config_file = Path(override)
            else:
                config_dir = Path(platformdirs.user_config_dir("tin"))
                config_file = config_dir / "config.json"
        self._config_file = config_file

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _read_raw(self) -> Dict[str, Any]:
        """Read the config file as a dict.

        Returns:
            The parsed settings, or an empty dict if the file is absent or
            cannot be parsed.
        """
        if not self._config_file.exists():
            return {}

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._config_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    @staticmethod
    def validate_setting(key: str, value: Any) -> bool:
        """Validate a single setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if the value can be used for the key.
        """
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool):
            return False
        if key == 'tab_stop':
            return isinstance(value, int) and 1 <= value <= 16
        if key == 'status_message_seconds':
            return isinstance(value, (int, float)) and value > 0
        if key == 'quit_times':
            return isinstance(value, int) and 0 <= value <= 10
        if key == 'gutter_color':
            return isinstance(value, int) and 0 <= value <= 255
        return False

    def load(self) -> EditorSettings:
        """Build settings from defaults overlaid with the config file."""
        settings = EditorSettings()
        known = {f.name for f in fields(EditorSettings)}
        for key, value in self._read_raw().items():
            if key not in known:
                logger.warning(f"Unknown setting {key!r} ignored")
                continue
            if not self.validate_setting(key, value):
                logger.warning(f"Invalid value {value!r} for setting {key!r}, using default")
                continue
            setattr(settings, key, value)
        logger.debug(f"Loaded settings {settings} from {self._config_file}")
        return settings


def load_settings(config_file: Optional[Path] = None) -> EditorSettings:
    """Load editor settings from `config_file` or the default location."""
    return SettingsLoader(config_file).load()
