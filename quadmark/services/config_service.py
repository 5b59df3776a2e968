"""
Configuration service for QuadMark.

This module handles loading, saving, and managing application settings.
Configuration is stored as JSON in ~/.config/quadmark/config.json following
the XDG Base Directory Specification.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from quadmark.services.logging_service import get_logger

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "quadmark"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

DEFAULT_BACKGROUND_URL = (
    "https://smartiestest.oss-cn-hongkong.aliyuncs.com/"
    "20250114/94988da1-a263-4606-ba86-1ef741ccf9ba.png"
)

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "theme": "dark",
    # Image drawn behind the quadrilateral; http(s) URL or local path
    "background_url": DEFAULT_BACKGROUND_URL,
    # Fixed canvas size in pixels
    "canvas_width": 800,
    "canvas_height": 600,
    # Exports land here under a fixed file name
    "default_save_folder": str(Path.home() / "Pictures" / "QuadMark"),
    "export_filename": "canvas_image.png",
    # Maximum undo entries kept; 0 keeps everything
    "history_limit": 0,
}


class ConfigService:
    """
    Service for managing application configuration.

    Handles loading, saving, and accessing configuration values.
    Provides sensible defaults when config file is missing or corrupted.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize the ConfigService.

        Args:
            config_path: Optional path to config file. Defaults to
                        ~/.config/quadmark/config.json
        """
        self._logger = get_logger(__name__)
        self._config_path = config_path or DEFAULT_CONFIG_FILE
        self._config: Dict[str, Any] = {}

        self._load()

    def _load(self) -> None:
        """Load configuration from file, using defaults if needed."""
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if not self._config_path.exists():
            self._logger.info(
                f"Config file not found at {self._config_path}. Using defaults."
            )
            self._save_to_file()
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)

            if isinstance(loaded_config, dict):
                self._config.update(loaded_config)
                self._logger.info(f"Configuration loaded from {self._config_path}")
                # Persist any new default keys
                self._save_to_file()
            else:
                raise ValueError("Config file does not contain a valid JSON object")

        except (json.JSONDecodeError, ValueError) as e:
            self._logger.warning(
                f"Config file corrupted or invalid: {e}. Recreating with defaults."
            )
            self._config = copy.deepcopy(DEFAULT_CONFIG)
            self._save_to_file()

        except OSError as e:
            self._logger.warning(
                f"Could not read config file: {e}. Using defaults."
            )

    def _save_to_file(self) -> None:
        """Save current configuration to file."""
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self._config_path, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)

            self._logger.debug(f"Configuration saved to {self._config_path}")

        except OSError as e:
            self._logger.error(f"Could not save config file: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: The configuration key to retrieve.
            default: Default value if key doesn't exist.
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value (in memory only).

        Call save() to persist changes to disk.
        """
        self._config[key] = value
        self._logger.debug(f"Config key '{key}' set to '{value}'")

    def save(self) -> None:
        """Persist current configuration to disk."""
        self._save_to_file()

    # ─── Theme Settings ───────────────────────────────────────────────────

    @property
    def theme(self) -> str:
        return self.get("theme", "dark")

    # ─── Canvas Settings ──────────────────────────────────────────────────

    @property
    def background_url(self) -> str:
        """Get the URL (or local path) of the background image."""
        return self.get("background_url", DEFAULT_BACKGROUND_URL)

    @property
    def canvas_width(self) -> int:
        return int(self.get("canvas_width", DEFAULT_CONFIG["canvas_width"]))

    @property
    def canvas_height(self) -> int:
        return int(self.get("canvas_height", DEFAULT_CONFIG["canvas_height"]))

    @property
    def history_limit(self) -> Optional[int]:
        """Get the undo history cap, or None when history is unbounded."""
        limit = int(self.get("history_limit", 0) or 0)
        return limit if limit > 0 else None

    # ─── Export Settings ──────────────────────────────────────────────────

    @property
    def default_save_folder(self) -> str:
        """Get the folder exported images are written to."""
        return self.get("default_save_folder", DEFAULT_CONFIG["default_save_folder"])

    @property
    def export_filename(self) -> str:
        return self.get("export_filename", DEFAULT_CONFIG["export_filename"])
