"""PluginDataStore — converter settings kept in the plugin's data.json inside the vault."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from wikiconv_core.config import ConverterSettings

logger = logging.getLogger(__name__)


class PluginDataStore:
    def __init__(self, vault_path: str | Path, plugin_id: str = "wikilink-converter") -> None:
        """
        Args:
            vault_path: Path to the Obsidian vault directory
            plugin_id: Folder name under .obsidian/plugins/ that owns data.json
        """
        self.path = Path(vault_path) / ".obsidian" / "plugins" / plugin_id / "data.json"

    def load(self) -> ConverterSettings:
        """Load settings, falling back to defaults when the file is missing or unusable."""
        if not self.path.exists():
            return ConverterSettings()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Unreadable settings in %s, using defaults: %s", self.path, e)
            return ConverterSettings()
        if not isinstance(raw, dict):
            logger.warning("Settings in %s are not an object, using defaults", self.path)
            return ConverterSettings()
        try:
            return ConverterSettings.model_validate(raw)
        except ValidationError as e:
            logger.warning("Invalid settings in %s, using defaults: %s", self.path, e)
            return ConverterSettings()

    def save(self, settings: ConverterSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = settings.model_dump(by_alias=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        logger.debug("saved settings to %s", self.path)
