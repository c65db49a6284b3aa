"""ScopeEditor — the settings panel's edit intents, without the panel.

Each intent loads the current settings, applies one change, and saves them
back through the settings store. The conversion core never sees this layer;
it only receives the resulting ConverterSettings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from wikiconv_core.config import ConverterSettings
from wikiconv_core.formatter import PLACEHOLDER, has_placeholder
from wikiconv_core.interfaces import SettingsStore, VaultEntry
from wikiconv_core.scope import ROOT_SCOPE

logger = logging.getLogger(__name__)

MISSING_PLACEHOLDER_WARNING = f"Link format must contain {PLACEHOLDER} as the file name placeholder"


class ScopeEditor:
    def __init__(self, store: SettingsStore) -> None:
        self.store = store

    def settings(self) -> ConverterSettings:
        return self.store.load()

    def scopes(self) -> list[str]:
        return list(self.store.load().scopes)

    # -- Scope intents -------------------------------------------------------

    def add_scope(self, value: str = "") -> list[str]:
        """Append a scope; the panel adds a blank row that the user fills in later."""
        return self._update_scopes(lambda scopes: scopes.append(value))

    def remove_scope(self, index: int) -> list[str]:
        def _remove(scopes: list[str]) -> None:
            _check_index(scopes, index)
            del scopes[index]

        return self._update_scopes(_remove)

    def set_scope(self, index: int, value: str) -> list[str]:
        def _set(scopes: list[str]) -> None:
            _check_index(scopes, index)
            scopes[index] = value

        return self._update_scopes(_set)

    # -- Other settings ------------------------------------------------------

    def set_link_format(self, template: str) -> str | None:
        """Save the template. Returns a warning when the placeholder is missing.

        The template is saved either way; without a placeholder every link
        points at the same target.
        """
        self._save(link_format=template)
        if not has_placeholder(template):
            logger.warning("Link format %r has no %s placeholder", template, PLACEHOLDER)
            return MISSING_PLACEHOLDER_WARNING
        return None

    def set_auto_convert(self, enabled: bool) -> None:
        self._save(auto_convert=enabled)

    def set_show_success_notice(self, enabled: bool) -> None:
        self._save(show_success_notice=enabled)

    # -- Internals -----------------------------------------------------------

    def _update_scopes(self, mutate) -> list[str]:
        settings = self.store.load()
        scopes = list(settings.scopes)
        mutate(scopes)
        self.store.save(settings.model_copy(update={"scopes": scopes}))
        return scopes

    def _save(self, **changes) -> None:
        settings = self.store.load()
        self.store.save(settings.model_copy(update=changes))


def _check_index(scopes: list[str], index: int) -> None:
    if not 0 <= index < len(scopes):
        raise IndexError(f"scope index {index} out of range for {len(scopes)} scope(s)")


def all_folders(entries: Iterable[VaultEntry]) -> list[str]:
    """The vault root plus every folder that contains a file, sorted."""
    folders = {ROOT_SCOPE}
    for entry in entries:
        if entry.parent_path:
            folders.add(entry.parent_path)
    return sorted(folders)


def suggest_folders(query: str, folders: Iterable[str]) -> list[str]:
    """Case-insensitive substring match, as the folder autocomplete does."""
    needle = query.lower()
    return [f for f in folders if needle in f.lower()]
