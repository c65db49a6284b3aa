"""Obsidian vault host for wikiconv: filesystem store, settings, and watcher."""

from .host import RichNotifier, StaticWorkspace
from .scope_editor import ScopeEditor, all_folders, suggest_folders
from .settings_store import PluginDataStore
from .vault import VaultStore
from .watcher import VaultWatcher

__all__ = [
    "PluginDataStore",
    "RichNotifier",
    "ScopeEditor",
    "StaticWorkspace",
    "VaultStore",
    "VaultWatcher",
    "all_folders",
    "suggest_folders",
]
