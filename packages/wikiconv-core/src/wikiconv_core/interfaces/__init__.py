"""Host collaborator interfaces consumed by the conversion controller."""

from wikiconv_core.interfaces.editor import Cursor, EditorHandle
from wikiconv_core.interfaces.host import Notifier, Workspace
from wikiconv_core.interfaces.store import DocumentStore, SettingsStore, VaultEntry

__all__ = [
    "Cursor",
    "DocumentStore",
    "EditorHandle",
    "Notifier",
    "SettingsStore",
    "VaultEntry",
    "Workspace",
]
