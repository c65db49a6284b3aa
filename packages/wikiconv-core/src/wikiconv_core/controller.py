"""ConversionController — applies the link formatter in response to host events."""

from __future__ import annotations

import logging

from wikiconv_core.config.models import ConverterSettings
from wikiconv_core.formatter import format_links
from wikiconv_core.interfaces import Cursor, DocumentStore, EditorHandle, Notifier, Workspace
from wikiconv_core.models import Document, DocumentStoreError, EventKind, HostEvent
from wikiconv_core.scope import is_in_scope

logger = logging.getLogger(__name__)

CLOSE_MARKER = "]]"


class ConversionController:
    """Bridges host events to the formatter and scope policy.

    Holds only host collaborators. Settings are passed into every call, so
    the host decides when they are loaded and saved. A document is written
    back only when its text actually changed: the write fires another
    ``modified`` event, and that second pass finds nothing to convert.
    """

    def __init__(
        self,
        store: DocumentStore,
        notifier: Notifier,
        workspace: Workspace | None = None,
    ) -> None:
        self.store = store
        self.notifier = notifier
        self.workspace = workspace

    # -- Public API ----------------------------------------------------------

    def dispatch(self, event: HostEvent, settings: ConverterSettings) -> bool:
        """Route a host event to its handler. Returns True if text was rewritten."""
        if event.kind in (EventKind.created, EventKind.modified):
            if event.document is None:
                return False
            return self.on_document_event(event.document, event.kind, settings)
        if event.kind is EventKind.editor_changed:
            if event.editor is None or event.document is None:
                return False
            return self.on_live_edit(event.editor, event.document, settings)
        if event.kind is EventKind.manual_command:
            if event.document is None:
                return self.convert_active(settings)
            return self.on_manual_convert(event.document, settings)
        return False

    def on_document_event(
        self, doc: Document, kind: EventKind, settings: ConverterSettings
    ) -> bool:
        """Automatic conversion of a created or modified note inside the configured scopes."""
        if not settings.auto_convert:
            return False
        if not is_in_scope(doc.path, doc.extension, settings.scopes):
            logger.debug("Out of scope, skipping %s event: %s", kind.value, doc.path)
            return False
        return self._convert_document(doc, settings)

    def on_manual_convert(self, doc: Document | None, settings: ConverterSettings) -> bool:
        """Explicit conversion request; scopes and auto_convert do not apply."""
        if doc is None:
            self.notifier.notify("No active file")
            return False
        return self._convert_document(doc, settings)

    def convert_active(self, settings: ConverterSettings) -> bool:
        active = self.workspace.get_active_document() if self.workspace else None
        return self.on_manual_convert(active, settings)

    def on_live_edit(
        self, editor: EditorHandle, doc: Document, settings: ConverterSettings
    ) -> bool:
        """Convert the unsaved editor buffer right after a link is closed with ``]]``.

        The cursor-line check runs first so ordinary keystrokes cost a single
        line lookup, not a scan of the whole buffer.
        """
        if not settings.auto_convert:
            return False

        cursor = editor.get_cursor()
        line = editor.get_line(cursor.line)
        if not line[: cursor.ch].endswith(CLOSE_MARKER):
            return False
        if not is_in_scope(doc.path, doc.extension, settings.scopes):
            return False

        result = format_links(editor.get_value(), settings.link_format)
        if not result.changed:
            return False

        editor.set_value(result.new_text)
        # Links never span lines, so the text before the caret converts the
        # same way on its own; links after the caret must not move it.
        head = format_links(line[: cursor.ch], settings.link_format).new_text
        new_line = editor.get_line(cursor.line)
        editor.set_cursor(Cursor(line=cursor.line, ch=min(len(head), len(new_line))))
        logger.info("Converted %d link(s) in editor buffer of %s", result.converted, doc.path)
        return True

    # -- Internals -----------------------------------------------------------

    def _convert_document(self, doc: Document, settings: ConverterSettings) -> bool:
        """Read, convert, and write back a single note. Returns True if written."""
        try:
            content = self.store.read(doc.path)
            result = format_links(content, settings.link_format)
            if not result.changed:
                logger.debug("No wikilinks to convert in %s", doc.path)
                return False
            self.store.write(doc.path, result.new_text)
        except (DocumentStoreError, OSError, UnicodeDecodeError) as exc:
            logger.error(f"Error converting links in {doc.path}: {exc}")
            self.notifier.notify(f"Failed to convert links in {doc.basename}")
            return False

        logger.info(f"Converted {result.converted} link(s) in {doc.path}")
        if settings.show_success_notice:
            self.notifier.notify(f"Converted links in {doc.basename}")
        return True
