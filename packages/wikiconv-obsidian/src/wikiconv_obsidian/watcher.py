"""VaultWatcher — converts wikilinks automatically as notes are created or saved."""

from __future__ import annotations

import logging
import os
import signal
import time

from watchdog.events import FileSystemEvent, PatternMatchingEventHandler
from watchdog.observers import Observer

from wikiconv_core.config import WatchConfig
from wikiconv_core.controller import ConversionController
from wikiconv_core.interfaces import SettingsStore
from wikiconv_core.models import EventKind, HostEvent
from wikiconv_obsidian.vault import VaultStore, should_ignore

logger = logging.getLogger(__name__)


class _NoteEventHandler(PatternMatchingEventHandler):
    """Forwards created/modified events for markdown notes, debounced per path."""

    def __init__(self, watcher: VaultWatcher, debounce_seconds: float) -> None:
        super().__init__(patterns=["*.md"], ignore_directories=True)
        self._watcher = watcher
        self._debounce = debounce_seconds
        self._last_event: dict[str, float] = {}

    def on_created(self, event: FileSystemEvent) -> None:
        self._handle(event, EventKind.created)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._handle(event, EventKind.modified)

    def _handle(self, event: FileSystemEvent, kind: EventKind) -> None:
        src = os.fsdecode(event.src_path)
        now = time.time()
        last = self._last_event.get(src, 0)
        if now - last < self._debounce:
            return
        self._last_event[src] = now
        self._watcher.handle_path(src, kind)


class VaultWatcher:
    """Watches a vault and feeds note events to a ConversionController.

    watchdog delivers events for one watch from a single dispatch thread, so
    conversions run one at a time. Settings are re-read from the settings
    store on every event; edits made while watching apply immediately.
    """

    def __init__(
        self,
        store: VaultStore,
        controller: ConversionController,
        settings_store: SettingsStore,
        config: WatchConfig | None = None,
    ) -> None:
        self.store = store
        self.controller = controller
        self.settings_store = settings_store
        self.config = config or WatchConfig()
        self._observer: Observer | None = None
        self._handler = _NoteEventHandler(self, self.config.debounce_seconds)

    def handle_path(self, src_path: str, kind: EventKind) -> bool:
        """Dispatch one filesystem event. Returns True if the note was rewritten."""
        try:
            doc = self.store.document_for(src_path)
        except ValueError:
            logger.debug("Ignoring event outside vault: %s", src_path)
            return False
        if should_ignore(doc.path, self.config.ignore_dirs):
            return False

        try:
            settings = self.settings_store.load()
            return self.controller.dispatch(HostEvent(kind=kind, document=doc), settings)
        except Exception:
            logger.exception("Conversion failed for %s event on %s", kind.value, doc.path)
            return False

    def start(self) -> None:
        """Begin watching the vault recursively."""
        if self._observer is not None:
            return
        self._observer = Observer()
        self._observer.schedule(self._handler, str(self.store.vault_path), recursive=True)
        self._observer.start()
        logger.info("Watching %s for changes", self.store.vault_path)

    def stop(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout=5)
        self._observer = None
        logger.info("Stopped watching %s", self.store.vault_path)

    def run_forever(self) -> None:
        """Watch until SIGINT/SIGTERM."""
        stop = False

        def _signal_handler(sig, frame):
            nonlocal stop
            stop = True

        signal.signal(signal.SIGINT, _signal_handler)
        signal.signal(signal.SIGTERM, _signal_handler)

        self.start()
        try:
            while not stop:
                time.sleep(1)
        finally:
            self.stop()
