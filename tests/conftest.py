"""Shared test fixtures for wikiconv."""

import logging

import pytest

from wikiconv_core.config.models import ConverterSettings
from wikiconv_core.interfaces import Cursor, VaultEntry
from wikiconv_core.models import Document, DocumentStoreError


class RecordingStore:
    """In-memory DocumentStore that records every read and write."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files = dict(files or {})
        self.reads: list[str] = []
        self.writes: list[tuple[str, str]] = []
        self.fail_read: set[str] = set()
        self.fail_write: set[str] = set()
        self.on_write = None

    def read(self, path: str) -> str:
        self.reads.append(path)
        if path in self.fail_read or path not in self.files:
            raise DocumentStoreError(path, "read", FileNotFoundError(path))
        return self.files[path]

    def write(self, path: str, text: str) -> None:
        if path in self.fail_write:
            raise DocumentStoreError(path, "write", PermissionError(path))
        self.writes.append((path, text))
        self.files[path] = text
        if self.on_write is not None:
            self.on_write(path)

    def list_all(self) -> list[VaultEntry]:
        return [VaultEntry(path=p, parent_path=p.rpartition("/")[0] or "/") for p in self.files]


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FakeEditor:
    """Editor buffer with a caret; records set_value calls."""

    def __init__(self, text: str, cursor: Cursor) -> None:
        self.text = text
        self.cursor = cursor
        self.set_calls = 0
        self.full_reads = 0

    def get_value(self) -> str:
        self.full_reads += 1
        return self.text

    def set_value(self, text: str) -> None:
        self.set_calls += 1
        self.text = text

    def get_cursor(self) -> Cursor:
        return self.cursor

    def set_cursor(self, cursor: Cursor) -> None:
        self.cursor = cursor

    def get_line(self, line: int) -> str:
        return self.text.split("\n")[line]


class MemorySettingsStore:
    def __init__(self, settings: ConverterSettings | None = None) -> None:
        self.settings = settings or ConverterSettings()
        self.saves = 0

    def load(self) -> ConverterSettings:
        return self.settings

    def save(self, settings: ConverterSettings) -> None:
        self.saves += 1
        self.settings = settings


@pytest.fixture
def make_store():
    """Factory for a RecordingStore preloaded with ``{path: text}``."""
    return RecordingStore


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def make_editor():
    """Factory for a FakeEditor: ``make_editor(text, Cursor(...))``."""
    return FakeEditor


@pytest.fixture
def make_settings_store():
    """Factory for an in-memory SettingsStore holding the given settings."""
    return MemorySettingsStore


@pytest.fixture
def blog_settings():
    return ConverterSettings(scopes=["blog"])


@pytest.fixture
def blog_doc():
    return Document(path="blog/post.md")


@pytest.fixture
def vault(tmp_path):
    """A small vault with notes inside and outside the blog folder."""
    root = tmp_path / "vault"
    (root / "blog").mkdir(parents=True)
    (root / "notes").mkdir()
    (root / ".obsidian").mkdir()
    (root / "blog" / "post.md").write_text("See [[Other Post]] and [[Index|home]].\n")
    (root / "notes" / "idea.md").write_text("Linked to [[post]].\n")
    (root / "readme.md").write_text("# Vault\n")
    (root / ".obsidian" / "workspace.json").write_text("{}")
    return root


@pytest.fixture(autouse=True)
def _reset_wikiconv_logging():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if handler.get_name() == "wikiconv":
            root.removeHandler(handler)
