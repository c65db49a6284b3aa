"""VaultStore — document store over an Obsidian vault directory on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from wikiconv_core.interfaces import VaultEntry
from wikiconv_core.models import Document, DocumentStoreError

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_DIRS = (".obsidian", ".git", ".trash")


def should_ignore(rel_path: str, ignore_dirs: tuple[str, ...] | list[str]) -> bool:
    """Return True if any component of a vault-relative path is an ignored directory."""
    parts = Path(rel_path).parts
    return any(part in ignore_dirs for part in parts)


class VaultStore:
    def __init__(
        self,
        vault_path: str | Path,
        ignore_dirs: tuple[str, ...] | list[str] = DEFAULT_IGNORE_DIRS,
    ) -> None:
        self.vault_path = Path(vault_path)
        self.ignore_dirs = tuple(ignore_dirs)

    # -- DocumentStore -------------------------------------------------------

    def read(self, path: str) -> str:
        target = self._resolve(path, "read")
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentStoreError(path, "read", exc) from exc

    def write(self, path: str, text: str) -> None:
        target = self._resolve(path, "write")
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise DocumentStoreError(path, "write", exc) from exc
        logger.debug("wrote %s (%d chars)", path, len(text))

    def list_all(self) -> list[VaultEntry]:
        """Every file in the vault outside ignored directories, sorted by path.

        Files at the vault root report ``"/"`` as their parent, like the
        editor's own file tree does.
        """
        entries: list[VaultEntry] = []
        for file in self.vault_path.rglob("*"):
            if not file.is_file():
                continue
            rel = file.relative_to(self.vault_path).as_posix()
            if should_ignore(rel, self.ignore_dirs):
                continue
            parent = Path(rel).parent.as_posix()
            entries.append(VaultEntry(path=rel, parent_path="/" if parent == "." else parent))
        return sorted(entries, key=lambda e: e.path)

    # -- Helpers -------------------------------------------------------------

    def document_for(self, path: str | Path) -> Document:
        """Build a Document from an absolute path inside the vault or a vault-relative one.

        Raises ValueError if the path lies outside the vault.
        """
        p = Path(path)
        if p.is_absolute():
            try:
                p = p.resolve().relative_to(self.vault_path.resolve())
            except ValueError:
                raise ValueError(f"{path} is not inside vault {self.vault_path}") from None
        return Document(path=p.as_posix())

    def _resolve(self, path: str, operation: str) -> Path:
        target = self.vault_path / path
        if not target.resolve().is_relative_to(self.vault_path.resolve()):
            raise DocumentStoreError(path, operation, ValueError("Path traversal detected"))
        return target
