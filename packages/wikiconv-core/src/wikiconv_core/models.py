"""Pydantic models for documents, events, and conversion results."""

from __future__ import annotations

import posixpath
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class DocumentStoreError(Exception):
    """Wraps a failed read or write against the host's document store."""

    def __init__(self, path: str, operation: str, cause: Exception) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"{operation} {path} failed: {cause}")
        self.__cause__ = cause


class EventKind(str, Enum):
    """Host notifications the controller reacts to."""

    created = "created"
    modified = "modified"
    editor_changed = "editor_changed"
    manual_command = "manual_command"


class Document(BaseModel):
    """A note in the vault, addressed by its vault-relative POSIX path."""

    model_config = ConfigDict(frozen=True)

    path: str

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        v = v.replace("\\", "/").lstrip("/")
        if not v.strip():
            raise ValueError("path cannot be empty or whitespace")
        return v

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)

    @property
    def basename(self) -> str:
        """File name without extension, as shown in notices."""
        return posixpath.splitext(self.name)[0]

    @property
    def extension(self) -> str:
        """Extension without the leading dot (``"md"`` for notes)."""
        return posixpath.splitext(self.name)[1].lstrip(".")

    @property
    def parent(self) -> str:
        return posixpath.dirname(self.path)


class ConversionResult(BaseModel):
    """Outcome of one pass of the link formatter over a text."""

    model_config = ConfigDict(frozen=True)

    changed: bool
    new_text: str
    converted: int = 0


class HostEvent(BaseModel):
    """A single notification delivered by the host.

    ``editor`` is only set for ``editor_changed`` events and is kept opaque
    here; the controller talks to it through the ``EditorHandle`` protocol.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: EventKind
    document: Document | None = None
    editor: Any = None
