"""Host application services: notices and the active document."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from wikiconv_core.models import Document


@runtime_checkable
class Notifier(Protocol):
    """Fire-and-forget user-visible notices."""

    def notify(self, message: str) -> None: ...


@runtime_checkable
class Workspace(Protocol):
    def get_active_document(self) -> Document | None: ...
