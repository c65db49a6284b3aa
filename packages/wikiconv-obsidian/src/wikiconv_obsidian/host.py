"""Terminal stand-ins for the editor's notice area and active-file accessor."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from wikiconv_core.models import Document


class RichNotifier:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def notify(self, message: str) -> None:
        self.console.print(f"[bold cyan]wikiconv[/bold cyan] {escape(message)}")


class StaticWorkspace:
    """Workspace whose active document is fixed up front (e.g. a CLI argument)."""

    def __init__(self, document: Document | None = None) -> None:
        self.document = document

    def get_active_document(self) -> Document | None:
        return self.document
