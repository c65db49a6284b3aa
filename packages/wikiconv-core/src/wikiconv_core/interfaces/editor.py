"""Live editor surface interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class Cursor(BaseModel):
    """Zero-based line and column of the caret."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(default=0, ge=0)
    ch: int = Field(default=0, ge=0)


@runtime_checkable
class EditorHandle(Protocol):
    """Unsaved buffer of the note open in the editor."""

    def get_value(self) -> str: ...

    def set_value(self, text: str) -> None: ...

    def get_cursor(self) -> Cursor: ...

    def set_cursor(self, cursor: Cursor) -> None: ...

    def get_line(self, line: int) -> str: ...
