"""Document and settings store interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from wikiconv_core.config.models import ConverterSettings


class VaultEntry(BaseModel):
    """A file known to the host, with the folder that contains it."""

    model_config = ConfigDict(frozen=True)

    path: str
    parent_path: str = ""


@runtime_checkable
class DocumentStore(Protocol):
    """Host-owned note storage. Reads and writes may raise DocumentStoreError."""

    def read(self, path: str) -> str: ...

    def write(self, path: str, text: str) -> None: ...

    def list_all(self) -> list[VaultEntry]: ...


@runtime_checkable
class SettingsStore(Protocol):
    """Persistence for the converter settings record."""

    def load(self) -> ConverterSettings: ...

    def save(self, settings: ConverterSettings) -> None: ...
