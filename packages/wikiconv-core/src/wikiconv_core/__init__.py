"""wikiconv core - wikilink rewriting, folder scopes, and event-driven conversion."""

from wikiconv_core.config import ConverterSettings, WikiconvConfig, load_config
from wikiconv_core.controller import ConversionController
from wikiconv_core.formatter import format_links, has_placeholder
from wikiconv_core.models import (
    ConversionResult,
    Document,
    DocumentStoreError,
    EventKind,
    HostEvent,
)
from wikiconv_core.scope import ROOT_SCOPE, is_in_scope

__version__ = "0.1.0"

__all__ = [
    "ROOT_SCOPE",
    "ConversionController",
    "ConversionResult",
    "ConverterSettings",
    "Document",
    "DocumentStoreError",
    "EventKind",
    "HostEvent",
    "WikiconvConfig",
    "format_links",
    "has_placeholder",
    "is_in_scope",
    "load_config",
]
