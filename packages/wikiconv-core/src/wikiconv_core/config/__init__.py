from .loader import load_config
from .models import (
    DEFAULT_LINK_FORMAT,
    ConverterSettings,
    WatchConfig,
    WikiconvConfig,
)

__all__ = [
    "DEFAULT_LINK_FORMAT",
    "ConverterSettings",
    "WatchConfig",
    "WikiconvConfig",
    "load_config",
]
