"""wikiconv.yaml discovery and parsing, with ${VAR} expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import WikiconvConfig

CONFIG_FILENAME = "wikiconv.yaml"


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first: --config, ./wikiconv.yaml, ~/.wikiconv/config.yaml."""
    paths = [Path(CONFIG_FILENAME), Path.home() / ".wikiconv" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def load_config(cli_path: str | None = None) -> WikiconvConfig:
    """Return the config from the first non-empty file found, or the defaults.

    Raises ValueError naming the file (and the offending field, when it is a
    validation problem) if that file cannot be used.
    """
    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: expected a mapping at top level, got {type(raw).__name__}")
        try:
            return WikiconvConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {_describe_errors(e)}") from e

    return WikiconvConfig()


def _read_yaml(path: Path) -> object:
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _describe_errors(error: ValidationError) -> str:
    """One ``dotted.field: message`` entry per validation error."""
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "<root>"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `wikiconv config init`
DEFAULT_CONFIG_TEMPLATE = """\
# wikiconv.yaml

# Obsidian vault to convert (may reference env vars, e.g. ${HOME}/notes)
vault_path: ""

# Plugin folder under .obsidian/plugins/ holding the converter settings (data.json)
plugin_id: "wikilink-converter"

# Watch mode
watch:
  debounce_seconds: 0.5
  ignore_dirs: [".obsidian", ".git", ".trash"]

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
