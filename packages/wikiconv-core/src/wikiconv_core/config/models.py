from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_LINK_FORMAT = "@/blog/{}.md"


class ConverterSettings(BaseModel):
    """User-facing settings of the converter, persisted by the host.

    Serialized with camelCase keys (``autoConvert``, ``linkFormat``...) and
    scopes under ``blogFolders``, so the record stays compatible with the
    editor plugin's data file.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    auto_convert: bool = True
    scopes: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("scopes", "blogFolders"),
        serialization_alias="blogFolders",
    )
    link_format: str = DEFAULT_LINK_FORMAT
    show_success_notice: bool = True

    @field_validator("scopes", mode="before")
    @classmethod
    def coerce_scopes(cls, v: Any) -> list[str]:
        # Older records stored a single folder instead of a list
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            return [str(v)] if v else []
        return [str(item) for item in v]


class WatchConfig(BaseModel):
    debounce_seconds: float = Field(default=0.5, ge=0)
    ignore_dirs: list[str] = Field(default_factory=lambda: [".obsidian", ".git", ".trash"])


class WikiconvConfig(BaseModel):
    vault_path: str = ""
    plugin_id: str = Field(default="wikilink-converter", min_length=1)
    watch: WatchConfig = Field(default_factory=WatchConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
